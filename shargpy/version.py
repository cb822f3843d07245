"""Library version numbers and their textual forms."""

VERSION_MAJOR = 1
VERSION_MINOR = 1
VERSION_PATCH = 2
#: 0 means a stable release, 1 or more a release candidate.
RELEASE_CANDIDATE = 1


def version_number(major: int, minor: int, patch: int) -> int:
    """Return the version packed into one integer: MMmmpp."""
    return major * 10000 + minor * 100 + patch


def version_string(major: int, minor: int, patch: int, release_candidate: int = 0) -> str:
    """Return the version as text, with an ``-rc.N`` suffix for release candidates."""
    text = f"{major}.{minor}.{patch}"
    if release_candidate > 0:
        text += f"-rc.{release_candidate}"
    return text


SHARG_VERSION = version_number(VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)
SHARG_VERSION_STRING = version_string(VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH, RELEASE_CANDIDATE)