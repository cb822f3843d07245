"""Settings attached to an option, flag or positional option."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


def default_validator(value: Any) -> None:
    """Accept every value."""
    return None


@dataclass(frozen=True, kw_only=True)
class Config:
    """How an option is identified, described and checked.

    ``short_id`` is a single character (empty when unset); ``long_id`` is the
    name used with two dashes.  ``validator`` is called with the parsed value
    and raises when the value is not acceptable.
    """

    short_id: str = ""
    long_id: str = ""
    description: str = ""
    default_message: str = ""
    advanced: bool = False
    hidden: bool = False
    required: bool = False
    validator: Callable[[Any], Any] = default_validator

    def __post_init__(self) -> None:
        if not isinstance(self.short_id, str) or len(self.short_id) > 1:
            raise ValueError(f"short_id must be a single character, got {self.short_id!r}")
        if not isinstance(self.long_id, str):
            raise TypeError(f"long_id must be a string, got {self.long_id!r}")
        if not callable(self.validator):
            raise TypeError("The validator passed to Config must be callable")