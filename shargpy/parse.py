"""Parsing command line arguments into options, flags and positional options.

Calls that set up the parser are recorded and run in a fixed order when
``FormatParse.parse`` is called: options first, then flags, then
positional options.  Every argument used is blanked out, so that what is
left over at the end can be reported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableMapping, Sequence
from enum import Enum
from pathlib import Path, PurePath
from typing import Any

from .config import Config
from .errors import (
    DesignError,
    OptionDeclaredMultipleTimes,
    RequiredOptionMissing,
    TooFewArguments,
    TooManyArguments,
    UnknownOption,
    ValidationError,
)
from .values import convert_value


def find_option_id(arguments: Sequence[str], option_id: str) -> int | None:
    """Return the position of the first argument naming ``option_id``.

    ``option_id`` carries its dashes: ``-o`` is a short identifier and
    matches ``-o``, ``-ovalue`` and ``-o=value``; ``--out`` is a long one
    and matches ``--out`` and ``--out=value``.  Returns ``None`` when the
    identifier is empty or not found.
    """
    if not option_id:
        return None
    if not option_id.startswith("-"):
        raise ValueError(f"Option identifier {option_id!r} must start with a dash")

    if option_id.startswith("--"):
        prefix = option_id + "="
        matches = (arg == option_id or arg.startswith(prefix) for arg in arguments)
    else:
        matches = (arg.startswith(option_id) for arg in arguments)
    return next((position for position, match in enumerate(matches) if match), None)


def _read(target: Any, name: str) -> Any:
    if isinstance(target, MutableMapping):
        return target[name]
    return getattr(target, name)


def _write(target: Any, name: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def _infer_kind(value: Any) -> Any:
    if isinstance(value, list):
        return _infer_kind(value[0]) if value else str
    if isinstance(value, bool):
        return bool
    if isinstance(value, Enum):
        return type(value)
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, PurePath):
        return Path
    if isinstance(value, str):
        return str
    raise DesignError(f"Cannot tell the value type of {value!r}; pass the kind explicitly.")


def _short(config: Config) -> str:
    return "-" + config.short_id if config.short_id else ""


def _long(config: Config) -> str:
    return "--" + config.long_id if config.long_id else ""


def _combine_option_names(config: Config) -> str:
    short, long = _short(config), _long(config)
    if not short:
        return long
    if not long:
        return short
    return f"{short}/{long}"


def _expand_flags(cluster: str) -> str:
    flags = [f"-{char}" for char in cluster.lstrip("-")]
    return ", ".join(flags[:-1]) + " and " + flags[-1]


class FormatParse:
    """Parses a list of command line arguments into registered targets.

    Each option is stored on ``target`` under ``name``: as an attribute, or
    as a key when ``target`` is a mapping.  A target currently holding a
    list takes any number of values; otherwise the option takes one value.
    """

    def __init__(self, arguments: Iterable[str]) -> None:
        self._arguments = list(arguments)
        self._end = len(self._arguments)
        self._option_calls: list[Callable[[], None]] = []
        self._flag_calls: list[Callable[[], None]] = []
        self._positional_calls: list[Callable[[], None]] = []
        self._positional_count = 0
        self._has_list_positional = False

    def add_option(self, target: Any, name: str, config: Config | None = None, kind: Any = None) -> None:
        """Register an option whose value is stored at ``target``/``name``."""
        config = config if config is not None else Config()
        kind = kind if kind is not None else _infer_kind(_read(target, name))
        self._option_calls.append(lambda: self._get_option(target, name, config, kind))

    def add_flag(self, target: Any, name: str, config: Config | None = None) -> None:
        """Register a flag whose state is stored at ``target``/``name``."""
        config = config if config is not None else Config()
        self._flag_calls.append(lambda: self._get_flag(target, name, config))

    def add_positional_option(
        self, target: Any, name: str, config: Config | None = None, kind: Any = None
    ) -> None:
        """Register a positional option; a list target takes all remaining arguments."""
        config = config if config is not None else Config()
        if config.short_id or config.long_id:
            raise DesignError("Positional options cannot have a short or long identifier.")
        if config.default_message:
            raise DesignError("Positional options cannot have a default message.")
        if config.advanced or config.hidden:
            raise DesignError("Positional options cannot be advanced or hidden.")
        if self._has_list_positional:
            raise DesignError("Only the last positional option may be a list.")

        current = _read(target, name)
        if isinstance(current, list):
            self._has_list_positional = True
        kind = kind if kind is not None else _infer_kind(current)
        self._positional_calls.append(lambda: self._get_positional(target, name, config, kind))

    def parse(self) -> None:
        """Run all registered calls against the arguments."""
        try:
            self._end = self._arguments.index("--")
        except ValueError:
            self._end = len(self._arguments)

        # Options first, so that "-kValue" pairs are taken before flags are looked at.
        for call in self._option_calls:
            call()
        for call in self._flag_calls:
            call()

        self._check_for_unknown_ids()

        if self._end < len(self._arguments):
            self._arguments[self._end] = ""

        for call in self._positional_calls:
            call()

        self._check_for_left_over_args()

    def _find(self, option_id: str, start: int) -> int | None:
        found = find_option_id(self._arguments[start:self._end], option_id)
        return None if found is None else start + found

    def _next_argument(self, start: int) -> int | None:
        return next(
            (index for index, arg in enumerate(self._arguments[start:], start) if arg),
            None,
        )

    def _retrieve(self, option_id: str, index: int, kind: Any) -> tuple[Any, int]:
        """Take the value of the option at ``index``; return it and the last index used."""
        arguments = self._arguments
        arg = arguments[index]
        size = len(option_id)

        if len(arg) > size:
            if arg[size] == "=":
                if len(arg) == size + 1:
                    raise TooFewArguments(f"Missing value for option {option_id}")
                text = arg[size + 1:]
            else:
                text = arg[size:]
            arguments[index] = ""
        else:
            arguments[index] = ""
            index += 1
            if index >= self._end:
                raise TooFewArguments(f"Missing value for option {option_id}")
            text = arguments[index]
            arguments[index] = ""

        return convert_value(kind, text, option_id), index

    def _get_option_by_id(self, target: Any, name: str, option_id: str, kind: Any, is_list: bool) -> bool:
        index = self._find(option_id, 0)
        if index is None:
            return False

        if is_list:
            values = []
            while index is not None:
                value, index = self._retrieve(option_id, index, list[kind])
                values.append(value)
                index = self._find(option_id, index)
            _write(target, name, values)
        else:
            value, index = self._retrieve(option_id, index, kind)
            _write(target, name, value)
            if self._find(option_id, index) is not None:
                raise OptionDeclaredMultipleTimes(
                    f"Option {option_id} is no list/container but declared multiple times."
                )
        return True

    def _get_option(self, target: Any, name: str, config: Config, kind: Any) -> None:
        is_list = isinstance(_read(target, name), list)
        short_is_set = self._get_option_by_id(target, name, _short(config), kind, is_list)
        long_is_set = self._get_option_by_id(target, name, _long(config), kind, is_list)
        names = _combine_option_names(config)

        if short_is_set and long_is_set and not is_list:
            raise OptionDeclaredMultipleTimes(
                f"Option {names} is no list/container but specified multiple times"
            )

        if short_is_set or long_is_set:
            try:
                config.validator(_read(target, name))
            except Exception as error:
                raise ValidationError(f"Validation failed for option {names}: {error}") from error
        elif config.required:
            raise RequiredOptionMissing(f"Option {names} is required but not set.")

    def _short_flag_is_set(self, short_id: str) -> bool:
        # Short flags may be grouped: -rGv is -r -G -v.
        if not short_id:
            return False
        for index, arg in enumerate(self._arguments):
            if len(arg) > 1 and arg[0] == "-" and arg[1] != "-":
                position = arg.find(short_id)
                if position != -1:
                    remaining = arg[:position] + arg[position + 1:]
                    self._arguments[index] = "" if remaining == "-" else remaining
                    return True
        return False

    def _long_flag_is_set(self, long_id: str) -> bool:
        if not long_id:
            return False
        try:
            index = self._arguments.index("--" + long_id, 0, self._end)
        except ValueError:
            return False
        self._arguments[index] = ""
        return True

    def _get_flag(self, target: Any, name: str, config: Config) -> None:
        # The current value comes last: finding a flag removes it from the arguments.
        value = (
            self._short_flag_is_set(config.short_id)
            or self._long_flag_is_set(config.long_id)
            or bool(_read(target, name))
        )
        _write(target, name, value)

    def _get_positional(self, target: Any, name: str, config: Config, kind: Any) -> None:
        self._positional_count += 1
        index = self._next_argument(0)
        if index is None:
            raise TooFewArguments(
                f"Not enough positional arguments provided (Need at least {len(self._positional_calls)}). "
                "See -h/--help for more information."
            )

        if isinstance(_read(target, name), list):
            values = []
            while index is not None:
                option_name = f"positional option{self._positional_count}"
                values.append(convert_value(list[kind], self._arguments[index], option_name))
                self._arguments[index] = ""
                index = self._next_argument(index)
                self._positional_count += 1
            value: Any = values
        else:
            option_name = f"positional option{self._positional_count}"
            value = convert_value(kind, self._arguments[index], option_name)
            self._arguments[index] = ""
        _write(target, name, value)

        try:
            config.validator(value)
        except Exception as error:
            raise ValidationError(
                f"Validation failed for positional option {self._positional_count}: {error}"
            ) from error

    def _check_for_unknown_ids(self) -> None:
        for arg in self._arguments[:self._end]:
            if not arg.startswith("-") or arg == "-":
                continue
            if arg[1] != "-" and len(arg) > 2:
                raise UnknownOption(
                    f"Unknown flags {_expand_flags(arg)}. In case this is meant to be a "
                    "non-option/argument/parameter, please specify the start of arguments with '--'. "
                    "See -h/--help for program information."
                )
            raise UnknownOption(
                f"Unknown option {arg}. In case this is meant to be a non-option/argument/parameter, "
                "please specify the start of non-options with '--'. See -h/--help for program information."
            )

    def _check_for_left_over_args(self) -> None:
        if any(self._arguments):
            raise TooManyArguments("Too many arguments provided. Please see -h/--help for more information.")