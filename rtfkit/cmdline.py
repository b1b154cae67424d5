"""A small command-line option parser with typed values and usage text."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_TYPE_NAMES = {str: "string", int: "int", float: "double", bool: "bool"}


class CmdlineError(Exception):
    """Raised for misuse of the parser or an invalid option value."""


def _type_name(value_type: type) -> str:
    return _TYPE_NAMES.get(value_type, value_type.__name__)


def _lexical_cast(value_type: type, text: str) -> Any:
    """Convert ``text`` strictly: the whole string must be consumed."""
    if value_type is str:
        return text
    stripped = text.lstrip()
    if not stripped or text.rstrip() != text:
        raise ValueError(f"cannot convert {text!r} to {_type_name(value_type)}")
    if value_type is bool:
        if stripped == "1":
            return True
        if stripped == "0":
            return False
        raise ValueError(f"cannot convert {text!r} to bool")
    if value_type is int:
        if not _INT_RE.fullmatch(stripped):
            raise ValueError(f"cannot convert {text!r} to int")
        return int(stripped)
    if value_type is float:
        if not _FLOAT_RE.fullmatch(stripped):
            raise ValueError(f"cannot convert {text!r} to double")
        return float(stripped)
    return value_type(text)


def _format_default(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass
class _RangeReader:
    low: Any
    high: Any
    value_type: type

    def __call__(self, text: str) -> Any:
        value = _lexical_cast(self.value_type, text)
        if not (self.low <= value <= self.high):
            raise CmdlineError("range_error")
        return value


@dataclass
class _OneOfReader:
    choices: tuple
    value_type: type

    def __call__(self, text: str) -> Any:
        value = _lexical_cast(self.value_type, text)
        if value not in self.choices:
            raise CmdlineError("")
        return value


def in_range(low: Any, high: Any, cast: type | None = None) -> _RangeReader:
    """Reader accepting values between ``low`` and ``high`` inclusive."""
    return _RangeReader(low, high, cast if cast is not None else type(low))


def one_of(*args: Any) -> _OneOfReader:
    """Reader accepting only the given values."""
    if not args:
        raise ValueError("one_of() needs at least one value")
    return _OneOfReader(tuple(args), type(args[0]))


@dataclass
class _Option:
    name: str
    short_name: str
    description: str
    takes_value: bool = False
    required: bool = False
    value_type: type = str
    default: Any = None
    reader: Callable[[str], Any] | None = None
    value: Any = None
    is_set: bool = False
    full_description: str = field(init=False, default="")

    def __post_init__(self) -> None:
        if self.takes_value:
            extra = "" if self.required else f" [={_format_default(self.default)}]"
            self.full_description = (
                f"{self.description} ({_type_name(self.value_type)}{extra})"
            )
            self.value = self.default
        else:
            self.full_description = self.description

    def set_flag(self) -> bool:
        if self.takes_value:
            return False
        self.is_set = True
        return True

    def set_value(self, text: str) -> bool:
        if not self.takes_value:
            return False
        try:
            self.value = self.reader(text)
        except Exception:
            return False
        self.is_set = True
        return True

    def valid(self) -> bool:
        return not (self.required and not self.is_set)

    def short_description(self) -> str:
        if self.takes_value:
            return f"--{self.name}={_type_name(self.value_type)}"
        return f"--{self.name}"


class Parser:
    """Declares options, parses an argument vector and renders usage."""

    def __init__(self, program_name: str = "") -> None:
        self.program_name = program_name
        self._options: dict[str, _Option] = {}
        self._ordered: list[_Option] = []
        self._footer = ""
        self._others: list[str] = []
        self._errors: list[str] = []

    def _register(self, option: _Option) -> None:
        if option.name in self._options:
            raise CmdlineError(f"multiple definition: {option.name}")
        self._options[option.name] = option
        self._ordered.append(option)

    def add(self, name: str, short_name: str = "", description: str = "") -> None:
        """Declare a flag that takes no value."""
        self._register(_Option(name, short_name or "", description))

    def add_value(
        self,
        name: str,
        short_name: str = "",
        description: str = "",
        required: bool = True,
        default: Any = None,
        reader: Callable[[str], Any] | None = None,
    ) -> None:
        """Declare an option taking a value, read by ``reader``.

        The value type comes from ``default``, else from the reader, else str.
        """
        if default is not None:
            value_type = type(default)
        else:
            value_type = getattr(reader, "value_type", str)
            default = value_type()
        if reader is None:
            def reader(text: str, _t: type = value_type) -> Any:
                return _lexical_cast(_t, text)
        self._register(
            _Option(
                name,
                short_name or "",
                description,
                takes_value=True,
                required=required,
                value_type=value_type,
                default=default,
                reader=reader,
            )
        )

    def footer(self, text: str) -> None:
        """Set the text shown after the options in the usage line."""
        self._footer = text

    def _lookup(self, name: str) -> _Option:
        try:
            return self._options[name]
        except KeyError:
            raise CmdlineError(f"there is no flag: --{name}") from None

    def exist(self, name: str) -> bool:
        """Whether option ``name`` was given."""
        return self._lookup(name).is_set

    def get(self, name: str) -> Any:
        """Return the value of option ``name``."""
        option = self._lookup(name)
        if not option.takes_value:
            raise CmdlineError(f"type mismatch flag '{name}'")
        return option.value

    def rest(self) -> list[str]:
        """Arguments that were not options."""
        return list(self._others)

    def parse_line(self, arg: str) -> bool:
        """Split ``arg`` into words and parse them; the first is the program."""
        args: list[str] = []
        buf: list[str] = []
        in_quote = False
        chars = iter(arg)
        for ch in chars:
            if ch == '"':
                in_quote = not in_quote
                continue
            if ch == " " and not in_quote:
                args.append("".join(buf))
                buf = []
                continue
            if ch == "\\":
                ch = next(chars, None)
                if ch is None:
                    self._errors = ["unexpected occurrence of '\\' at end of string"]
                    return False
            buf.append(ch)
        if in_quote:
            self._errors = ["quote is not closed"]
            return False
        if buf:
            args.append("".join(buf))
        return self.parse(args)

    def _set_flag(self, name: str) -> None:
        option = self._options.get(name)
        if option is None:
            self._errors.append(f"undefined option: --{name}")
        elif not option.set_flag():
            self._errors.append(f"option needs value: --{name}")

    def _set_value(self, name: str, value: str) -> None:
        option = self._options.get(name)
        if option is None:
            self._errors.append(f"undefined option: --{name}")
        elif not option.set_value(value):
            self._errors.append(f"option value is invalid: --{name}={value}")

    def parse(self, args: Iterable[str]) -> bool:
        """Parse ``args`` (program name first); return whether it had no errors."""
        args = list(args)
        self._errors = []
        self._others = []
        if not args:
            self._errors.append("argument number must be longer than 0")
            return False
        if not self.program_name:
            self.program_name = args[0]

        shorts: dict[str, str] = {}
        for name in sorted(self._options):
            if not name:
                continue
            initial = self._options[name].short_name
            if initial:
                if initial in shorts:
                    self._errors.append(f"short option '{initial}' is ambiguous")
                    return False
                shorts[initial] = name

        remaining = iter(args[1:])
        for arg in remaining:
            if arg.startswith("--"):
                name, sep, value = arg[2:].partition("=")
                if sep:
                    self._set_value(name, value)
                    continue
                option = self._options.get(name)
                if option is None:
                    self._errors.append(f"undefined option: --{name}")
                elif option.takes_value:
                    following = next(remaining, None)
                    if following is None:
                        self._errors.append(f"option needs value: --{name}")
                    else:
                        self._set_value(name, following)
                else:
                    self._set_flag(name)
            elif arg.startswith("-"):
                letters = arg[1:]
                if not letters:
                    continue
                for letter in letters[:-1]:
                    if letter not in shorts:
                        self._errors.append(f"undefined short option: -{letter}")
                        continue
                    self._set_flag(shorts[letter])
                last = letters[-1]
                if last not in shorts:
                    self._errors.append(f"undefined short option: -{last}")
                    continue
                name = shorts[last]
                if self._options[name].takes_value:
                    following = next(remaining, None)
                    if following is not None:
                        self._set_value(name, following)
                        continue
                self._set_flag(name)
            else:
                self._others.append(arg)

        for name in sorted(self._options):
            if not self._options[name].valid():
                self._errors.append(f"need option: --{name}")
        return not self._errors

    def parse_check(self, args: Iterable[str]) -> None:
        """Parse ``args``; print usage and exit on ``--help`` or on errors."""
        args = list(args)
        if "help" not in self._options:
            self.add("help", "?", "print this message")
        ok = self.parse(args)
        if (len(args) == 1 and not ok) or self.exist("help"):
            sys.stderr.write(self.usage())
            raise SystemExit(0)
        if not ok:
            sys.stderr.write(self.error() + "\n" + self.usage())
            raise SystemExit(1)

    def error(self) -> str:
        """The first error of the last parse, or an empty string."""
        return self._errors[0] if self._errors else ""

    def error_full(self) -> str:
        """Every error of the last parse, one per line."""
        return "".join(f"{message}\n" for message in self._errors)

    def usage(self) -> str:
        """The usage text listing every declared option."""
        required = "".join(
            f"{option.short_description()} " for option in self._ordered if option.required
        )
        lines = [f"usage: {self.program_name} {required}[options] ... {self._footer}\n"]
        lines.append("options:\n")
        width = max((len(option.name) for option in self._ordered), default=0) + 4
        for option in self._ordered:
            prefix = f"  -{option.short_name}, " if option.short_name else "      "
            lines.append(
                f"{prefix}--{option.name.ljust(width)}{option.full_description}\n"
            )
        return "".join(lines)