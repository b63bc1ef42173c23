"""Core argument and specification types, with helpers for building specifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ArgType(enum.IntEnum):
    """The kind of a command-line argument or specification entry."""

    INVALID = 0
    FLAG = -13
    OPTION = -12
    VALUE = -11
    GAP = -98
    TACIT = -99


class ParseFlags(enum.IntFlag):
    """Flags that control how command-line arguments are parsed."""

    NONE = 0
    DONT_RECOGNISE_DOUBLEHYPHEN_TO_START_VALUES = 0x00000001
    TREAT_SINGLEHYPHEN_AS_VALUE = 0x00000002
    DONT_EXPAND_WILDCARDS_ON_WINDOWS = 0x00000100
    DO_EXPAND_WILDCARDS_IN_APOSQUOTES_ON_WINDOWS = 0x00000200
    PRESERVE_ORIGINAL_ARGUMENT_ORDER = 0x00000400


@dataclass
class Argument:
    """A parsed command-line argument.

    ``resolved_name`` is the name after alias resolution (or the given name
    when no specification matched), ``given_name`` is the name as typed,
    ``alias_index`` is the index of the matching specification or -1, and
    ``flags`` is reserved for internal bookkeeping.
    """

    resolved_name: str = ""
    given_name: str = ""
    value: str = ""
    type: ArgType = ArgType.INVALID
    cmd_line_index: int = -1
    num_given_hyphens: int = 0
    alias_index: int = -1
    flags: int = 0

    def __str__(self) -> str:
        if self.type is ArgType.FLAG:
            return self.resolved_name
        if self.type is ArgType.OPTION:
            return f"{self.resolved_name}={self.value}"
        if self.type is ArgType.VALUE:
            return self.value
        return ""

    def is_treated_hyphen(self) -> bool:
        """True when this argument is a lone hyphen that was turned into a value."""
        return bool(self.given_name)


@dataclass(frozen=True)
class Specification:
    """A flag/option specification, alias, or usage section marker.

    ``type`` is an :class:`ArgType`, or a plain integer for numbered
    sections. ``mapped_argument`` may carry a default value, as in
    ``"--width=10"``. ``value_set`` is a separator-delimited list whose first
    character is the separator; a trailing separator means any other value
    is also accepted.
    """

    type: ArgType | int
    name: str | None = None
    mapped_argument: str | None = None
    help: str | None = None
    value_set: str | None = None
    bit_flags: int = 0


def _as_argtype(number: int) -> ArgType | int:
    try:
        return ArgType(number)
    except ValueError:
        return number


def flag(alias: str | None, mapped_argument: str, help: str | None) -> Specification:
    """A flag specification, e.g. ``flag("-i", "--ignore-case", "...")``."""
    return Specification(ArgType.FLAG, alias, mapped_argument, help, None, 0)


def bit_flag(
    alias: str | None, mapped_argument: str, bit_flags: int, help: str | None
) -> Specification:
    """A flag specification that carries bit-flag(s) for the application."""
    return Specification(ArgType.FLAG, alias, mapped_argument, help, None, bit_flags)


def flag_alias(alias: str | None, mapped_argument: str) -> Specification:
    """A flag specification without help text."""
    return flag(alias, mapped_argument, None)


def option(
    alias: str | None,
    mapped_argument: str,
    help: str | None,
    value_set: str | None,
) -> Specification:
    """An option specification, e.g. ``option("-v", "--verbosity", "...", "|low|high")``."""
    return Specification(ArgType.OPTION, alias, mapped_argument, help, value_set, 0)


def option_alias(alias: str | None, mapped_argument: str) -> Specification:
    """An option specification without help text or value set."""
    return option(alias, mapped_argument, None, None)


def section(number: int) -> Specification:
    """A numbered group section; negative sections are not shown in usage."""
    return Specification(_as_argtype(int(number)))


def tacit_section() -> Specification:
    """A section marker after which items are not shown in usage."""
    return section(ArgType.TACIT)


def gap_section(label: str) -> Specification:
    """A labelled section shown in usage; the label may be empty."""
    return Specification(ArgType.GAP, None, None, label, None, 0)