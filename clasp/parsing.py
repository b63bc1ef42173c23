"""Parsing of command-line arguments into flags, options and values."""

from __future__ import annotations

import re
from itertools import islice
from typing import Iterable, Sequence

from clasp.types import Argument, ArgType, ParseFlags, Specification

_NAMED_TYPES = (ArgType.FLAG, ArgType.OPTION)
_POSITIVE_VALUES = frozenset({"yes", "true"})


def _split(text: str) -> tuple[str, str, bool]:
    name, sep, value = text.partition("=")
    return name, value, bool(sep)


def _count_hyphens(text: str) -> int:
    return len(text) - len(text.lstrip("-"))


def _active_specifications(
    specifications: Iterable[Specification] | None,
) -> tuple[Specification, ...]:
    """The specifications up to, but not including, any terminator entry."""
    active = []
    for spec in specifications or ():
        if spec.type == ArgType.INVALID:
            break
        active.append(spec)
    return tuple(active)


def _find_specification(
    specifications: Sequence[Specification], given_name: str
) -> tuple[int, Specification, bool] | None:
    """Find the specification for a given name.

    Alias names are matched first, then the names of mapped arguments. The
    result holds the index, the specification and whether the alias name
    matched.
    """
    named = [
        (index, spec)
        for index, spec in enumerate(specifications)
        if spec.type in _NAMED_TYPES
    ]
    for index, spec in named:
        if spec.name and spec.name == given_name:
            return index, spec, True
    for index, spec in named:
        if spec.mapped_argument and _split(spec.mapped_argument)[0] == given_name:
            return index, spec, False
    return None


def _expand_combined_flags(
    given: str, cmd_line_index: int, specifications: Sequence[Specification]
) -> list[Argument] | None:
    """Expand ``-abc`` into its single-letter aliases, if every letter is one."""
    expanded = []
    for letter in given[1:]:
        alias = "-" + letter
        match = _find_specification(specifications, alias)
        if match is None or not match[2]:
            return None
        alias_index, spec, _ = match
        mapped = spec.mapped_argument or alias
        name, value, has_value = _split(mapped)
        if has_value:
            arg_type = ArgType.OPTION
        elif spec.type == ArgType.FLAG:
            arg_type = ArgType.FLAG
        else:
            return None
        expanded.append(
            Argument(
                resolved_name=name,
                given_name=alias,
                value=value,
                type=arg_type,
                cmd_line_index=cmd_line_index,
                num_given_hyphens=1,
                alias_index=alias_index,
            )
        )
    return expanded


class Arguments:
    """The parsed and sorted arguments of a command line.

    ``arguments`` holds every argument (flags and options first, then values,
    unless the original order was preserved); ``flags``, ``options``,
    ``values`` and ``flags_and_options`` are the corresponding subsets.
    """

    def __init__(
        self,
        argv: Sequence[str],
        parsed: Sequence[Argument],
        specifications: Sequence[Specification],
        flags: ParseFlags,
    ) -> None:
        self.argv = tuple(argv)
        self.specifications = tuple(specifications)
        self.program_name = re.split(r"[\\/]", self.argv[0])[-1]
        self.flags = [a for a in parsed if a.type is ArgType.FLAG]
        self.options = [a for a in parsed if a.type is ArgType.OPTION]
        self.values = [a for a in parsed if a.type is ArgType.VALUE]
        self.flags_and_options = [a for a in parsed if a.type in _NAMED_TYPES]
        if flags & ParseFlags.PRESERVE_ORIGINAL_ARGUMENT_ORDER:
            self.arguments = list(parsed)
        else:
            self.arguments = self.flags_and_options + self.values
        self._used: set[int] = set()

    def __repr__(self) -> str:
        return f"Arguments(program_name={self.program_name!r}, arguments={self.arguments!r})"

    # usage tracking

    def use_argument(self, argument: Argument) -> None:
        """Mark the given argument as used."""
        self._used.add(id(argument))

    def is_used(self, argument: Argument) -> bool:
        """Whether the given argument has been marked as used."""
        return id(argument) in self._used

    def _unused(self, arguments: Iterable[Argument]) -> list[Argument]:
        return [a for a in arguments if not self.is_used(a)]

    def unused_flags(self) -> list[Argument]:
        """Flags not yet marked as used."""
        return self._unused(self.flags)

    def unused_options(self) -> list[Argument]:
        """Options not yet marked as used."""
        return self._unused(self.options)

    def unused_flags_and_options(self) -> list[Argument]:
        """Flags and options not yet marked as used."""
        return self._unused(self.flags_and_options)

    def unused_values(self) -> list[Argument]:
        """Values not yet marked as used."""
        return self._unused(self.values)

    def unused_arguments(self) -> list[Argument]:
        """All arguments not yet marked as used."""
        return self._unused(self.arguments)

    # queries

    def find_flag_or_option(self, mapped_name: str, skip: int = 0) -> Argument | None:
        """The flag/option with the given resolved name, after skipping ``skip`` matches.

        A found argument is marked as used.
        """
        matches = (a for a in self.flags_and_options if a.resolved_name == mapped_name)
        found = next(islice(matches, skip, None), None)
        if found is not None:
            self.use_argument(found)
        return found

    def flag_is_specified(self, mapped_name: str) -> bool:
        """Whether a flag with the given resolved name is present; marks it used."""
        found = False
        for argument in self.flags:
            if argument.resolved_name == mapped_name:
                self.use_argument(argument)
                found = True
        return found

    def check_flag(self, mapped_name: str, flag: int) -> int:
        """Return ``flag`` if the flag is specified, or an option of that name is
        ``yes``/``true``; otherwise 0. The last occurrence decides, and every
        occurrence is marked as used.
        """
        result = 0
        for argument in self.flags_and_options:
            if argument.resolved_name != mapped_name:
                continue
            self.use_argument(argument)
            if argument.type is ArgType.FLAG:
                result = flag
            else:
                result = flag if argument.value.lower() in _POSITIVE_VALUES else 0
        return result

    def _check_flag_specifications(
        self,
        specifications: Iterable[Specification],
        bit_mask: int | None,
        bit_flags: int | None,
    ) -> int:
        bits = bit_flags or 0
        for spec in _active_specifications(specifications):
            if spec.type != ArgType.FLAG or not spec.mapped_argument:
                continue
            if bit_mask is not None and not spec.bit_flags & bit_mask:
                continue
            bits |= self.check_flag(_split(spec.mapped_argument)[0], spec.bit_flags)
        return bits

    def check_all_flags(
        self, specifications: Iterable[Specification], bit_flags: int | None = None
    ) -> int:
        """OR the bit-flags of every specified flag into ``bit_flags`` and return it."""
        return self._check_flag_specifications(specifications, None, bit_flags)

    def check_all_matching_flags(
        self,
        specifications: Iterable[Specification],
        bit_mask: int,
        bit_flags: int | None = None,
    ) -> int:
        """As :meth:`check_all_flags`, for flags whose bit-flags meet ``bit_mask``."""
        return self._check_flag_specifications(specifications, bit_mask, bit_flags)

    def unrecognised_flags_and_options(
        self, specifications: Iterable[Specification]
    ) -> list[Argument]:
        """Flags and options matching no name in the given specifications."""
        known: set[str] = set()
        for spec in _active_specifications(specifications):
            if spec.type not in _NAMED_TYPES:
                continue
            if spec.name:
                known.add(spec.name)
            if spec.mapped_argument:
                known.add(_split(spec.mapped_argument)[0])
        return [
            a
            for a in self.flags_and_options
            if a.resolved_name not in known and a.given_name not in known
        ]

    def check_value(self, index: int) -> Argument | None:
        """The value argument at ``index``, or None if there is none."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return None


def parse_arguments(
    argv: Sequence[str],
    specifications: Iterable[Specification] | None = None,
    flags: ParseFlags | int = ParseFlags.NONE,
) -> Arguments:
    """Parse ``argv`` (program name first) into an :class:`Arguments`."""
    argv = list(argv)
    if not argv:
        raise ValueError("argv must contain at least the program name")
    specs = _active_specifications(specifications)
    flags = ParseFlags(flags)
    recognise_double_hyphen = not flags & ParseFlags.DONT_RECOGNISE_DOUBLEHYPHEN_TO_START_VALUES
    hyphen_is_value = bool(flags & ParseFlags.TREAT_SINGLEHYPHEN_AS_VALUE)

    parsed: list[Argument] = []
    values_only = False
    index = 1
    while index < len(argv):
        text = argv[index]
        if values_only or not text.startswith("-"):
            parsed.append(Argument(value=text, type=ArgType.VALUE, cmd_line_index=index))
        elif text == "--" and recognise_double_hyphen:
            values_only = True
        elif text == "-":
            if hyphen_is_value:
                parsed.append(Argument("-", "-", "-", ArgType.VALUE, index, 1))
            else:
                parsed.append(Argument("-", "-", "", ArgType.FLAG, index, 1))
        else:
            index += _parse_named(argv, index, specs, parsed)
        index += 1

    return Arguments(argv, parsed, specs, flags)


def _parse_named(
    argv: Sequence[str],
    index: int,
    specifications: Sequence[Specification],
    parsed: list[Argument],
) -> int:
    """Parse the hyphenated argument at ``index``; return how many extra were consumed."""
    text = argv[index]
    hyphens = _count_hyphens(text)
    given, explicit_value, has_value = _split(text)
    match = _find_specification(specifications, given)

    if match is None:
        if not has_value and hyphens == 1 and len(given) > 2:
            expanded = _expand_combined_flags(given, index, specifications)
            if expanded:
                parsed.extend(expanded)
                return 0
        arg_type = ArgType.OPTION if has_value else ArgType.FLAG
        parsed.append(Argument(given, given, explicit_value, arg_type, index, hyphens))
        return 0

    alias_index, spec, by_alias = match
    resolved, mapped_value, mapped_has_value = _split(spec.mapped_argument or given)
    consumed = 0
    if has_value:
        arg_type, value = ArgType.OPTION, explicit_value
    elif by_alias and mapped_has_value:
        arg_type, value = ArgType.OPTION, mapped_value
    elif spec.type == ArgType.OPTION:
        arg_type = ArgType.OPTION
        if index + 1 < len(argv):
            value = argv[index + 1]
            consumed = 1
        else:
            value = mapped_value
    else:
        arg_type, value = ArgType.FLAG, ""

    parsed.append(
        Argument(
            resolved_name=resolved,
            given_name=given,
            value=value,
            type=arg_type,
            cmd_line_index=index,
            num_given_hyphens=hyphens,
            alias_index=alias_index,
        )
    )
    return consumed