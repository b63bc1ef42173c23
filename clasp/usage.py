"""Usage, header, body and version display for command-line tools."""

from __future__ import annotations

import sys
import textwrap
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from clasp.parsing import Arguments
from clasp.types import ArgType, Specification

_NAMED_TYPES = (ArgType.FLAG, ArgType.OPTION)


@dataclass(frozen=True)
class VersionInfo:
    """The version of a tool."""

    major: int = 0
    minor: int = 0
    revision: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.revision}"


@dataclass(frozen=True)
class UsageInfo:
    """Everything a header, body or version writer needs to know.

    ``width`` below zero means an unlimited line width. ``assumed_tab_width``
    above zero means TABs are used for indentation and counted as that many
    columns; below zero means exactly that many SPACEs per indentation level;
    zero means TABs with no line-wrapping.
    """

    version: VersionInfo
    tool_name: str | None = None
    summary: str | None = None
    copyright: str | None = None
    description: str | None = None
    usage: str | None = None
    flags: int = 0
    param: Any = None
    width: int = -1
    assumed_tab_width: int = 0
    blanks_between_items: int = 0

    def indent(self, level: int) -> str:
        """The indentation text for the given nesting level."""
        if self.assumed_tab_width < 0:
            return " " * (-self.assumed_tab_width * level)
        return "\t" * level

    def indent_width(self, level: int) -> int:
        """The number of columns the indentation of ``level`` occupies."""
        return abs(self.assumed_tab_width) * level

    @property
    def wraps(self) -> bool:
        """Whether long lines are wrapped to ``width``."""
        return self.width > 0 and self.assumed_tab_width != 0


UsageWriter = Callable[[Any, UsageInfo, Sequence[Specification]], None]


def _as_version(version: VersionInfo | Iterable[int] | None) -> VersionInfo:
    if version is None:
        return VersionInfo()
    if isinstance(version, VersionInfo):
        return version
    return VersionInfo(*version)


def _active(specifications: Iterable[Specification] | None) -> tuple[Specification, ...]:
    active = []
    for spec in specifications or ():
        if spec.type == ArgType.INVALID:
            break
        active.append(spec)
    return tuple(active)


def _stream(info: UsageInfo):
    return info.param if info.param is not None else sys.stdout


def _base_name(mapped: str | None) -> str:
    return (mapped or "").partition("=")[0]


def _write_wrapped(stream, info: UsageInfo, level: int, text: str) -> None:
    prefix = info.indent(level)
    available = info.width - info.indent_width(level)
    if info.wraps and available > 0:
        for line in textwrap.wrap(text, available) or [""]:
            print(prefix + line, file=stream)
    else:
        print(prefix + text, file=stream)


def _write_version(args: Any, info: UsageInfo, specifications: Sequence[Specification]) -> None:
    print(f"{info.tool_name} version {info.version}", file=_stream(info))


def _write_header(args: Any, info: UsageInfo, specifications: Sequence[Specification]) -> None:
    stream = _stream(info)
    if info.summary:
        print(info.summary, file=stream)
    print(f"{info.tool_name}: version {info.version}", file=stream)
    if info.copyright:
        print(info.copyright, file=stream)
    print(file=stream)
    if info.description:
        print(info.description, file=stream)
        print(file=stream)
    if info.usage:
        print(f"USAGE: {info.usage}", file=stream)
        print(file=stream)


def _write_body(args: Any, info: UsageInfo, specifications: Sequence[Specification]) -> None:
    stream = _stream(info)
    hidden = False
    for spec in specifications:
        if spec.type == ArgType.GAP:
            if not hidden:
                print(file=stream)
                if spec.help:
                    print(spec.help, file=stream)
            continue
        if spec.type not in _NAMED_TYPES:
            hidden = int(spec.type) < 0
            continue
        if hidden or spec.help is None:
            continue

        base = _base_name(spec.mapped_argument)
        if spec.name:
            print(info.indent(1) + spec.name, file=stream)
        for alias in specifications:
            if (
                alias is not spec
                and alias.type in _NAMED_TYPES
                and alias.help is None
                and alias.name
                and _base_name(alias.mapped_argument) == base
            ):
                line = alias.name
                if alias.mapped_argument and "=" in alias.mapped_argument:
                    line += " " + alias.mapped_argument
                print(info.indent(1) + line, file=stream)
        if spec.type == ArgType.OPTION:
            print(f"{info.indent(1)}{base}=<value>", file=stream)
        else:
            print(info.indent(1) + base, file=stream)
        if spec.help:
            _write_wrapped(stream, info, 2, spec.help)
        if spec.type == ArgType.OPTION and spec.value_set:
            separator, choices = spec.value_set[0], spec.value_set[1:]
            values = choices.split(separator)
            open_ended = bool(values) and values[-1] == ""
            values = [v for v in values if v]
            if values:
                print(f"{info.indent(2)}where <value> is one of:", file=stream)
                for value in values:
                    print(info.indent(3) + value, file=stream)
                if open_ended:
                    print(info.indent(3) + "<any other value>", file=stream)
        for _ in range(max(info.blanks_between_items, 0)):
            print(file=stream)


def count_specifications(specifications: Iterable[Specification] | None) -> int:
    """The number of specifications before any terminator entry."""
    return len(_active(specifications))


def _make_info(
    tool_name, summary, copyright, description, usage, version,
    param, flags, console_width, tab_size, blanks_between_items,
) -> UsageInfo:
    return UsageInfo(
        version=_as_version(version),
        tool_name=tool_name,
        summary=summary,
        copyright=copyright,
        description=description,
        usage=usage,
        flags=flags,
        param=param,
        width=console_width,
        assumed_tab_width=tab_size,
        blanks_between_items=blanks_between_items,
    )


def show_usage(
    args: Arguments | None,
    specifications: Iterable[Specification] | None,
    tool_name: str | None,
    summary: str | None,
    copyright: str | None,
    description: str | None,
    usage: str | None,
    version: VersionInfo | Iterable[int] | None = None,
    header_fn: UsageWriter | None = None,
    body_fn: UsageWriter | None = None,
    param: Any = None,
    flags: int = 0,
    console_width: int = 76,
    tab_size: int = -4,
    blanks_between_items: int = 0,
) -> UsageInfo:
    """Show the header and then the body of the tool's usage.

    A writer of None writes to ``param`` as a text stream (standard output
    when ``param`` is None). Returns the information given to the writers.
    """
    info = _make_info(
        tool_name, summary, copyright, description, usage, version,
        param, flags, console_width, tab_size, blanks_between_items,
    )
    specs = _active(specifications)
    (header_fn or _write_header)(args, info, specs)
    (body_fn or _write_body)(args, info, specs)
    return info


def show_header(
    args: Arguments | None,
    specifications: Iterable[Specification] | None,
    tool_name: str | None,
    summary: str | None,
    copyright: str | None,
    description: str | None,
    usage: str | None,
    version: VersionInfo | Iterable[int] | None = None,
    header_fn: UsageWriter | None = None,
    param: Any = None,
    flags: int = 0,
    console_width: int = 76,
    tab_size: int = -4,
    blanks_between_items: int = 0,
) -> UsageInfo:
    """Show the header of the tool's usage."""
    info = _make_info(
        tool_name, summary, copyright, description, usage, version,
        param, flags, console_width, tab_size, blanks_between_items,
    )
    (header_fn or _write_header)(args, info, _active(specifications))
    return info


def show_body(
    args: Arguments | None,
    specifications: Iterable[Specification] | None,
    body_fn: UsageWriter | None = None,
    param: Any = None,
    flags: int = 0,
    console_width: int = 76,
    tab_size: int = -4,
    blanks_between_items: int = 0,
) -> UsageInfo:
    """Show the body of the tool's usage: the flags and options."""
    info = _make_info(
        None, None, None, None, None, None,
        param, flags, console_width, tab_size, blanks_between_items,
    )
    (body_fn or _write_body)(args, info, _active(specifications))
    return info


def show_version(
    args: Arguments | None,
    tool_name: str | None,
    version: VersionInfo | Iterable[int] | None = None,
    version_fn: UsageWriter | None = None,
    param: Any = None,
    flags: int = 0,
) -> UsageInfo:
    """Show the tool's name and version."""
    info = _make_info(
        tool_name, None, None, None, None, version,
        param, flags, -1, 0, 0,
    )
    (version_fn or _write_version)(args, info, ())
    return info