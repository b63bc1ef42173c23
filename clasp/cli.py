"""A small command that parses its arguments and lists the flags, options and values."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from clasp.parsing import Arguments, parse_arguments
from clasp.types import (
    ParseFlags,
    Specification,
    flag,
    gap_section,
    option,
    option_alias,
)
from clasp.usage import VersionInfo, show_usage

PROGRAM_NAME = "prg"
VERSION = VersionInfo(1, 0, 1)

SPECIFICATIONS: tuple[Specification, ...] = (
    gap_section("filtering:"),
    flag("-a", "--all", "equivalent to -bclt"),
    option(None, "--strip-blanks=multiple", "causes blank lines in the input to be stripped", "|all|multiple|no"),
    option_alias("-b", "--strip-blanks=all"),
    option_alias("-B", "--strip-blanks=no"),
    option(None, "--strip-comments=yes", "causes comments in the input to be stripped", "|yes|no"),
    option_alias("-c", "--strip-comments=yes"),
    option_alias("-C", "--strip-comments=no"),
    option(None, "--trim-leading-whitespace=yes", "causes leading whitespace to be trimmed", "|yes|no"),
    option_alias("-l", "--trim-leading-whitespace=yes"),
    option_alias("-L", "--trim-leading-whitespace=no"),
    option(None, "--trim-trailing-whitespace=yes", "causes trailing whitespace to be trimmed", "|yes|no"),
    option_alias("-t", "--trim-trailing-whitespace=yes"),
    option_alias("-T", "--trim-trailing-whitespace=no"),
    gap_section("history:"),
    option(
        "-h",
        "--histfile",
        "specifies a file into which will be written the history of each "
        "modification made to the input stream that will cause the output to differ",
        "",
    ),
    flag("-e", "--relative", "use relative paths in history"),
    gap_section("standard flags:"),
    flag(None, "--help", "show this help and quit"),
    flag(None, "--version", "show version and quit"),
)


def _show_help(args: Arguments, stream: TextIO) -> None:
    show_usage(
        args,
        SPECIFICATIONS,
        PROGRAM_NAME,
        "SystemTools",
        None,
        "Exercises command-line argument sorting and parsing",
        f"{PROGRAM_NAME} [... options ...] [<infile> | -] [<outfile> | -]",
        VERSION,
        None,
        None,
        stream,
        0,
        76,
        -2,
        1,
    )


def _report(args: Arguments, stream: TextIO) -> None:
    print(file=stream)
    print(f"flags:\t{len(args.flags)}", file=stream)
    for i, arg in enumerate(args.flags):
        print(f"flag-{i:02d}:\t{arg.given_name}\t{arg.resolved_name}", file=stream)

    print(file=stream)
    print(f"options:\t{len(args.options)}", file=stream)
    for i, arg in enumerate(args.options):
        print(
            f"option-{i:02d}:\t{arg.given_name}\t{arg.resolved_name}\t=\t{arg.value}",
            file=stream,
        )

    print(file=stream)
    print(f"values:\t{len(args.values)}", file=stream)
    for i, arg in enumerate(args.values):
        print(f"value-{i:02d}:\t{arg.value}", file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` (without the program name) and show help or the parsed arguments."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_arguments([PROGRAM_NAME, *argv], SPECIFICATIONS, ParseFlags.NONE)
    except ValueError as exc:
        print(f"failed to initialise : {exc}", file=sys.stderr)
        return 1

    if args.flag_is_specified("--help"):
        _show_help(args, sys.stdout)
    else:
        _report(args, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())