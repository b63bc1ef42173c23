import io

import pytest

from clasp.parsing import parse_arguments
from clasp.types import (
    flag,
    gap_section,
    option,
    option_alias,
    tacit_section,
    Specification,
    ArgType,
)
from clasp.usage import (
    UsageInfo,
    VersionInfo,
    count_specifications,
    show_body,
    show_header,
    show_usage,
    show_version,
)


def header_into_memory(args, info, specifications):
    v = info.version
    info.param.append(
        f"T={info.tool_name}; S={info.summary}; C={info.copyright}; "
        f"D={info.description}; U={info.usage}; "
        f"v={v.major}.{v.minor}.{v.revision:02d}.{v.build:04d}"
    )


def body_into_memory(args, info, specifications):
    if info.assumed_tab_width < 0:
        ws = " " * -info.assumed_tab_width
    else:
        ws = "\t"
    for spec in specifications:
        if spec.mapped_argument is None:
            break
        if spec.name:
            info.param.append(f"{ws}{spec.name}\n")
        if spec.mapped_argument:
            info.param.append(f"{ws}{spec.mapped_argument}\n")
        if spec.help:
            info.param.append(f"{ws}{ws}{spec.help}\n")


@pytest.fixture
def args():
    return parse_arguments(["program"])


def test_header_with_literals(args):
    buff = []
    show_header(
        args, None, "toolname", "summary", "copyright", "description", "usage",
        VersionInfo(0, 1, 1), header_into_memory, buff, 0, 76, -4, 0,
    )
    assert "".join(buff) == (
        "T=toolname; S=summary; C=copyright; D=description; U=usage; v=0.1.01.0000"
    )


def test_header_accepts_version_tuple(args):
    buff = []
    info = show_header(
        args, None, "t", "s", "c", "d", "u", (2, 3, 4, 5), header_into_memory, buff,
    )
    assert info.version == VersionInfo(2, 3, 4, 5)
    assert buff == ["T=t; S=s; C=c; D=d; U=u; v=2.3.04.0005"]


def test_body_empty(args):
    buff = []
    show_body(args, [Specification(ArgType.INVALID)], body_into_memory, buff, 0, 100000, -4, 0)
    assert "".join(buff) == ""


def test_body_single_flag(args):
    buff = []
    specs = [flag("-h", "--help", "shows this help and terminates"), Specification(ArgType.INVALID)]
    show_body(args, specs, body_into_memory, buff, 0, 100000, -4, 0)
    assert "".join(buff) == "    -h\n    --help\n        shows this help and terminates\n"


def test_body_two_flags(args):
    buff = []
    specs = [
        flag("-h", "--help", "shows this help and terminates"),
        flag(None, "--version", "shows version and terminates"),
    ]
    show_body(args, specs, body_into_memory, buff, 0, 100000, -4, 0)
    assert "".join(buff) == (
        "    -h\n    --help\n        shows this help and terminates\n"
        "    --version\n        shows version and terminates\n"
    )


def test_body_info_fields(args):
    info = show_body(args, [], lambda a, i, s: None, "p", 3, 80, 8, 2)
    assert (info.param, info.flags, info.width, info.assumed_tab_width, info.blanks_between_items) == (
        "p", 3, 80, 8, 2,
    )


def test_show_usage_calls_header_then_body(args):
    calls = []
    specs = [flag("-h", "--help", "help"), Specification(ArgType.INVALID), flag("-x", "--x", "x")]
    show_usage(
        args, specs, "tool", "sum", "copy", "desc", "use", (1, 0, 1),
        lambda a, i, s: calls.append(("header", i.tool_name, len(s))),
        lambda a, i, s: calls.append(("body", i.usage, len(s))),
        None, 0, 76, -2, 1,
    )
    assert calls == [("header", "tool", 1), ("body", "use", 1)]


def test_show_version_with_writer(args):
    seen = []
    show_version(args, "tool", (1, 2, 3), lambda a, i, s: seen.append((i.tool_name, str(i.version))))
    assert seen == [("tool", "1.2.3")]


def test_show_version_default_writer(args):
    stream = io.StringIO()
    show_version(args, "tool", VersionInfo(1, 0, 1), None, stream)
    assert stream.getvalue() == "tool version 1.0.1\n"


def test_default_header_writer():
    stream = io.StringIO()
    show_header(None, None, "prg", "Summary", "Copyright", "Description", "prg [options]",
                (1, 0, 1), None, stream)
    text = stream.getvalue()
    assert "Summary\n" in text
    assert "prg: version 1.0.1\n" in text
    assert "USAGE: prg [options]\n" in text


def test_default_body_writer_shows_items_and_aliases():
    stream = io.StringIO()
    specs = [
        gap_section("filtering:"),
        option(None, "--strip-blanks=multiple", "strip blanks", "|all|multiple|no"),
        option_alias("-b", "--strip-blanks=all"),
        flag("-e", "--relative", "use relative paths"),
    ]
    show_body(None, specs, None, stream, 0, 76, -2, 0)
    lines = stream.getvalue().splitlines()
    assert "filtering:" in lines
    assert "  -b --strip-blanks=all" in lines
    assert "  --strip-blanks=<value>" in lines
    assert "    strip blanks" in lines
    assert "      multiple" in lines
    assert "  -e" in lines
    assert "  --relative" in lines


def test_default_body_writer_hides_tacit_items():
    stream = io.StringIO()
    specs = [flag(None, "--shown", "visible"), tacit_section(), flag(None, "--hidden", "invisible")]
    show_body(None, specs, None, stream, 0, 76, -4, 0)
    text = stream.getvalue()
    assert "--shown" in text
    assert "--hidden" not in text


def test_default_body_writer_wraps_help():
    stream = io.StringIO()
    specs = [flag(None, "--long", "word " * 30)]
    show_body(None, specs, None, stream, 0, 40, -4, 0)
    help_lines = [line for line in stream.getvalue().splitlines() if line.startswith("        ")]
    assert len(help_lines) > 1
    assert all(len(line) <= 40 for line in help_lines)


def test_default_body_writer_blank_lines_between_items():
    stream = io.StringIO()
    specs = [flag(None, "--a", "a"), flag(None, "--b", "b")]
    show_body(None, specs, None, stream, 0, 76, -4, 1)
    assert stream.getvalue().count("\n\n") == 2


@pytest.mark.parametrize(
    "specs, expected",
    [
        ([], 0),
        (None, 0),
        ([flag("-h", "--help", "h"), flag(None, "--version", "v")], 2),
        ([flag("-h", "--help", "h"), Specification(ArgType.INVALID), flag(None, "--v", "v")], 1),
        ([gap_section("x"), flag(None, "--a", "a")], 2),
    ],
)
def test_count_specifications(specs, expected):
    assert count_specifications(specs) == expected


@pytest.mark.parametrize(
    "tab_width, level, expected",
    [(-4, 1, "    "), (-2, 2, "    "), (4, 2, "\t\t"), (0, 1, "\t")],
)
def test_usage_info_indent(tab_width, level, expected):
    info = UsageInfo(VersionInfo(), assumed_tab_width=tab_width)
    assert info.indent(level) == expected
    assert info.indent_width(level) == abs(tab_width) * level


def test_version_info_str():
    assert str(VersionInfo(1, 0, 1, 99)) == "1.0.1"