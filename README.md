# clasp

A small library for sorting and parsing command-line arguments into
**flags**, **options** and **values**. It supports aliases, default option
values, usage display and search specifications.

- A **value** is a standalone argument, such as a file name. After a `--`
  argument, everything that follows is a value.
- An **option** is a name/value pair. It can be given as `--name=value`. For
  an option that has a specification, it can also be given as `--name value`
  or `-n value`, where the next argument is taken as the value.
- A **flag** is a hyphenated name with no value, such as `-c` or `--all`. An
  unknown `--name` with no `=` is a flag. Single-letter aliases can be
  combined (`-cRd`) when every letter is a known alias. An alias can stand
  for an option with a fixed value: `-b` can stand for `--strip-blanks=all`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Defining specifications

Specifications describe the flags and options that a program knows. They are
built with the helpers in `clasp.types`:

```python
from clasp.types import flag, gap_section, option, option_alias

SPECIFICATIONS = [
    gap_section("filtering:"),
    flag("-a", "--all", "equivalent to -bclt"),
    option(None, "--strip-blanks=multiple",
           "causes blank lines in the input to be stripped", "|all|multiple|no"),
    option_alias("-b", "--strip-blanks=all"),
    option_alias("-B", "--strip-blanks=no"),

    gap_section("standard flags:"),
    flag(None, "--help", "show this help and quit"),
    flag(None, "--version", "show version and quit"),
]
```

Each helper returns a frozen `Specification`. The other helpers are:

- `bit_flag`: a flag that carries bit flags.
- `flag_alias` and `option_alias`: entries without help text.
- `section(number)`: a numbered section.
- `tacit_section()`: items after it are left out of usage.

A specification whose type is `ArgType.INVALID` ends the list. Anything
after it is ignored.

## Parsing

```python
import sys

from clasp.parsing import parse_arguments

args = parse_arguments(sys.argv, SPECIFICATIONS, 0)

if args.flag_is_specified("--help"):
    ...

blanks = args.find_flag_or_option("--strip-blanks", 0)
if blanks is not None:
    print(blanks)          # "--strip-blanks=all" when given -b

for arg in args.unrecognised_flags_and_options(SPECIFICATIONS):
    print("unrecognised argument:", arg)
```

`parse_arguments` raises `ValueError` if `argv` is empty. `argv[0]` is the
program name, and `program_name` holds its last path component.

The result is an `Arguments` object with these lists of `Argument` entries:

- `arguments`: all of them. Flags and options come first, then values,
  unless `ParseFlags.PRESERVE_ORIGINAL_ARGUMENT_ORDER` is given.
- `flags`, `options`, `values` and `flags_and_options`.

Each `Argument` has these fields:

- `resolved_name`
- `given_name`
- `value`
- `type`, an `ArgType`
- `cmd_line_index`
- `num_given_hyphens`
- `alias_index`

How `str()` shows an argument depends on its type:

- a flag shows its resolved name;
- an option shows `name=value`;
- a value shows the value itself.

`Arguments` also provides:

- `find_flag_or_option(name, skip)`: finds a flag or option by name and
  marks it as used.
- `check_flag`: returns the given bit if the flag is present, or if an option
  of that name is `yes` or `true`.
- `check_all_flags` and `check_all_matching_flags`: collect the bit flags of
  `bit_flag` specifications.
- `check_value(index)`: returns the value at that index, or `None`.
- `use_argument` and `is_used`: track which arguments have been handled.
- `unused_flags`, `unused_options`, `unused_flags_and_options`,
  `unused_values` and `unused_arguments`: list what has not been handled.
- `unrecognised_flags_and_options(specifications)`: lists the flags and
  options that match no specification.

`ParseFlags` changes how arguments are parsed:

- `DONT_RECOGNISE_DOUBLEHYPHEN_TO_START_VALUES`: `--` does not start values.
- `TREAT_SINGLEHYPHEN_AS_VALUE`: a lone `-` becomes a value.
  `Argument.is_treated_hyphen()` tells such a value apart from the others.
- `PRESERVE_ORIGINAL_ARGUMENT_ORDER`: `arguments` keeps the order of the
  command line.

## Usage and version output

`clasp.usage` provides `show_usage`, `show_header`, `show_body` and
`show_version`. Each gathers the tool's details into a `UsageInfo`, which
holds a `VersionInfo`, and passes it to a writer function along with the
active specifications. Each returns the `UsageInfo` it built.

You can pass your own writer, called as `writer(args, info, specifications)`.
When none is given, a built-in writer prints to `param`, or to standard
output if `param` is `None`.

The built-in writers produce the following:

- **Header:** the summary, `name: version X.Y.Z`, the copyright, the
  description, and a `USAGE:` line.
- **Body:** each documented flag and option with its aliases and help text,
  and the permitted values for options that have a value set. Section labels
  from `gap_section` appear as headings, and items after a tacit or
  negative section are left out.

Three `UsageInfo` settings control the layout:

- `width`: help text is wrapped to this width. A value below zero means no
  limit.
- `assumed_tab_width`: a negative value indents with that many spaces per
  level; a positive value indents with TABs.
- `blanks_between_items`: the number of blank lines after each item.

`count_specifications` returns the number of specifications before any
terminator.

## Search specifications

`clasp.search_specifications` turns values such as `src *.c *.h lib` into
`SearchSpec(directory, patterns)` pairs. Patterns within a pair are separated
by `|`.

```python
from clasp.search_specifications import SearchSpecifications

specs = SearchSpecifications.from_values(args)
specs.apply_default_patterns("*")

for spec in specs:
    print(spec.directory, spec.patterns)
```

`push_element` decides whether each element is a directory or patterns:

- `.` and `..` are directories, and so is anything with a trailing separator.
- Elements with wildcards or `|` are patterns.
- Otherwise the file system decides. An element that is neither a directory
  nor patterns makes `push_element` return `False`.

Patterns pushed before any directory are shared by every directory pushed
afterwards. If `SearchSpecifications(default_directory)` was given a default
directory, they go to that directory instead.

`load_search_specs(values, default_directory, default_patterns)` does the
same work from value arguments or plain strings and returns a tuple of
`SearchSpec`. It raises `FileNotFoundError` for a value that is neither a
directory nor patterns.

## Example program

The package installs a demonstration command, `clasp-prg`. It parses its
arguments against the filtering, history and standard-flag specifications
and prints the flags, options and values it found. Given `--help`, it prints
its usage instead.

```
clasp-prg -b --strip-comments=no input.txt -
clasp-prg --help
```

## What it does not do

- Wildcards in values are never expanded. `ParseFlags.DONT_EXPAND_WILDCARDS_ON_WINDOWS`
  and `ParseFlags.DO_EXPAND_WILDCARDS_IN_APOSQUOTES_ON_WINDOWS` exist, but
  parsing does not act on them.
- Option values are not checked against a specification's value set. The
  value set is only shown in usage output.
- There is no hook for custom logging or memory handling. Errors are raised
  as exceptions.