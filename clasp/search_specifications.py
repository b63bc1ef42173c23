"""Search specifications (directory plus patterns) built from command-line values."""

from __future__ import annotations

import enum
import errno
import os
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

from clasp.parsing import Arguments
from clasp.types import Argument

_PATTERN_SEPARATOR = "|"
_WILDCARDS = frozenset("?*")
_NAME_SEPARATORS = frozenset({os.sep, os.altsep} - {None})


@dataclass(frozen=True)
class SearchSpec:
    """A directory and the ``|``-separated patterns to search for within it."""

    directory: str
    patterns: str


class _ElementKind(enum.Enum):
    UNKNOWN = enum.auto()
    DIRECTORY = enum.auto()
    PATTERNS = enum.auto()


def _kind_of_existing(path: str) -> _ElementKind:
    if not os.path.exists(path):
        return _ElementKind.UNKNOWN
    if os.path.isdir(path):
        return _ElementKind.DIRECTORY
    return _ElementKind.PATTERNS


def _is_rooted(element: str) -> bool:
    return os.path.isabs(element) or element[0] in _NAME_SEPARATORS


class SearchSpecifications:
    """An ordered collection of search specifications.

    Elements are pushed one at a time; each is recognised as either a
    directory, which starts a new specification, or pattern(s), which are
    added to the current one. Without a default directory, patterns pushed
    before the first directory are remembered and given to every directory
    pushed afterwards. With a default directory, such patterns go into a
    first specification for that directory.
    """

    def __init__(self, default_directory: str = "") -> None:
        self.default_directory = default_directory or ""
        self.common_patterns = ""
        self._specifications: list[SearchSpec] = []

    @classmethod
    def from_values(cls, args: Arguments) -> "SearchSpecifications":
        """Build specifications from the values of parsed arguments."""
        specs = cls()
        for value in args.values:
            specs.push_element(value.value)
        return specs

    def __repr__(self) -> str:
        return f"SearchSpecifications({self._specifications!r})"

    def _classify(self, element: str) -> _ElementKind:
        if element in (".", ".."):
            return _ElementKind.DIRECTORY
        if _PATTERN_SEPARATOR in element or os.pathsep in element:
            return _ElementKind.PATTERNS
        if any(ch in _WILDCARDS for ch in element):
            return _ElementKind.PATTERNS
        if element[-1] in _NAME_SEPARATORS:
            return _ElementKind.DIRECTORY

        kind = _ElementKind.UNKNOWN
        if _is_rooted(element):
            kind = _kind_of_existing(element)
        if kind is _ElementKind.UNKNOWN and self._specifications:
            current = os.path.abspath(self._specifications[-1].directory)
            kind = _kind_of_existing(os.path.join(current, element))
        if kind is _ElementKind.UNKNOWN:
            kind = _kind_of_existing(os.path.join(os.path.abspath("."), element))
        return kind

    def push_element(self, element: str) -> bool:
        """Push a directory or pattern(s).

        Returns False if the element could be recognised as neither, in
        which case nothing is changed.
        """
        if not element:
            raise ValueError("search element must not be empty")
        kind = self._classify(element)
        if kind is _ElementKind.UNKNOWN:
            return False
        if kind is _ElementKind.DIRECTORY:
            self.push_directory(element)
        else:
            self.push_patterns(element)
        return True

    def push_directory(self, element: str) -> None:
        """Start a new specification for the given directory."""
        self._specifications.append(SearchSpec(element, self.common_patterns))

    def push_patterns(self, element: str) -> None:
        """Add pattern(s) to the current specification."""
        if not self._specifications and not self.default_directory:
            self.common_patterns = _joined(self.common_patterns, element)
            return
        if not self._specifications:
            self._specifications.append(
                SearchSpec(self.default_directory, self.common_patterns)
            )
        current = self._specifications[-1]
        if element != current.patterns:
            self._specifications[-1] = replace(
                current, patterns=_joined(current.patterns, element)
            )

    def apply_default_patterns(self, default_patterns: str) -> None:
        """Give the default pattern(s) to every specification that has none."""
        self._specifications = [
            spec if spec.patterns else replace(spec, patterns=default_patterns)
            for spec in self._specifications
        ]

    def __len__(self) -> int:
        return len(self._specifications)

    def __iter__(self) -> Iterator[SearchSpec]:
        return iter(tuple(self._specifications))

    def __getitem__(self, index: int) -> SearchSpec:
        return self._specifications[index]


def _joined(patterns: str, element: str) -> str:
    return f"{patterns}{_PATTERN_SEPARATOR}{element}" if patterns else element


def load_search_specs(
    values: Iterable[Argument | str],
    default_directory: str | None = None,
    default_patterns: str | None = None,
) -> tuple[SearchSpec, ...]:
    """Build search specifications from value arguments (or plain strings).

    Raises FileNotFoundError for a value that is neither a directory nor
    pattern(s).
    """
    specs = SearchSpecifications(default_directory or "")
    for value in values:
        text = value.value if isinstance(value, Argument) else value
        if not specs.push_element(text):
            raise FileNotFoundError(
                errno.ENOENT, "not a directory or pattern", text
            )
    if not len(specs) and default_directory:
        specs.push_directory(default_directory)
    if default_patterns:
        specs.apply_default_patterns(default_patterns)
    return tuple(specs)