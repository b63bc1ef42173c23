"""Command-line argument sorting and parsing into flags, options and values,
with usage display and search specifications."""

__version__ = "0.14.0"

__all__ = ["types", "parsing", "usage", "search_specifications", "cli"]