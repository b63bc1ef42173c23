[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clasp"
version = "0.14.0"
description = "Command-line argument sorting and parsing: flags, options and values, aliases, usage display and search specifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "arguments", "parsing", "flags", "options", "usage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clasp-prg = "clasp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clasp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
