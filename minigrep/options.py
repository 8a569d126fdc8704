from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


USAGE = """\
Usage:
  minigrep [options] <pattern> <path> [<path> ...]

Search each file for lines containing <pattern> (a literal substring,
not a regular expression) and print them.

Options:
  -i          Case-insensitive search
  -n          Prefix each line with its 1-based line number
  -v          Invert match (print non-matching lines)
  -r, -R      Recurse into directories
  -f          Prefix each line with the file name
  -c          Highlight matches in color
  -h, --help  Show this help

Directories are skipped unless -r is given. Unknown options are ignored.

Examples:
  minigrep -n error app.log
  minigrep -r -f -i todo src
  minigrep -v -c "#" config.ini
"""


# ----------------------------
# Options
# ----------------------------
@dataclass(frozen=True)
class SearchOptions:
    pattern: str
    case_insensitive: bool = False
    invert: bool = False
    show_line_numbers: bool = False
    show_filenames: bool = False
    highlight: bool = False


@dataclass(frozen=True)
class Invocation:
    options: SearchOptions
    paths: tuple[str, ...] = field(default_factory=tuple)
    recursive: bool = False
    show_help: bool = False

    @property
    def wants_usage(self) -> bool:
        """Help was asked for, or there is nothing to search."""
        return self.show_help or not self.options.pattern or not self.paths


# ----------------------------
# Argument tokens
# ----------------------------
_FLAG_FIELDS = {
    "-i": "case_insensitive",
    "-n": "show_line_numbers",
    "-v": "invert",
    "-f": "show_filenames",
    "-c": "highlight",
}
_RECURSIVE_FLAGS = ("-r", "-R")
_HELP_FLAGS = ("-h", "--help")


def parse_args(argv: Sequence[str]) -> Invocation:
    """Build an Invocation from the argument tokens (program name excluded).

    Flags are recognized literally, so "-in" is not "-i -n"; like any other
    unknown token starting with a dash it is ignored. The first remaining
    token is the pattern and the rest are paths.
    """
    flags = dict.fromkeys(_FLAG_FIELDS.values(), False)
    recursive = False
    pattern: str | None = None
    paths: list[str] = []

    for arg in argv:
        if arg in _HELP_FLAGS:
            return Invocation(options=SearchOptions(pattern=pattern or "", **flags), show_help=True)
        if arg in _FLAG_FIELDS:
            flags[_FLAG_FIELDS[arg]] = True
        elif arg in _RECURSIVE_FLAGS:
            recursive = True
        elif arg.startswith("-"):
            continue
        elif pattern is None:
            pattern = arg
        else:
            paths.append(arg)

    return Invocation(
        options=SearchOptions(pattern=pattern or "", **flags),
        paths=tuple(paths),
        recursive=recursive,
    )
