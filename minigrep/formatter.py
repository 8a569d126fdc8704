from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Sequence, Union

from minigrep.matcher import fold
from minigrep.options import SearchOptions


# ----------------------------
# Color helpers
# ----------------------------
ANSI_RESET = "\x1b[0m"
ANSI_RED = "\x1b[31m"
ANSI_CYAN = "\x1b[36m"


def colorize(s: str, color: str, enabled: bool) -> str:
    return f"{color}{s}{ANSI_RESET}" if enabled else s


# ----------------------------
# Highlight spans
# ----------------------------
class HighlightSpan(NamedTuple):
    """Half-open [start, end) character range of one pattern occurrence."""

    start: int
    end: int


def _fold_with_offsets(text: str) -> tuple[str, Sequence[int]]:
    """Fold `text` and map every folded position back to an index into `text`.

    The returned offsets have one extra trailing entry equal to len(text).
    Lowering can grow a string ("İ" becomes two code points), in which case
    each character is folded on its own so positions can be traced back.
    """
    folded = fold(text)
    if len(folded) == len(text):
        return folded, range(len(text) + 1)

    pieces: list[str] = []
    offsets: list[int] = []
    for i, ch in enumerate(text):
        low = fold(ch)
        pieces.append(low)
        offsets.extend([i] * len(low))
    offsets.append(len(text))
    return "".join(pieces), offsets


def find_spans(line_text: str, pattern: str, case_insensitive: bool) -> list[HighlightSpan]:
    """Locate non-overlapping occurrences of `pattern`, left to right.

    Scanning resumes at the end of each occurrence, so "aa" in "aaaa" gives
    [0, 2) and [2, 4). An empty pattern gives no spans.
    """
    if not pattern:
        return []

    if not case_insensitive:
        spans = []
        pos = line_text.find(pattern)
        while pos != -1:
            end = pos + len(pattern)
            spans.append(HighlightSpan(pos, end))
            pos = line_text.find(pattern, end)
        return spans

    haystack, offsets = _fold_with_offsets(line_text)
    needle = fold(pattern)
    spans = []
    pos = haystack.find(needle)
    while pos != -1:
        start = offsets[pos]
        # round out to whole characters of the original line
        end = offsets[pos + len(needle) - 1] + 1
        spans.append(HighlightSpan(start, end))
        nxt = pos + len(needle)
        while nxt < len(haystack) and offsets[nxt] < end:
            nxt += 1
        pos = haystack.find(needle, nxt)
    return spans


def highlight_line(line_text: str, pattern: str, case_insensitive: bool, color: str = ANSI_RED) -> str:
    out: list[str] = []
    i = 0
    for span in find_spans(line_text, pattern, case_insensitive):
        out.append(line_text[i:span.start])
        out.append(colorize(line_text[span.start:span.end], color, enabled=True))
        i = span.end
    out.append(line_text[i:])
    return "".join(out)


# ----------------------------
# Output lines
# ----------------------------
def display_path(file_path: Union[str, Path]) -> str:
    return str(file_path).replace("\\", "/")


def format_line(
    line_text: str,
    line_index: int,
    file_path: Union[str, Path],
    options: SearchOptions,
    is_match: bool,
) -> str:
    """Render one emitted line.

    Only lines emitted because they matched are highlighted; in invert mode
    nothing is. `line_index` is 0-based and printed 1-based.
    """
    if options.highlight and not options.invert and is_match:
        shown = highlight_line(line_text, options.pattern, options.case_insensitive)
    else:
        shown = line_text

    if options.show_filenames and options.show_line_numbers:
        return f"{display_path(file_path)}: {line_index + 1}: {shown}"
    if options.show_filenames:
        return f"{display_path(file_path)}: {shown}"
    if options.show_line_numbers:
        return f"{line_index + 1}: {shown}"
    return shown
