"""Literal substring search over files, grep style."""
from __future__ import annotations

from minigrep.formatter import HighlightSpan, find_spans, format_line, highlight_line
from minigrep.matcher import is_match, should_emit
from minigrep.options import Invocation, SearchOptions, parse_args

__version__ = "0.1.0"

__all__ = [
    "HighlightSpan",
    "Invocation",
    "SearchOptions",
    "find_spans",
    "format_line",
    "highlight_line",
    "is_match",
    "parse_args",
    "should_emit",
]
