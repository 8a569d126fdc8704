from __future__ import annotations


def fold(text: str) -> str:
    # Comparison only; displayed text is never folded.
    return text.lower()


def is_match(line_text: str, pattern: str, case_insensitive: bool) -> bool:
    """True if `pattern` occurs in `line_text` as a literal substring.

    An empty pattern is contained by every line.
    """
    if case_insensitive:
        return fold(pattern) in fold(line_text)
    return pattern in line_text


def should_emit(is_match: bool, invert: bool) -> bool:
    return is_match != invert
