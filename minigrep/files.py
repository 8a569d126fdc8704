from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, NamedTuple

logger = logging.getLogger(__name__)


class Line(NamedTuple):
    text: str
    index: int
    path: str


class FileDecodeError(ValueError):
    """A file is not valid UTF-8; carries the offending path."""

    def __init__(self, path: str, error: UnicodeDecodeError):
        super().__init__(f"Cannot decode '{path}' as UTF-8: {error}")
        self.path = path


# ----------------------------
# File collection
# ----------------------------
def _walk_files(root: str) -> Iterator[str]:
    # os.walk drops unreadable directories silently (onerror=None) and does
    # not descend into symlinked ones.
    for dirpath, _, filenames in os.walk(root):
        for name in filenames:
            fp = os.path.join(dirpath, name)
            if os.path.isfile(fp) and not os.path.islink(fp):
                yield fp


def collect_files(paths: Iterable[str], recursive: bool) -> list[str]:
    """Resolve path arguments into the sorted list of files to search.

    Paths are kept exactly as given ("./a.txt" stays "./a.txt"); walked
    files are joined onto the directory argument. Files are taken as-is.
    Directories are walked only when `recursive` is set and skipped
    otherwise. A path that does not exist raises FileNotFoundError.
    """
    files: list[str] = []
    for p in paths:
        if os.path.isfile(p):
            files.append(p)
        elif os.path.isdir(p):
            if recursive:
                files.extend(_walk_files(p))
            else:
                logger.debug("Skipping directory (no -r): %s", p)
        elif not os.path.lexists(p):
            raise FileNotFoundError(f"No such file or directory: '{p}'")
        else:
            logger.debug("Skipping non-regular path: %s", p)

    files.sort()
    return files


# ----------------------------
# Reading
# ----------------------------
def iter_lines(path: str) -> Iterator[Line]:
    """Yield the lines of `path` in order, without their terminators.

    Decoding is strict UTF-8: invalid bytes raise FileDecodeError. OSError
    propagates unchanged.
    """
    with open(path, "r", encoding="utf-8", newline="\n") as f:
        try:
            for idx, raw in enumerate(f):
                text = raw
                if text.endswith("\n"):
                    text = text[:-1]
                    if text.endswith("\r"):
                        text = text[:-1]
                yield Line(text, idx, path)
        except UnicodeDecodeError as ex:
            raise FileDecodeError(path, ex) from ex
