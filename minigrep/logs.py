from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "minigrep"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


# ----------------------------
# Stats
# ----------------------------
@dataclass
class RunStats:
    files_seen: int = 0
    files_read: int = 0
    lines_seen: int = 0
    lines_reported: int = 0
    elapsed_s: float = 0.0


# ----------------------------
# Logging
# ----------------------------
def make_log_path(log_dir: Path) -> Path:
    """Create `log_dir` if needed and return a timestamped log filename in it."""
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return log_dir / f"log_{ts}.txt"


def setup_logging(debug: bool, log_dir: Optional[Path] = None) -> tuple[logging.Logger, Optional[Path]]:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = False

    fmt = logging.Formatter(LOG_FORMAT)

    # Console handler for user-facing problems only; stdout stays clean for matches
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.WARNING)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_path = make_log_path(log_dir)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG if debug else logging.INFO)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.info("Log started: %s", log_path)
        logger.info("CWD: %s", Path.cwd())

    return logger, log_path


def log_stats(logger: logging.Logger, stats: RunStats) -> None:
    logger.info(
        "Performance: files_seen=%d files_read=%d lines_seen=%d lines_reported=%d elapsed=%.6fs",
        stats.files_seen,
        stats.files_read,
        stats.lines_seen,
        stats.lines_reported,
        stats.elapsed_s,
    )
