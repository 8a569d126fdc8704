from __future__ import annotations

import dataclasses
import logging
import os
import sys
import time
from typing import Optional, Sequence, TextIO

from minigrep.config import color_enabled, load_runtime_config
from minigrep.files import FileDecodeError, collect_files, iter_lines
from minigrep.formatter import ANSI_CYAN, ANSI_RED, colorize, format_line
from minigrep.logs import RunStats, log_stats, setup_logging
from minigrep.matcher import is_match, should_emit
from minigrep.options import USAGE, SearchOptions, parse_args


# ----------------------------
# Search core
# ----------------------------
def search_file(path: str, options: SearchOptions, out: TextIO, stats: RunStats) -> None:
    """Write every emitted line of `path` to `out`.

    Read errors are not handled here; one bad file aborts the whole run.
    """
    stats.files_seen += 1
    for line in iter_lines(path):
        stats.lines_seen += 1

        matched = is_match(line.text, options.pattern, options.case_insensitive)
        if not should_emit(matched, options.invert):
            continue

        out.write(format_line(line.text, line.index, line.path, options, matched) + "\n")
        stats.lines_reported += 1
    stats.files_read += 1


def run(paths: Sequence[str], recursive: bool, options: SearchOptions, out: TextIO, stats: RunStats) -> None:
    logger = logging.getLogger(__name__)
    files = collect_files(paths, recursive=recursive)
    logger.debug("Searching %d file(s)", len(files))
    for fp in files:
        logger.debug("Searching %s", fp)
        search_file(fp, options, out, stats)


# ----------------------------
# CLI
# ----------------------------
def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # stdout has no real descriptor (redirected in-process)
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    invocation = parse_args(args)

    if invocation.wants_usage:
        sys.stdout.write(USAGE)
        return 0

    config = load_runtime_config()
    stderr_color = color_enabled(config, sys.stderr)
    try:
        logger, log_path = setup_logging(config.debug, config.log_dir)
    except OSError as ex:
        print(colorize(f"Error: cannot open log file in '{config.log_dir}': {ex}", ANSI_RED, stderr_color), file=sys.stderr)
        return 2

    options = invocation.options
    if options.highlight and not color_enabled(config, sys.stdout):
        # No terminal to show emphasis on: plain text instead
        logger.debug("Highlighting disabled, stdout does not support color")
        options = dataclasses.replace(options, highlight=False)

    logger.info("Args: %s", " ".join(args))
    logger.info(
        "Options: recursive=%s ignore_case=%s invert=%s line_numbers=%s filenames=%s highlight=%s",
        invocation.recursive,
        options.case_insensitive,
        options.invert,
        options.show_line_numbers,
        options.show_filenames,
        options.highlight,
    )

    stats = RunStats()
    t0 = time.perf_counter()

    try:
        run(invocation.paths, invocation.recursive, options, sys.stdout, stats)
        return 0

    except BrokenPipeError:
        # Reader went away (e.g. `| head`)
        logger.debug("Output pipe closed, stopping")
        _silence_stdout()
        return 1

    except (OSError, FileDecodeError) as ex:
        logger.error("Search aborted: %s", ex)
        print(colorize(f"Error: {ex}", ANSI_RED, stderr_color), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C).")
        print(colorize("Interrupted.", ANSI_RED, stderr_color), file=sys.stderr)
        return 130

    finally:
        stats.elapsed_s = time.perf_counter() - t0
        log_stats(logger, stats)
        try:
            sys.stdout.flush()
        except BrokenPipeError:
            _silence_stdout()

        if log_path is not None:
            # stderr, so piping output still works
            print(colorize(f"Log written to: {log_path}", ANSI_CYAN, stderr_color), file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
