from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, TextIO

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(environ: Mapping[str, str], key: str) -> bool:
    return environ.get(key, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class RuntimeConfig:
    """Ambient settings taken from the environment; search flags live in SearchOptions."""

    debug: bool = False
    log_dir: Optional[Path] = None
    no_color: bool = False
    force_color: bool = False


def load_runtime_config(environ: Optional[Mapping[str, str]] = None) -> RuntimeConfig:
    env = os.environ if environ is None else environ
    log_dir = env.get("MINIGREP_LOG_DIR", "").strip()
    return RuntimeConfig(
        debug=_flag(env, "MINIGREP_DEBUG"),
        log_dir=Path(log_dir) if log_dir else None,
        # NO_COLOR disables color whatever its value, as long as it is non-empty
        no_color=bool(env.get("NO_COLOR")),
        force_color=_flag(env, "CLICOLOR_FORCE"),
    )


def supports_color(stream: TextIO) -> bool:
    return hasattr(stream, "isatty") and stream.isatty()


def color_enabled(config: RuntimeConfig, stream: TextIO) -> bool:
    if config.no_color:
        return False
    if config.force_color:
        return True
    return supports_color(stream)
