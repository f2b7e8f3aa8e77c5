"""Logging bootstrap for the dashboard and the one-shot CLI commands.

// [LAW:single-enforcer] Handlers are attached to the studio_utilities logger here only.
// [LAW:one-source-of-truth] resolve_runtime() derives level, file and console choice;
//   configure() only installs what it returns.

Environment:
    STUDIO_UTILITIES_LOG_LEVEL  level name, INFO when unset or unrecognised
    STUDIO_UTILITIES_LOG_DIR    directory for per-run log files
    STUDIO_UTILITIES_LOG_FILE   explicit file path, overrides the directory
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "studio_utilities"

ENV_LEVEL = "STUDIO_UTILITIES_LOG_LEVEL"
ENV_DIR = "STUDIO_UTILITIES_LOG_DIR"
ENV_FILE = "STUDIO_UTILITIES_LOG_FILE"

DEFAULT_LOG_DIR = "~/.local/share/studio-utilities/logs"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s"
_CONSOLE_FORMAT = "%(levelname)s %(message)s"


@dataclass(frozen=True)
class LoggingRuntime:
    """Where and how loudly this run logs."""

    level_name: str
    level: int
    file_path: str
    console: bool


_RUNTIME: LoggingRuntime | None = None


def _level_from(raw: str | None) -> int:
    level = logging.getLevelName(str(raw or "INFO").strip().upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.INFO


def _run_log_name(mode: str) -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{mode}-{stamp}-{os.getpid()}.log"


def resolve_runtime(console: bool, environ: Mapping[str, str] | None = None) -> LoggingRuntime:
    """Read the environment into a LoggingRuntime without touching the filesystem.

    The dashboard owns the terminal, so its runs log to file only
    (``console=False``) and name their file ``dashboard-*``; CLI runs use ``cli-*``.
    """
    env = os.environ if environ is None else environ
    level = _level_from(env.get(ENV_LEVEL))
    explicit = env.get(ENV_FILE)
    if explicit:
        file_path = explicit
    else:
        log_dir = Path(os.path.expanduser(env.get(ENV_DIR) or DEFAULT_LOG_DIR))
        file_path = str(log_dir / _run_log_name("cli" if console else "dashboard"))
    return LoggingRuntime(
        level_name=logging.getLevelName(level),
        level=level,
        file_path=file_path,
        console=console,
    )


def _handlers_for(runtime: LoggingRuntime) -> list[logging.Handler]:
    file_handler = RotatingFileHandler(
        runtime.file_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    handlers: list[logging.Handler] = [file_handler]
    if runtime.console:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        handlers.insert(0, stream)
    for handler in handlers:
        handler.setLevel(runtime.level)
    return handlers


def configure(console: bool = True) -> LoggingRuntime:
    """Install handlers on the studio_utilities logger. Later calls are no-ops."""
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    runtime = resolve_runtime(console)
    Path(runtime.file_path).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(runtime.level)
    logger.propagate = False
    logger.handlers.clear()
    for handler in _handlers_for(runtime):
        logger.addHandler(handler)

    logging.captureWarnings(True)
    _RUNTIME = runtime
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """The installed runtime, or None before configure() has run."""
    return _RUNTIME
