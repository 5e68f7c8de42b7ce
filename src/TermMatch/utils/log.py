"""TermMatch logging utilities.

All modules log through the single package logger ``log``. Records carry a
timestamp and a four-letter level tag; CLI runs may mirror them to a file.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}

_FORMAT: Final[str] = "%(asctime)s [%(leveltag)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib name
        record.leveltag = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("TermMatch")


def resolve_level(level: str | None) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown names fall back to INFO.
    """
    value = getattr(logging, (level or "INFO").upper(), None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Configure the TermMatch logger.

    Console output uses the configured level. When ``log_to_file`` is set and
    an ``action`` is given, a DEBUG-level copy goes to
    ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``.

    Args:
        level: Logging level name (e.g. INFO, DEBUG).
        action: CLI command name used for the log file path.
        log_to_file: Whether to mirror logs to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when logging to console only.
    """
    resolved_level = resolve_level(level)
    formatter = _LevelTagFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    log.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)

    log_path: Path | None = None
    if log_to_file and action:
        action_dir = Path(log_dir or "log") / action
        action_dir.mkdir(parents=True, exist_ok=True)
        log_path = action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(min(logging.DEBUG, resolved_level) if log_path else resolved_level)
    log.propagate = False
    return log_path
