"""
Process-wide logging setup.

Log lines are written both to stderr and to a per-day file named
``restaurantsearch_<YYYY-MM-DD>.log``::

    2024-05-01 12:00:00 [INFO] [127.0.0.1] HTTP status 200 on '/restaurants'
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_LEVEL_COLORS = {
    logging.DEBUG: 35,  # purple
    logging.WARNING: 33,  # yellow
    logging.ERROR: 31,  # red
    logging.CRITICAL: 41,  # white on red
}
_DEFAULT_COLOR = 36  # blue


@dataclass(frozen=True)
class LogConfig:
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_dir: Path = field(default_factory=lambda: Path(os.getenv("LOG_DIR", ".")))
    file_prefix: str = "restaurantsearch_"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    colors: bool = True

    def log_path(self, day: date | None = None) -> Path:
        day = day or date.today()
        return self.log_dir / f"{self.file_prefix}{day.isoformat()}.log"


DEFAULT_LOG_CONFIG = LogConfig()


class LevelColorFormatter(logging.Formatter):
    """Render ``<timestamp> [<LEVEL>] <message>`` with an ANSI-coloured level."""

    def __init__(self, datefmt: str, colors: bool = True) -> None:
        super().__init__(datefmt=datefmt)
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.upper()
        if self.colors:
            color = _LEVEL_COLORS.get(record.levelno, _DEFAULT_COLOR)
            level = f"\x1b[{color}m{level}\x1b[0m"
        line = f"{self.formatTime(record, self.datefmt)} [{level}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(config: LogConfig = DEFAULT_LOG_CONFIG) -> Path:
    """Install the stderr and daily-file handlers on the root logger."""
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_path()

    formatter = LevelColorFormatter(config.timestamp_format, colors=config.colors)
    stream_handler = logging.StreamHandler(sys.stderr)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    for handler in (stream_handler, file_handler):
        handler.setFormatter(formatter)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.addHandler(stream_handler)
    root.addHandler(file_handler)
    root.setLevel(config.level)
    return log_path
