from __future__ import annotations

"""
Logging Settings for tree2json / json2tree.

Both tools print their payload on stdout (the captured tree or the
generation report), so diagnostics always go to stderr and, optionally,
to a small rotating log file chosen with --log-file.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Names accepted for the level field
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    How a tool run reports what it reads, skips and writes.

    Attributes:
        level: Level name; --debug switches it to DEBUG.
        console: Whether records are echoed to stderr.
        log_file: Rotating log destination, or None for stderr only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the log file.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file (adds time and logger name).
        datefmt: Timestamp layout for file_fmt.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings derived from the --debug and --log-file options."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
