"""
Logging setup for the service.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is configured, a size-rotated file handler.  The
handlers are tagged with a name so that calling ``create_app`` more
than once (the test suite does) never stacks duplicate handlers.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_PREFIX = "flight_reports"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to log to in addition to the console.  It is rotated once
        it reaches ``max_bytes``, keeping ``backup_count`` old files.
    """
    root = logging.getLogger()
    if any((h.get_name() or "").startswith(_HANDLER_PREFIX) for h in root.handlers):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.set_name(f"{_HANDLER_PREFIX}.console")
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.set_name(f"{_HANDLER_PREFIX}.file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
