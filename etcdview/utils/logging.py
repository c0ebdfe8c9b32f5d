"""Logging setup.

The terminal belongs to the UI, so log records go to a file when one is
requested and are discarded otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Handler:
    """Attach a single handler to the ``etcdview`` logger and return it."""
    package_logger = logging.getLogger("etcdview")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False
    return handler
