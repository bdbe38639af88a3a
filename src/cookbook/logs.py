"""Console logging for the cookbook.

Records look like:
    2026-02-20 14:03:11 - [INFO] 3 receipt(s) loaded successfully!
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Send cookbook.* records to stderr at or above level."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("cookbook").setLevel(level)
