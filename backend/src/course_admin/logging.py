from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "course_admin"


def configure_logging(debug: bool = False, level: str = "INFO") -> int:
    """Attach a root handler once and set the package logger's level; returns that level."""
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT)

    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved)
    return resolved
