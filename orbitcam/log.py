"""
orbitcam.log - logging setup for the viewer.

Library modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves; entry points call :func:`configure_logging` once.
"""

from __future__ import annotations

import logging

_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> int:
    """Install a stderr handler on the ``orbitcam`` logger and return the level used."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = int(level)

    logger = logging.getLogger("orbitcam")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(resolved)
    return resolved
