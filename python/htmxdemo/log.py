from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install the base handler once; later calls only adjust the level."""
    global _configured
    package_logger = logging.getLogger("htmxdemo")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return
    logging.basicConfig(format=LOG_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
