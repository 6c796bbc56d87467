"""Logging setup. Modules only ever call logging.getLogger(__name__); the entrypoint calls configure_logging() once."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# the one handler this module installs on the root logger
_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    global _handler

    root = logging.getLogger()
    root.setLevel(level)

    # don't stack handlers when called more than once
    if _handler is not None and _handler in root.handlers:
        return

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
