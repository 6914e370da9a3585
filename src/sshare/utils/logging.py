"""Logger factory for the ``sshare`` namespace.

Library modules only call :func:`get_logger`; the CLI decides where records go
by calling :func:`configure_logging` once per invocation.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER = "sshare"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Route ``sshare`` records to stderr at *level*.

    Each call swaps in a fresh handler bound to the current ``sys.stderr``,
    so repeated invocations never stack handlers.
    """

    global _handler
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_FORMAT, "%H:%M:%S"))
    root.addHandler(_handler)
    return root


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
