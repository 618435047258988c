# src/smartinit/logging.py
"""
Logging helpers.

The library logs under the "smartinit" namespace and stays silent unless
the host application configures logging, or SMARTINIT_VERBOSE /
SMARTINIT_LOG_LEVEL is set.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "smartinit"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())

_stderr_handler: Optional[logging.Handler] = None


def is_verbose() -> bool:
    return os.getenv("SMARTINIT_VERBOSE", "").lower() in ("1", "true", "yes")


def configure_logging(level: Optional[str] = None, verbose: Optional[bool] = None) -> None:
    """
    Attach a stderr handler to the smartinit logger.

    `verbose` forces DEBUG. Without arguments, the environment decides.
    """
    global _stderr_handler

    if verbose is None:
        verbose = is_verbose()
    if level is None:
        level = os.getenv("SMARTINIT_LOG_LEVEL")
    if not verbose and not level:
        return

    resolved = logging.DEBUG if verbose else logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    if _stderr_handler is None:
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        _root.addHandler(_stderr_handler)
    _root.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the smartinit namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    verbose: Optional[bool] = None,
) -> None:
    """Log an exception; the traceback is only included in verbose mode."""
    if verbose is None:
        verbose = is_verbose()
    if verbose:
        logger.debug("%s: %s", message, exc, exc_info=exc)
    else:
        logger.debug("%s: %s", message, exc)


configure_logging()
