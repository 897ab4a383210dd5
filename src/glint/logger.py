"""Logging helper.

glint never configures handlers; applications decide where records go.

Example:
    >>> from glint.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("tokenized %d tokens", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger namespaced under ``glint.``."""
    if not (name == "glint" or name.startswith("glint.")):
        name = f"glint.{name}"
    return logging.getLogger(name)
