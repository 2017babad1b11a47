"""Logging helpers for dl-markdown.

The library never installs handlers; applications (and the CLI's
``--verbose`` flag) decide where records go.

Example:
    >>> from dl_markdown.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Registered rule")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger under the ``dl_markdown`` namespace.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        logging.Logger: Logger whose name starts with ``dl_markdown``.

    Examples:
        get_logger("plugin").name  # "dl_markdown.plugin"
    """
    if not (name == "dl_markdown" or name.startswith("dl_markdown.")):
        name = f"dl_markdown.{name}"
    return logging.getLogger(name)
