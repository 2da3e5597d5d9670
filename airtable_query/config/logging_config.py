"""
Logging configuration for the airtable-query client.

Library modules only create loggers:
    import logging
    logger = logging.getLogger(__name__)

Applications that want the library's own output (the CLI does) call
``setup_logging``; everything else just lets records propagate.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_HANDLER_NAME = "airtable_query.console"


def setup_logging(level: int = logging.WARNING, stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    Attach one console handler to the ``airtable_query`` logger.

    Calling it again adjusts the level of the existing handler instead of
    adding a second one. Records go to stderr by default so that listed
    records on stdout stay machine-readable.

    Returns the handler.
    """
    package_logger = logging.getLogger("airtable_query")
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return handler

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    return handler
