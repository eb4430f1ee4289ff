"""
core/logging/logic/logger.py
============================

Console logging for command line runs.

Modules log through ``logging.getLogger(__name__)``; this helper only decides
where records go. Verbose runs print bare diagnostic lines on stdout (DEBUG),
otherwise only records at the configured level and above are shown.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_HANDLER_NAME = "pdfstamp-console"


def configure_logging(
    *,
    verbose: bool = False,
    level: str = "WARNING",
    logger_name: str = "stamp",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """(Re)install the console handler on *logger_name*. Safe to call repeatedly."""
    log = logging.getLogger(logger_name)
    for h in list(log.handlers):
        if h.get_name() == _HANDLER_NAME:
            log.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)

    resolved = logging.DEBUG if verbose else logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    log.setLevel(resolved)
    log.propagate = False
    return log
