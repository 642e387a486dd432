"""Best-effort diagnostic logging for the request path."""

from __future__ import annotations

import logging
import sys


def log_quietly(logger: logging.Logger, level: int, msg: str, *args: object) -> None:
    """Log like ``logger.log`` but never raise into the caller.

    Stdlib handlers route their own failures through ``Handler.handleError``;
    handlers attached by the host application may not, so failures are reported
    on stderr the same way.
    """

    try:
        logger.log(level, msg, *args)
    except Exception as exc:  # noqa: BLE001
        print(f"--- Logging error in {logger.name}: {exc!r}", file=sys.stderr)
