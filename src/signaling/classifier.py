"""Tell phone-number destinations apart from client identities.

This is a loose heuristic, not E.164 validation. Numeric means loosely
coercible to a number: ``" 42 "``, ``"1e3"`` and ``"0x1F"`` are numbers,
``"NaN"`` and ``"1_000"`` are not.
"""

from __future__ import annotations

import logging
import re

from signaling.diagnostics import log_quietly
from signaling.models import DestinationKind

LOGGER = logging.getLogger(__name__)

_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
)
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def is_numeric_literal(text: str) -> bool:
    stripped = text.strip(_WHITESPACE)
    if not stripped:
        # Blank coerces to zero.
        return True
    return bool(_DECIMAL_LITERAL.fullmatch(stripped) or _RADIX_LITERAL.fullmatch(stripped))


def classify(to: str) -> DestinationKind:
    """Classify a raw ``to`` value. Never raises; unrecognised input is a client name."""

    if len(to) == 1:
        candidate = to
    elif to.startswith("+"):
        candidate = to[1:]
    else:
        candidate = to

    if is_numeric_literal(candidate):
        log_quietly(LOGGER, logging.DEBUG, "Destination %r is a phone number", to)
        return DestinationKind.PHONE_NUMBER

    log_quietly(LOGGER, logging.DEBUG, "Destination %r is a client name", to)
    return DestinationKind.CLIENT_NAME
