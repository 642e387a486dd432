"""Fixed spoken responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signaling.diagnostics import log_quietly
from signaling.models import SayGreeting

if TYPE_CHECKING:  # pragma: no cover
    from signaling.call_router import MarkupSerializer

LOGGER = logging.getLogger(__name__)

FIRST_CALL_TEXT = "Congratulations! You have made your first call! Good bye."
INCOMING_CALL_TEXT = "Congratulations! You have received your first inbound call! Good bye."
WELCOME_TEXT = "Welcome to Twilio"


def _render(text: str, serializer: MarkupSerializer | None) -> str:
    if serializer is None:
        from integrations.twiml import TwiMLSerializer

        serializer = TwiMLSerializer()

    markup = serializer.serialize(SayGreeting(text))
    log_quietly(LOGGER, logging.INFO, "Response: %s", markup)
    return markup


def incoming(serializer: MarkupSerializer | None = None) -> str:
    return _render(INCOMING_CALL_TEXT, serializer)


def welcome(serializer: MarkupSerializer | None = None) -> str:
    return _render(WELCOME_TEXT, serializer)
