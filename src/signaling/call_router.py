"""Decide what a connected call should do next.

Priority order, first match wins:

1. conference requests join (and optionally record) the room named by ``to``;
2. no destination plays the first-call greeting;
3. numeric destinations dial out to the PSTN with the configured caller id;
4. anything else rings the named client, passing the display name along.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol

from signaling.classifier import classify
from signaling.diagnostics import log_quietly
from signaling.greetings import FIRST_CALL_TEXT
from signaling.models import (
    CallKind,
    CallPlan,
    CallSetupRequest,
    DestinationKind,
    DialClient,
    DialConference,
    DialNumber,
    RecordingPolicy,
    SayGreeting,
)

if TYPE_CHECKING:  # pragma: no cover
    from integrations.twilio_client import TwilioConfig

LOGGER = logging.getLogger(__name__)


class MarkupSerializer(Protocol):
    def serialize(self, plan: CallPlan) -> str:  # pragma: no cover - protocol stub
        ...


class CallRouter:
    def __init__(
        self,
        config: TwilioConfig,
        serializer: MarkupSerializer,
        classifier: Callable[[str], DestinationKind] = classify,
    ) -> None:
        self._config = config
        self._serializer = serializer
        self._classify = classifier

    def route(self, request: CallSetupRequest) -> CallPlan:
        if request.kind is CallKind.CONFERENCE:
            return DialConference(room=request.to, recording=self._recording_policy(request))

        if not request.to:
            return SayGreeting(FIRST_CALL_TEXT)

        if self._classify(request.to) is DestinationKind.PHONE_NUMBER:
            self._config.require("caller_number")
            return DialNumber(number=request.to, caller_id=self._config.caller_number)

        return DialClient(
            identity=request.to,
            caller_id=request.from_,
            display_name=request.display_name,
        )

    def make_call(self, request: CallSetupRequest) -> str:
        """Route ``request`` and return the plan as markup."""

        markup = self._serializer.serialize(self.route(request))
        log_quietly(LOGGER, logging.INFO, "Response: %s", markup)
        return markup

    def _recording_policy(self, request: CallSetupRequest) -> RecordingPolicy:
        if not request.recording_requested:
            return RecordingPolicy.disabled()
        self._config.require("recording_status_callback_url")
        return RecordingPolicy.from_start(self._config.recording_status_callback_url)
