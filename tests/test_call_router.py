from __future__ import annotations

import dataclasses

import pytest

from integrations.twiml import TwiMLSerializer
from signaling.call_router import CallRouter
from signaling.errors import ConfigurationMissingError
from signaling.greetings import FIRST_CALL_TEXT
from signaling.models import (
    CallKind,
    CallSetupRequest,
    DialClient,
    DialConference,
    DialNumber,
    RecordingPolicy,
    SayGreeting,
)


@pytest.fixture()
def call_router(twilio_config) -> CallRouter:
    return CallRouter(twilio_config, TwiMLSerializer())


def test_recorded_conference(call_router, twilio_config):
    plan = call_router.route(CallSetupRequest(kind=CallKind.CONFERENCE, to="room1", record="true"))

    assert plan == DialConference(
        room="room1",
        recording=RecordingPolicy.from_start(twilio_config.recording_status_callback_url),
    )
    assert plan.recording.enabled


@pytest.mark.parametrize("record", [None, "false", "True", "1", "yes"])
def test_conference_records_only_for_literal_true(call_router, record):
    plan = call_router.route(CallSetupRequest(kind=CallKind.CONFERENCE, to="room1", record=record))

    assert plan == DialConference(room="room1", recording=RecordingPolicy.disabled())
    assert plan.recording.wait_url == ""


def test_conference_wins_over_numeric_destination(call_router):
    plan = call_router.route(CallSetupRequest(kind=CallKind.CONFERENCE, to="+15551234567"))

    assert isinstance(plan, DialConference)


@pytest.mark.parametrize("to", [None, ""])
def test_missing_destination_plays_first_call_greeting(call_router, to):
    plan = call_router.route(CallSetupRequest(to=to, from_="alice-device"))

    assert plan == SayGreeting("Congratulations! You have made your first call! Good bye.")
    assert plan.text == FIRST_CALL_TEXT


def test_phone_number_uses_configured_caller_id(call_router, twilio_config):
    plan = call_router.route(CallSetupRequest(to="+15551234567", from_="alice-device"))

    assert plan == DialNumber(number="+15551234567", caller_id=twilio_config.caller_number)
    assert plan.answer_on_bridge


def test_client_destination_passes_display_name(call_router):
    plan = call_router.route(CallSetupRequest(to="bob", from_="alice-device", display_name="Alice"))

    assert plan == DialClient(identity="bob", caller_id="alice-device", display_name="Alice")
    assert plan.parameters == {"name": "Alice"}
    assert plan.answer_on_bridge


def test_direct_kind_routes_like_default(call_router):
    plan = call_router.route(CallSetupRequest(kind=CallKind.DIRECT, to="bob"))

    assert isinstance(plan, DialClient)


def test_routing_is_repeatable(call_router):
    request = CallSetupRequest(to="bob", from_="alice-device", display_name="Alice")

    assert call_router.route(request) == call_router.route(request)
    assert call_router.make_call(request) == call_router.make_call(request)


def test_phone_number_requires_caller_number(twilio_config):
    router = CallRouter(dataclasses.replace(twilio_config, caller_number=None), TwiMLSerializer())

    with pytest.raises(ConfigurationMissingError) as excinfo:
        router.route(CallSetupRequest(to="5"))

    assert excinfo.value.missing == ("CALLER_NUMBER",)
    # Client calls do not need it.
    assert isinstance(router.route(CallSetupRequest(to="bob")), DialClient)


def test_recording_requires_callback_url(twilio_config):
    router = CallRouter(
        dataclasses.replace(twilio_config, recording_status_callback_url=None),
        TwiMLSerializer(),
    )

    with pytest.raises(ConfigurationMissingError):
        router.route(CallSetupRequest(kind=CallKind.CONFERENCE, to="room1", record="true"))

    assert router.route(CallSetupRequest(kind=CallKind.CONFERENCE, to="room1")).recording.enabled is False


def test_injected_classifier_is_used(twilio_config):
    from signaling.models import DestinationKind

    router = CallRouter(twilio_config, TwiMLSerializer(), classifier=lambda to: DestinationKind.CLIENT_NAME)

    assert isinstance(router.route(CallSetupRequest(to="5")), DialClient)


def test_make_call_serializes_routed_plan(twilio_config):
    class RecordingSerializer:
        def __init__(self) -> None:
            self.plans = []

        def serialize(self, plan):
            self.plans.append(plan)
            return "<Response/>"

    serializer = RecordingSerializer()
    router = CallRouter(twilio_config, serializer)

    assert router.make_call(CallSetupRequest()) == "<Response/>"
    assert serializer.plans == [SayGreeting(FIRST_CALL_TEXT)]


def test_log_handler_failure_does_not_fail_make_call(call_router, exploding_log_handler, capsys):
    markup = call_router.make_call(CallSetupRequest(to="bob", from_="alice-device", display_name="Alice"))
    number = call_router.make_call(CallSetupRequest(to="5"))

    assert "<Identity>bob</Identity>" in markup
    assert "<Number>5</Number>" in number
    assert "log sink unavailable" in capsys.readouterr().err
