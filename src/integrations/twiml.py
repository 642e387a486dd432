"""Render call plans as TwiML."""

from __future__ import annotations

from twilio.twiml.voice_response import VoiceResponse

from signaling.models import CallPlan, DialClient, DialConference, DialNumber, SayGreeting


class TwiMLSerializer:
    def serialize(self, plan: CallPlan) -> str:
        response = VoiceResponse()

        if isinstance(plan, SayGreeting):
            response.say(plan.text)
        elif isinstance(plan, DialConference):
            dial = response.dial()
            dial.conference(
                plan.room,
                wait_url=plan.recording.wait_url,
                record=plan.recording.record,
                recording_status_callback=plan.recording.recording_status_callback,
            )
        elif isinstance(plan, DialNumber):
            dial = response.dial(caller_id=plan.caller_id, answer_on_bridge=plan.answer_on_bridge)
            dial.number(plan.number)
        elif isinstance(plan, DialClient):
            dial = response.dial(caller_id=plan.caller_id, answer_on_bridge=plan.answer_on_bridge)
            client = dial.client()
            client.identity(plan.identity)
            for name, value in plan.parameters.items():
                client.parameter(name=name, value=value)
        else:
            raise TypeError(f"Unsupported call plan: {type(plan).__name__}")

        return str(response)
