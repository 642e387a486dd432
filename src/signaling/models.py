"""Value types shared by the credential issuer and the call router."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class SubChannel(str, Enum):
    """Push-notification environment a voice token registers for."""

    ANDROID = "android"
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @classmethod
    def resolve(cls, value: str | None) -> SubChannel:
        """Map a raw request value to a sub-channel; anything unknown is production."""

        try:
            return cls(value)
        except ValueError:
            return cls.PRODUCTION


class CallKind(str, Enum):
    CONFERENCE = "conference"
    DIRECT = "direct"
    DEFAULT = "default"

    @classmethod
    def resolve(cls, value: str | None) -> CallKind:
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


class DestinationKind(str, Enum):
    PHONE_NUMBER = "phone_number"
    CLIENT_NAME = "client_name"


@dataclass(frozen=True)
class IdentityClaim:
    identity: str

    @classmethod
    def resolve(cls, identity: str | None, fallback: str) -> IdentityClaim:
        """Use ``fallback`` when the caller sent no identity or an empty one."""

        return cls(identity=identity or fallback)


@dataclass(frozen=True)
class VoiceCapability:
    sub_channel: SubChannel = SubChannel.PRODUCTION


@dataclass(frozen=True)
class VideoCapability:
    pass


CapabilityRequest = Union[VoiceCapability, VideoCapability]


@dataclass(frozen=True)
class VoiceCapabilityGrant:
    outgoing_application_sid: str | None
    push_credential_sid: str | None

    kind = "voice"


@dataclass(frozen=True)
class VideoCapabilityGrant:
    kind = "video"


CapabilityGrant = Union[VoiceCapabilityGrant, VideoCapabilityGrant]


@dataclass(frozen=True)
class Credential:
    """A signed bearer token plus what went into it.

    ``token`` is opaque to this package and is returned to the client verbatim.
    """

    token: str
    identity: str
    grant: CapabilityGrant


@dataclass(frozen=True)
class CallSetupRequest:
    kind: CallKind = CallKind.DEFAULT
    to: str | None = None
    from_: str | None = None
    display_name: str | None = None
    # Kept as the raw string: only the literal "true" turns recording on.
    record: str | None = None

    @property
    def recording_requested(self) -> bool:
        return self.record == "true"


@dataclass(frozen=True)
class RecordingPolicy:
    record: str | None = None
    recording_status_callback: str | None = None
    # Empty string disables hold music while the room fills.
    wait_url: str = ""

    @classmethod
    def disabled(cls) -> RecordingPolicy:
        return cls()

    @classmethod
    def from_start(cls, callback_url: str) -> RecordingPolicy:
        return cls(record="record-from-start", recording_status_callback=callback_url)

    @property
    def enabled(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class SayGreeting:
    text: str


@dataclass(frozen=True)
class DialConference:
    room: str | None
    recording: RecordingPolicy = field(default_factory=RecordingPolicy.disabled)


@dataclass(frozen=True)
class DialNumber:
    number: str
    caller_id: str
    answer_on_bridge: bool = True


@dataclass(frozen=True)
class DialClient:
    identity: str
    caller_id: str | None
    display_name: str | None
    answer_on_bridge: bool = True

    @property
    def parameters(self) -> dict[str, str | None]:
        """Named parameters handed to the receiving client with the call invite."""

        return {"name": self.display_name}


CallPlan = Union[SayGreeting, DialConference, DialNumber, DialClient]
