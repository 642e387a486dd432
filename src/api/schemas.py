"""API-facing Pydantic models and request normalization."""

from __future__ import annotations

from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field

from signaling.models import (
    CallKind,
    CallSetupRequest,
    CapabilityRequest,
    SubChannel,
    VideoCapability,
    VoiceCapability,
)


async def read_params(request: Request) -> dict[str, str]:
    """Collapse query-string and form parameters into one mapping.

    Form fields win over query parameters with the same name. File uploads are ignored.
    """

    params = dict(request.query_params)
    if request.method == "POST":
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    return params


class TokenParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    identity: str | None = None
    type: str | None = Field(default=None, description="Push sub-channel: android, sandbox or production.")

    def capability(self, *, video: bool = False) -> CapabilityRequest:
        if video:
            return VideoCapability()
        return VoiceCapability(sub_channel=SubChannel.resolve(self.type))


class CallSetupParams(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str | None = None
    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    name: str | None = None
    record: str | None = None

    def to_request(self) -> CallSetupRequest:
        return CallSetupRequest(
            kind=CallKind.resolve(self.type),
            to=self.to,
            from_=self.from_,
            display_name=self.name,
            record=self.record,
        )
