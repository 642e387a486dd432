"""Access-token issuance for voice and video clients.

Every token carries exactly one identity and exactly one capability grant.
Signing is delegated to a ``Signer`` so the grant selection stays testable
without the Twilio SDK.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from signaling.diagnostics import log_quietly
from signaling.models import (
    CapabilityGrant,
    CapabilityRequest,
    Credential,
    IdentityClaim,
    VideoCapability,
    VideoCapabilityGrant,
    VoiceCapability,
    VoiceCapabilityGrant,
)

if TYPE_CHECKING:  # pragma: no cover
    from integrations.twilio_client import TwilioConfig

LOGGER = logging.getLogger(__name__)

_SIGNING_SETTINGS = ("account_sid", "api_key", "api_key_secret")


class Signer(Protocol):
    def sign(
        self,
        *,
        account_sid: str,
        signing_key_sid: str,
        secret: str,
        identity: str,
        grant: CapabilityGrant,
    ) -> str:  # pragma: no cover - protocol stub
        ...


class CredentialIssuer:
    def __init__(self, config: TwilioConfig, signer: Signer) -> None:
        self._config = config
        self._signer = signer

    def resolve_identity(self, identity: str | None) -> IdentityClaim:
        return IdentityClaim.resolve(identity, self._config.default_identity)

    def voice_grant(self, capability: VoiceCapability) -> VoiceCapabilityGrant:
        return VoiceCapabilityGrant(
            outgoing_application_sid=self._config.app_sid,
            push_credential_sid=self._config.push_credential_sid_for(capability.sub_channel),
        )

    def issue_voice_credential(self, claim: IdentityClaim, capability: VoiceCapability) -> Credential:
        return self._issue(claim, self.voice_grant(capability))

    def issue_video_credential(self, claim: IdentityClaim) -> Credential:
        return self._issue(claim, VideoCapabilityGrant())

    def issue(self, claim: IdentityClaim, capability: CapabilityRequest) -> Credential:
        if isinstance(capability, VideoCapability):
            return self.issue_video_credential(claim)
        return self.issue_voice_credential(claim, capability)

    def _issue(self, claim: IdentityClaim, grant: CapabilityGrant) -> Credential:
        self._config.require(*_SIGNING_SETTINGS)

        token = self._signer.sign(
            account_sid=self._config.account_sid,
            signing_key_sid=self._config.api_key,
            secret=self._config.api_key_secret,
            identity=claim.identity,
            grant=grant,
        )
        log_quietly(LOGGER, logging.INFO, "Issued %s token for identity=%s", grant.kind, claim.identity)
        log_quietly(LOGGER, logging.DEBUG, "Token: %s", token)
        return Credential(token=token, identity=claim.identity, grant=grant)
