from __future__ import annotations

from dataclasses import dataclass, fields

from config.settings import get_settings
from signaling.errors import ConfigurationMissingError
from signaling.models import CapabilityGrant, SubChannel, VoiceCapabilityGrant


@dataclass(frozen=True)
class TwilioConfig:
    account_sid: str | None = None
    api_key: str | None = None
    api_key_secret: str | None = None
    push_credential_sid_android: str | None = None
    push_credential_sid_sandbox: str | None = None
    push_credential_sid_production: str | None = None
    app_sid: str | None = None
    caller_number: str | None = None
    recording_status_callback_url: str | None = None
    default_identity: str = "alice"
    token_ttl_seconds: int = 3600

    def push_credential_sid_for(self, sub_channel: SubChannel) -> str | None:
        if sub_channel is SubChannel.ANDROID:
            return self.push_credential_sid_android
        if sub_channel is SubChannel.SANDBOX:
            return self.push_credential_sid_sandbox
        return self.push_credential_sid_production

    def require(self, *names: str) -> None:
        """Raise ``ConfigurationMissingError`` listing every blank value among ``names``."""

        missing = [name.upper() for name in names if not getattr(self, name)]
        if missing:
            raise ConfigurationMissingError(missing)


def get_twilio_config() -> TwilioConfig:
    settings = get_settings()
    return TwilioConfig(**{f.name: getattr(settings, f.name) for f in fields(TwilioConfig)})


class TwilioTokenSigner:
    """Signs capability grants into Twilio access tokens (JWT)."""

    def __init__(self, ttl: int = 3600) -> None:
        self.ttl = ttl

    def sign(
        self,
        *,
        account_sid: str,
        signing_key_sid: str,
        secret: str,
        identity: str,
        grant: CapabilityGrant,
    ) -> str:
        from twilio.jwt.access_token import AccessToken

        token = AccessToken(account_sid, signing_key_sid, secret, identity=identity, ttl=self.ttl)
        token.add_grant(_to_twilio_grant(grant))
        return token.to_jwt()


def _to_twilio_grant(grant: CapabilityGrant):
    from twilio.jwt.access_token.grants import VideoGrant, VoiceGrant

    if isinstance(grant, VoiceCapabilityGrant):
        return VoiceGrant(
            outgoing_application_sid=grant.outgoing_application_sid,
            push_credential_sid=grant.push_credential_sid,
        )
    return VideoGrant()


def build_token_signer() -> TwilioTokenSigner:
    return TwilioTokenSigner(ttl=get_twilio_config().token_ttl_seconds)
