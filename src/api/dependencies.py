"""Shared FastAPI dependencies.

Separated to avoid circular imports between route modules.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from signaling.call_router import CallRouter
    from signaling.credentials import CredentialIssuer


@lru_cache(maxsize=1)
def _issuer_factory() -> CredentialIssuer:
    from integrations.twilio_client import get_twilio_config, build_token_signer
    from signaling.credentials import CredentialIssuer

    return CredentialIssuer(get_twilio_config(), build_token_signer())


@lru_cache(maxsize=1)
def _router_factory() -> CallRouter:
    from integrations.twilio_client import get_twilio_config
    from integrations.twiml import TwiMLSerializer
    from signaling.call_router import CallRouter

    return CallRouter(get_twilio_config(), TwiMLSerializer())


def get_credential_issuer() -> CredentialIssuer:
    return _issuer_factory()


def get_call_router() -> CallRouter:
    return _router_factory()
