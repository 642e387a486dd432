"""Twilio Voice/Video client endpoints.

This module provides:
- Access token endpoints for the mobile/web Voice and Video SDKs.
- The TwiML application voice URL (``/makeCall``) that routes outgoing client calls.
- Static greetings for inbound calls and the welcome page.

Every endpoint accepts GET (query string) and POST (form body) alike.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from api.dependencies import get_call_router, get_credential_issuer
from api.schemas import CallSetupParams, TokenParams, read_params
from signaling import greetings
from signaling.call_router import CallRouter
from signaling.credentials import CredentialIssuer

router = APIRouter(tags=["twilio"])

_BOTH = ["GET", "POST"]


def _twiml_response(xml: str) -> Response:
    # Twilio expects application/xml
    return Response(content=xml, media_type="application/xml")


async def _issue_token(request: Request, issuer: CredentialIssuer, *, video: bool) -> PlainTextResponse:
    params = TokenParams.model_validate(await read_params(request))
    credential = issuer.issue(issuer.resolve_identity(params.identity), params.capability(video=video))
    return PlainTextResponse(credential.token)


@router.api_route("/accessToken", methods=_BOTH, response_class=PlainTextResponse)
async def voice_access_token(
    request: Request,
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> PlainTextResponse:
    return await _issue_token(request, issuer, video=False)


@router.api_route("/videoToken", methods=_BOTH, response_class=PlainTextResponse)
async def video_access_token(
    request: Request,
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> PlainTextResponse:
    return await _issue_token(request, issuer, video=True)


@router.api_route("/makeCall", methods=_BOTH)
async def make_call(
    request: Request,
    call_router: CallRouter = Depends(get_call_router),
) -> Response:
    """TwiML application voice URL.

    ``to`` may be a phone number, a client identity or (with ``type=conference``) a room name.
    """

    params = CallSetupParams.model_validate(await read_params(request))
    return _twiml_response(call_router.make_call(params.to_request()))


@router.api_route("/incoming", methods=_BOTH)
async def incoming_call() -> Response:
    return _twiml_response(greetings.incoming())


@router.api_route("/", methods=_BOTH)
async def welcome() -> Response:
    return _twiml_response(greetings.welcome())
