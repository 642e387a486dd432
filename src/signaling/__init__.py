"""Credential issuance and call routing for voice/video clients.

Nothing in this package reads the environment or inspects HTTP requests.
Configuration arrives as an injected ``TwilioConfig`` and requests arrive
already normalized by the API layer.
"""
