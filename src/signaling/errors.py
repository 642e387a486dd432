"""Domain-specific exceptions for credential issuance and call routing.

These exceptions are safe to import from API layers without pulling in the Twilio SDK.
"""

from __future__ import annotations


class GatewayError(Exception):
    status_code: int = 500
    default_detail: str = "Gateway error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ConfigurationMissingError(GatewayError):
    status_code = 500
    default_detail = "Server is not configured for this operation."

    def __init__(self, missing: tuple[str, ...] | list[str], detail: str | None = None) -> None:
        super().__init__(detail)
        self.missing = tuple(missing)

    def __str__(self) -> str:
        return f"Missing configuration: {', '.join(self.missing)}"
