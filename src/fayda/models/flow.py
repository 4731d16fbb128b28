"""Authorization flow models.

Contains the authorization request parameters, the result handed back to
the caller, and the parsed provider callback.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import urlencode


@dataclass(frozen=True)
class AuthorizationParameters:
    """Query parameters of a Fayda authorization request."""

    authorization_endpoint: str
    client_id: str
    scope: str
    redirect_uri: str
    state: str
    code_challenge: str
    code_challenge_method: str
    acr_values: str
    claims: Mapping[str, Any]

    def build_authorization_url(self) -> str:
        """Build the complete authorization URL."""
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "scope": self.scope,
            "redirect_uri": self.redirect_uri,
            "state": self.state,
            "code_challenge": self.code_challenge,
            "code_challenge_method": self.code_challenge_method,
            "acr_values": self.acr_values,
            "claims": json.dumps(dict(self.claims), separators=(",", ":")),
        }

        return f"{self.authorization_endpoint}?{urlencode(params)}"


@dataclass(frozen=True)
class AuthorizationRequest:
    """Result of building an authorization URL.

    ``code_verifier`` must be stored by the caller until the token exchange.
    """

    url: str
    code_verifier: str = field(repr=False)
    state: str


@dataclass(frozen=True)
class AuthorizationResponse:
    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None
    error_uri: str | None = None

    def is_success(self) -> bool:
        return self.error is None and self.code is not None

    def is_error(self) -> bool:
        return self.error is not None
