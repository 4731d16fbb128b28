"""Token exchange request and response models.

Contains the private-key-JWT authenticated token request and the token
endpoint response body.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"


@dataclass(frozen=True)
class TokenRequest:
    """Token exchange request parameters (RFC 6749 Section 4.1.3).

    Authenticates the client with a signed JWT assertion (RFC 7523) and
    proves possession of the PKCE code_verifier (RFC 7636).
    """

    # Required fields first
    token_endpoint: str
    code: str
    redirect_uri: str
    client_id: str
    client_assertion: str = field(repr=False)
    code_verifier: str = field(repr=False)

    # Optional fields with defaults last
    grant_type: str = "authorization_code"
    client_assertion_type: str = CLIENT_ASSERTION_TYPE

    def to_form_data(self) -> dict[str, str]:
        """Convert to form data for application/x-www-form-urlencoded request.

        Returns:
            Dictionary suitable for httpx data parameter
        """
        return {
            "grant_type": self.grant_type,
            "code": self.code,
            "redirect_uri": self.redirect_uri,
            "client_id": self.client_id,
            "client_assertion_type": self.client_assertion_type,
            "client_assertion": self.client_assertion,
            "code_verifier": self.code_verifier,
        }


class TokenResponse(BaseModel):
    """Token endpoint response (RFC 6749 Section 5, OIDC Core 3.1.3.3)."""

    model_config = ConfigDict(extra="allow")

    # Success response fields
    access_token: str | None = None
    token_type: str = "Bearer"
    expires_in: int | None = None
    id_token: str | None = None
    scope: str | None = None

    # Error response fields
    error: str | None = None
    error_description: str | None = None

    def is_success(self) -> bool:
        """Check if token response indicates success."""
        return self.error is None and self.access_token is not None
