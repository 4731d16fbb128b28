"""Exception hierarchy for the Fayda OIDC client.

Provides specific exception types for each failure mode so callers can
tell configuration mistakes apart from provider rejections and network
failures.
"""

from __future__ import annotations

import asyncio


class FaydaError(Exception):
    """Base exception for all Fayda client errors."""

    pass


class ConfigError(FaydaError):
    """Raised when client configuration or call-time parameters are invalid."""

    pass


class ValidationError(FaydaError):
    """Raised when a required call argument is missing."""

    pass


class KeyImportError(FaydaError):
    """Raised when the private key material cannot be imported in any format."""

    pass


class PKCEError(FaydaError):
    """Raised when PKCE parameter generation or validation fails."""

    pass


class RemoteApiError(FaydaError):
    """Raised when the identity provider answers with a non-success status.

    The message is the provider's ``error_description`` when present, then
    its ``error`` code, then a generic status line.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error: str | None = None,
        error_description: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.error_description = error_description


class TransportError(FaydaError):
    """Raised when a request never reached the provider or never returned."""

    pass


class RequestTimeoutError(TransportError):
    """Raised when a request to the provider times out."""

    pass


class RequestCancelledError(TransportError, asyncio.CancelledError):
    """Raised when the task awaiting a provider request is cancelled.

    Also an ``asyncio.CancelledError`` so task cancellation still unwinds.
    """

    pass


class MalformedTokenError(FaydaError):
    """Raised when a compact JWT cannot be decoded."""

    pass


class TokenVerificationError(MalformedTokenError):
    """Raised when a JWT signature or its registered claims fail verification."""

    pass


class AuthorizationError(FaydaError):
    """Raised when the provider reports that user authorization failed."""

    pass


class AuthorizationCallbackError(FaydaError):
    """Raised when the provider's redirect back to us is malformed or invalid.

    This indicates the authorization server sent an invalid callback URL,
    not that our callback handling code failed.
    """

    pass


class StateValidationError(AuthorizationCallbackError):
    """Raised when OAuth state parameter validation fails.

    This indicates either a missing state parameter or a state mismatch,
    which could indicate a CSRF attack or authorization server issue.
    """

    pass
