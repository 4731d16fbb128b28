"""PKCE (Proof Key for Code Exchange) primitives.

Implements RFC 7636 verifier/challenge generation plus the random state
token used for CSRF protection of the authorization redirect.
"""

from __future__ import annotations

import base64
import hashlib
import secrets

from fayda.models.errors import PKCEError, StateValidationError
from fayda.models.security import PKCEPair

DEFAULT_VERIFIER_BYTES = 43
DEFAULT_STATE_BYTES = 12


def generate_verifier(byte_length: int = DEFAULT_VERIFIER_BYTES) -> str:
    """Generate a cryptographically secure code verifier.

    Draws ``byte_length`` bytes from the OS CSPRNG and encodes them as
    URL-safe base64 without padding, so the result only contains unreserved
    characters ``[A-Za-z0-9-_]``.

    Args:
        byte_length: Number of random bytes to draw

    Returns:
        Base64url-encoded random string
    """
    if byte_length < 1:
        raise PKCEError("byte_length must be positive")
    return _b64url(secrets.token_bytes(byte_length))


def derive_challenge(verifier: str) -> str:
    """Derive the S256 code challenge from a code verifier.

    RFC 7636 Section 4.2: BASE64URL-ENCODE(SHA256(ASCII(code_verifier)))

    Args:
        verifier: The code verifier to hash

    Returns:
        Base64url-encoded SHA256 hash of the code verifier
    """
    digest = hashlib.sha256(verifier.encode("utf-8")).digest()
    return _b64url(digest)


def generate_pair(byte_length: int = DEFAULT_VERIFIER_BYTES) -> PKCEPair:
    """Generate a fresh verifier and its S256 challenge.

    Raises:
        PKCEError: If the parameters do not meet RFC 7636 length limits
    """
    verifier = generate_verifier(byte_length)
    try:
        return PKCEPair(
            code_verifier=verifier,
            code_challenge=derive_challenge(verifier),
            code_challenge_method="S256",
        )
    except ValueError as e:
        raise PKCEError(f"Failed to generate PKCE parameters: {e}") from e


def generate_state(byte_length: int = DEFAULT_STATE_BYTES) -> str:
    """Generate an opaque, unpredictable state parameter."""
    return generate_verifier(byte_length)


def validate_state(expected: str, actual: str) -> None:
    """Validate state parameter matches expected value.

    Args:
        expected: State parameter from original authorization request
        actual: State parameter from callback URL

    Raises:
        StateValidationError: If state parameters don't match
    """
    if not expected or not actual:
        raise StateValidationError("State parameter missing")
    if not secrets.compare_digest(expected.encode("utf-8"), actual.encode("utf-8")):
        raise StateValidationError("State parameter mismatch - possible CSRF attack")


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
