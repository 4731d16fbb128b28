"""Identity token payload decoding.

``decode_payload`` only extracts claims. It does NOT verify the token's
signature: the decoded claims are not cryptographically authenticated by
this step. Their trust comes from having been fetched directly from the
provider over TLS with our own access token. Callers that need signature
verification against the provider's published keys must call
``verify_token`` explicitly.
"""

from __future__ import annotations

import binascii
import json
from typing import Any, Mapping

import jwt
from jwt.utils import base64url_decode

from fayda.models.errors import MalformedTokenError, TokenVerificationError


def decode_payload(compact_jwt: str) -> dict[str, Any]:
    """Decode the payload segment of a compact JWT without verifying it.

    Args:
        compact_jwt: ``header.payload.signature`` token

    Returns:
        The payload claims

    Raises:
        MalformedTokenError: If the token is not three segments or the
            payload is not a base64url encoded JSON object
    """
    if not isinstance(compact_jwt, str):
        raise MalformedTokenError("Invalid JWT format: token must be a string")

    segments = compact_jwt.strip().split(".")
    if len(segments) != 3 or not segments[1]:
        raise MalformedTokenError(
            f"Invalid JWT format: expected 3 segments, got {len(segments)}"
        )

    try:
        payload = json.loads(base64url_decode(segments[1]))
    except (binascii.Error, ValueError) as e:
        raise MalformedTokenError(f"Invalid JWT format: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedTokenError("Invalid JWT format: payload is not a JSON object")
    return payload


def verify_token(
    compact_jwt: str,
    key: Mapping[str, Any] | str | bytes,
    *,
    audience: str | None = None,
    issuer: str | None = None,
) -> dict[str, Any]:
    """Verify an RS256 signed JWT and return its claims.

    Args:
        compact_jwt: Token to verify
        key: Provider public key as a JWK mapping or PEM
        audience: Expected ``aud`` (usually our client ID), checked when given
        issuer: Expected ``iss``, checked when given

    Raises:
        TokenVerificationError: If the signature or registered claims are invalid
    """
    try:
        verification_key = (
            jwt.PyJWK(dict(key), algorithm="RS256").key
            if isinstance(key, Mapping)
            else key
        )
        return jwt.decode(
            compact_jwt,
            verification_key,
            algorithms=["RS256"],
            audience=audience,
            issuer=issuer,
            options={"verify_aud": audience is not None},
        )
    except (jwt.PyJWTError, ValueError, TypeError) as e:
        raise TokenVerificationError(f"Token verification failed: {e}") from e
