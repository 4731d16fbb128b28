"""Private key JWT client assertion (RFC 7523, OIDC Core Section 9)."""

from __future__ import annotations

import logging
import secrets
import time

import jwt

from fayda.primitives.keys import SIGNING_ALGORITHM, import_private_key

logger = logging.getLogger(__name__)

ASSERTION_LIFETIME_SECONDS = 5 * 60


def sign_client_assertion(
    client_id: str,
    token_endpoint: str,
    private_key_material: str | bytes,
) -> str:
    """Sign a short-lived client assertion for the token endpoint.

    Every call mints a new ``jti`` and ``iat``, so assertions are single-use
    and must not be cached.

    Args:
        client_id: Client ID, used as both ``iss`` and ``sub``
        token_endpoint: Token endpoint URL, used as ``aud``
        private_key_material: Key material accepted by ``import_private_key``

    Returns:
        Compact RS256-signed JWT

    Raises:
        KeyImportError: If the key material cannot be imported
    """
    private_key = import_private_key(private_key_material)

    issued_at = int(time.time())
    claims = {
        "iss": client_id,
        "sub": client_id,
        "aud": token_endpoint,
        "jti": secrets.token_hex(16),
        "iat": issued_at,
        "exp": issued_at + ASSERTION_LIFETIME_SECONDS,
    }

    assertion = jwt.encode(
        claims,
        private_key,
        algorithm=SIGNING_ALGORITHM,
        headers={"typ": "JWT"},
    )

    logger.debug(f"Signed client assertion for {client_id} (aud={token_endpoint})")
    return assertion
