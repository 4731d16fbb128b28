"""Private key material resolution for client assertion signing.

Client keys reach the SDK in several shapes, most often through an
environment variable. The material is classified once into a
:class:`KeyFormat`, then handed to the importer for that format:

1. ``PEM``: the input already contains a PEM header
2. ``BASE64_PEM``: the Base64-decoded input contains a PEM header
3. ``JWK``: the decoded input parses as a JSON object (RFC 7517)
4. ``PKCS8``: anything else, loaded as a DER encoded PKCS#8 key
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from fayda.models.errors import KeyImportError

logger = logging.getLogger(__name__)

PEM_MARKER = "-----BEGIN"
SIGNING_ALGORITHM = "RS256"


class KeyFormat(str, Enum):
    PEM = "pem"
    BASE64_PEM = "base64-pem"
    JWK = "jwk"
    PKCS8 = "pkcs8"


@dataclass(frozen=True)
class KeyMaterial:
    """Classified key material ready for its format's importer."""

    format: KeyFormat
    payload: Any


def classify_key_material(material: str | bytes) -> KeyMaterial:
    """Decide which format the key material is in.

    Args:
        material: PEM text, or Base64 of a PEM, JWK JSON or DER PKCS#8 key

    Returns:
        KeyMaterial tagged with the detected format

    Raises:
        KeyImportError: If the material is empty or not valid Base64
    """
    if isinstance(material, bytes):
        material = material.decode("utf-8", errors="replace")
    if not material or not material.strip():
        raise KeyImportError("Failed to import private key: key material is empty")

    if PEM_MARKER in material:
        return KeyMaterial(KeyFormat.PEM, material.encode("utf-8"))

    try:
        decoded = _b64decode(material)
    except (binascii.Error, ValueError) as e:
        raise KeyImportError(f"Failed to import private key: {e}") from e

    if PEM_MARKER.encode("ascii") in decoded:
        return KeyMaterial(KeyFormat.BASE64_PEM, decoded)

    try:
        jwk = json.loads(decoded)
    except ValueError:
        return KeyMaterial(KeyFormat.PKCS8, decoded)

    if isinstance(jwk, dict):
        return KeyMaterial(KeyFormat.JWK, jwk)
    return KeyMaterial(KeyFormat.PKCS8, decoded)


def import_private_key(material: str | bytes) -> rsa.RSAPrivateKey:
    """Resolve key material into an RSA private key for RS256 signing.

    Raises:
        KeyImportError: If the material cannot be imported, wrapping the cause
    """
    key_material = classify_key_material(material)
    importer = _IMPORTERS[key_material.format]

    logger.debug(f"Importing private key as {key_material.format.value}")

    try:
        key = importer(key_material.payload)
    except (
        ValueError, TypeError, KeyError, UnsupportedAlgorithm, jwt.PyJWTError
    ) as e:
        raise KeyImportError(f"Failed to import private key: {e}") from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyImportError(
            f"Failed to import private key: expected an RSA private key, "
            f"got {type(key).__name__}"
        )
    return key


def _import_pem(payload: bytes) -> Any:
    return serialization.load_pem_private_key(payload, password=None)


def _import_jwk(payload: dict[str, Any]) -> Any:
    return jwt.PyJWK(payload, algorithm=SIGNING_ALGORITHM).key


def _import_pkcs8(payload: bytes) -> Any:
    return serialization.load_der_private_key(payload, password=None)


_IMPORTERS: dict[KeyFormat, Callable[[Any], Any]] = {
    KeyFormat.PEM: _import_pem,
    KeyFormat.BASE64_PEM: _import_pem,
    KeyFormat.JWK: _import_jwk,
    KeyFormat.PKCS8: _import_pkcs8,
}


def _b64decode(material: str) -> bytes:
    # both the standard and the URL-safe alphabet are accepted
    compact = "".join(material.split()).replace("-", "+").replace("_", "/")
    # padding is optional
    compact += "=" * (-len(compact) % 4)
    return base64.b64decode(compact, validate=True)
