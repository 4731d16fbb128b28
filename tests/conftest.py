import base64
from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from fayda.models.config import ClientConfig


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pem_private_key(rsa_private_key) -> str:
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture(scope="session")
def base64_pem_private_key(pem_private_key) -> str:
    return base64.b64encode(pem_private_key.encode("ascii")).decode("ascii")


@pytest.fixture(scope="session")
def base64_jwk_private_key(rsa_private_key) -> str:
    jwk_json = RSAAlgorithm.to_jwk(rsa_private_key)
    return base64.b64encode(jwk_json.encode("utf-8")).decode("ascii")


@pytest.fixture(scope="session")
def base64_pkcs8_private_key(rsa_private_key) -> str:
    der = rsa_private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return base64.b64encode(der).decode("ascii")


@pytest.fixture
def client_config(pem_private_key) -> ClientConfig:
    return ClientConfig(
        client_id="abc",
        private_key=pem_private_key,
        environment="UAT",
        redirect_uri="https://myapp.example/callback",
    )


@pytest.fixture
def make_jwt(rsa_private_key):
    def _make_jwt(claims: dict) -> str:
        return jwt.encode(claims, rsa_private_key, algorithm="RS256")

    return _make_jwt


def make_response(
    status_code: int = 200,
    json_data=None,
    text: str = "",
    content_type: str = "application/json",
) -> MagicMock:
    """Build a stand-in for ``httpx.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"content-type": content_type}
    response.text = text
    if json_data is None and content_type != "application/json":
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    return make_response
