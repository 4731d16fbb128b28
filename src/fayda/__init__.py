"""Fayda (Ethiopian National ID) OIDC client with PKCE and private key JWT."""

from fayda.client import FaydaClient, exchange_code_for_user
from fayda.models.config import ClientConfig
from fayda.models.environments import (
    DEFAULT_SCOPES,
    ENVIRONMENTS,
    ESSENTIAL_CLAIMS,
    Environment,
    EnvironmentEndpoints,
)
from fayda.models.errors import (
    AuthorizationCallbackError,
    AuthorizationError,
    ConfigError,
    FaydaError,
    KeyImportError,
    MalformedTokenError,
    PKCEError,
    RemoteApiError,
    RequestCancelledError,
    RequestTimeoutError,
    StateValidationError,
    TokenVerificationError,
    TransportError,
    ValidationError,
)
from fayda.models.flow import AuthorizationRequest, AuthorizationResponse
from fayda.primitives.assertion import sign_client_assertion
from fayda.primitives.claims import decode_payload, verify_token
from fayda.primitives.pkce import derive_challenge, generate_verifier
from fayda.services.flow import build_authorization_url
from fayda.settings import FaydaSettings

__all__ = [
    "AuthorizationCallbackError",
    "AuthorizationError",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "ClientConfig",
    "ConfigError",
    "DEFAULT_SCOPES",
    "ENVIRONMENTS",
    "ESSENTIAL_CLAIMS",
    "Environment",
    "EnvironmentEndpoints",
    "FaydaClient",
    "FaydaError",
    "FaydaSettings",
    "KeyImportError",
    "MalformedTokenError",
    "PKCEError",
    "RemoteApiError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "StateValidationError",
    "TokenVerificationError",
    "TransportError",
    "ValidationError",
    "build_authorization_url",
    "decode_payload",
    "derive_challenge",
    "exchange_code_for_user",
    "generate_verifier",
    "sign_client_assertion",
    "verify_token",
]
