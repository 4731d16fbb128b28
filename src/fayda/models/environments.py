"""Fayda (MOSIP eSignet) environment endpoint tables.

Static, read-only data loaded once at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Environment(str, Enum):
    """Deployment targets of the Fayda identity provider."""

    UAT = "UAT"
    PROD = "PROD"


@dataclass(frozen=True)
class EnvironmentEndpoints:
    """OIDC endpoints and ACR values for one Fayda environment."""

    issuer: str
    authorization_endpoint: str
    token_endpoint: str
    userinfo_endpoint: str
    acr_values: str


ENVIRONMENTS: Mapping[Environment, EnvironmentEndpoints] = MappingProxyType(
    {
        Environment.UAT: EnvironmentEndpoints(
            issuer="https://esignet.ida.fayda.et",
            authorization_endpoint="https://esignet.ida.fayda.et/authorize",
            token_endpoint="https://esignet.ida.fayda.et/v1/esignet/oauth/v2/token",
            userinfo_endpoint="https://esignet.ida.fayda.et/v1/esignet/oidc/userinfo",
            acr_values=(
                "mosip:idp:acr:generated-code "
                "mosip:idp:acr:linked-wallet "
                "mosip:idp:acr:biometrics"
            ),
        ),
        # Production issuer still to be confirmed by the National ID Program
        Environment.PROD: EnvironmentEndpoints(
            issuer="https://id.gov.et",
            authorization_endpoint="https://id.gov.et/authorize",
            token_endpoint="https://id.gov.et/v1/esignet/oauth/v2/token",
            userinfo_endpoint="https://id.gov.et/v1/esignet/oidc/userinfo",
            acr_values=(
                "mosip:idp:acr:generated-code "
                "mosip:idp:acr:linked-wallet "
                "mosip:idp:acr:biometrics"
            ),
        ),
    }
)

DEFAULT_SCOPES = "openid profile email phone"

# Essential claims requested from Fayda on every authorization request
ESSENTIAL_CLAIMS: Mapping[str, Any] = MappingProxyType(
    {
        "userinfo": {
            "name": {"essential": True},
            "phone": {"essential": True},
            "email": {"essential": True},
            "picture": {"essential": True},
            "gender": {"essential": True},
            "birthdate": {"essential": True},
            "address": {"essential": True},
        },
        "id_token": {},
    }
)
