"""Client configuration for the Fayda OIDC client."""

from __future__ import annotations

from dataclasses import dataclass, field

from fayda.models.environments import ENVIRONMENTS, Environment, EnvironmentEndpoints
from fayda.models.errors import ConfigError


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Validated once at construction. The private key material stays opaque
    here and is only parsed when a client assertion is signed.

    Args:
        client_id: Client ID issued by the National ID Program
        private_key: RSA private key as PEM, or Base64 of a PEM, JWK or
            DER PKCS#8 key
        environment: ``"UAT"`` or ``"PROD"`` (case-insensitive)
        redirect_uri: Default redirect URI for authorization and token calls
    """

    client_id: str
    private_key: str = field(repr=False)
    environment: Environment = Environment.UAT
    redirect_uri: str | None = None

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ConfigError("client_id is required")
        if not self.private_key:
            raise ConfigError("private_key is required")

        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "environment", _resolve_environment(self.environment))

    @property
    def endpoints(self) -> EnvironmentEndpoints:
        return ENVIRONMENTS[self.environment]

    def resolve_redirect_uri(self, redirect_uri: str | None = None) -> str:
        """Return the call-site redirect URI, falling back to the configured one.

        Raises:
            ConfigError: If neither is set
        """
        uri = redirect_uri or self.redirect_uri
        if not uri:
            raise ConfigError(
                "redirect_uri is required in the client config or the method call"
            )
        return uri


def _resolve_environment(value: Environment | str) -> Environment:
    if isinstance(value, Environment):
        return value
    try:
        return Environment(str(value).upper())
    except ValueError as e:
        valid = ", ".join(env.value for env in Environment)
        raise ConfigError(f"Invalid environment: {value!r}. Use one of: {valid}") from e
