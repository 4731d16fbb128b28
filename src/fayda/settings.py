"""Process configuration for the Fayda client.

Reads ``FAYDA_*`` environment variables (and an optional ``.env`` file).
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from fayda.models.config import ClientConfig


class FaydaSettings(BaseSettings):
    """Fayda client settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="FAYDA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    client_id: str = ""
    private_key: SecretStr = SecretStr("")
    environment: str = "UAT"
    redirect_uri: str | None = None
    timeout: float = Field(default=30.0, gt=0)

    def to_client_config(self) -> ClientConfig:
        """Build a validated ``ClientConfig``.

        Raises:
            ConfigError: If a required value is missing or invalid
        """
        return ClientConfig(
            client_id=self.client_id,
            private_key=self.private_key.get_secret_value(),
            environment=self.environment,
            redirect_uri=self.redirect_uri or None,
        )
