import dataclasses

import pytest

from fayda.models.config import ClientConfig
from fayda.models.environments import ENVIRONMENTS, Environment
from fayda.models.errors import ConfigError


class TestClientConfig:
    def test_defaults_to_uat(self) -> None:
        # Act
        config = ClientConfig(client_id="abc", private_key="key")

        # Assert
        assert config.environment is Environment.UAT
        assert config.endpoints == ENVIRONMENTS[Environment.UAT]
        assert config.redirect_uri is None

    def test_environment_matched_case_insensitively(self) -> None:
        # Act
        config = ClientConfig(client_id="abc", private_key="key", environment="prod")

        # Assert
        assert config.environment is Environment.PROD
        assert config.endpoints.issuer == "https://id.gov.et"

    def test_accepts_environment_member(self) -> None:
        config = ClientConfig(
            client_id="abc", private_key="key", environment=Environment.PROD
        )

        assert config.environment is Environment.PROD

    @pytest.mark.parametrize(
        "client_id, private_key",
        [("", "key"), ("abc", ""), (None, "key"), ("abc", None)],
    )
    def test_missing_credentials_rejected(self, client_id, private_key) -> None:
        with pytest.raises(ConfigError):
            ClientConfig(client_id=client_id, private_key=private_key)

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ClientConfig(client_id="abc", private_key="key", environment="STAGING")

        assert "STAGING" in str(exc_info.value)

    def test_is_immutable(self) -> None:
        config = ClientConfig(client_id="abc", private_key="key")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.client_id = "other"

    def test_private_key_not_in_repr(self) -> None:
        config = ClientConfig(client_id="abc", private_key="super-secret")

        assert "super-secret" not in repr(config)


class TestResolveRedirectUri:
    def test_call_site_overrides_default(self) -> None:
        config = ClientConfig(
            client_id="abc", private_key="key", redirect_uri="https://a.example/cb"
        )

        assert config.resolve_redirect_uri("https://b.example/cb") == (
            "https://b.example/cb"
        )

    def test_falls_back_to_default(self) -> None:
        config = ClientConfig(
            client_id="abc", private_key="key", redirect_uri="https://a.example/cb"
        )

        assert config.resolve_redirect_uri() == "https://a.example/cb"

    def test_missing_everywhere_raises(self) -> None:
        config = ClientConfig(client_id="abc", private_key="key")

        with pytest.raises(ConfigError):
            config.resolve_redirect_uri()


class TestEnvironmentTable:
    def test_every_environment_has_endpoints(self) -> None:
        for environment in Environment:
            endpoints = ENVIRONMENTS[environment]
            assert endpoints.authorization_endpoint.startswith("https://")
            assert endpoints.token_endpoint.startswith("https://")
            assert endpoints.userinfo_endpoint.startswith("https://")
            assert endpoints.acr_values

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ENVIRONMENTS[Environment.UAT] = None
