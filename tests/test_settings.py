import pytest

from fayda.models.environments import Environment
from fayda.models.errors import ConfigError
from fayda.settings import FaydaSettings


class TestFaydaSettings:
    def test_loads_from_environment(self, monkeypatch, pem_private_key) -> None:
        # Arrange
        monkeypatch.setenv("FAYDA_CLIENT_ID", "abc")
        monkeypatch.setenv("FAYDA_PRIVATE_KEY", pem_private_key)
        monkeypatch.setenv("FAYDA_ENVIRONMENT", "prod")
        monkeypatch.setenv("FAYDA_REDIRECT_URI", "https://myapp.example/callback")
        monkeypatch.setenv("FAYDA_TIMEOUT", "10")

        # Act
        settings = FaydaSettings(_env_file=None)
        config = settings.to_client_config()

        # Assert
        assert settings.timeout == 10.0
        assert config.client_id == "abc"
        assert config.private_key == pem_private_key
        assert config.environment is Environment.PROD
        assert config.redirect_uri == "https://myapp.example/callback"

    def test_private_key_hidden(self, monkeypatch) -> None:
        monkeypatch.setenv("FAYDA_PRIVATE_KEY", "super-secret")

        settings = FaydaSettings(_env_file=None)

        assert "super-secret" not in repr(settings)

    def test_missing_values_raise_config_error(self, monkeypatch) -> None:
        monkeypatch.delenv("FAYDA_CLIENT_ID", raising=False)
        monkeypatch.delenv("FAYDA_PRIVATE_KEY", raising=False)

        settings = FaydaSettings(_env_file=None)

        with pytest.raises(ConfigError):
            settings.to_client_config()

    def test_empty_redirect_uri_treated_as_unset(self, monkeypatch) -> None:
        monkeypatch.setenv("FAYDA_CLIENT_ID", "abc")
        monkeypatch.setenv("FAYDA_PRIVATE_KEY", "key")
        monkeypatch.setenv("FAYDA_REDIRECT_URI", "")

        config = FaydaSettings(_env_file=None).to_client_config()

        assert config.redirect_uri is None
