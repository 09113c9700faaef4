"""Unit tests for application settings."""
import pytest
from pydantic import ValidationError

from ordergen.core.config import Settings
from ordergen.services.ordering.ids import IdMode


class TestSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        """Test the defaults match the local development endpoint."""
        for name in ("WEBSOCKET_URL", "INTERACTIVE", "USER_ID", "ID_MODE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.websocket_url == "wss://localhost:7121/wss/orders"
        assert settings.ssl_verify is True
        assert settings.interactive is True
        assert settings.user_id is None
        assert settings.id_mode == IdMode.COUNTER
        assert settings.min_send_delay == 3.0
        assert settings.max_send_delay == 8.0
        assert settings.idle_poll_interval == 0.5
        assert settings.catalog_file is None

    def test_environment_overrides(self, monkeypatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("WEBSOCKET_URL", "ws://orders.test:8080/ws")
        monkeypatch.setenv("INTERACTIVE", "false")
        monkeypatch.setenv("USER_ID", "12")
        monkeypatch.setenv("id_mode", "uuid")
        monkeypatch.setenv("SSL_VERIFY", "0")

        settings = Settings(_env_file=None)

        assert settings.websocket_url == "ws://orders.test:8080/ws"
        assert settings.interactive is False
        assert settings.user_id == 12
        assert settings.id_mode == IdMode.UUID
        assert settings.ssl_verify is False

    def test_env_file(self, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("MIN_SEND_DELAY=1\nMAX_SEND_DELAY=2\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.min_send_delay == 1.0
        assert settings.max_send_delay == 2.0

    def test_inverted_delays_rejected(self):
        """Test the maximum delay cannot be below the minimum."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_send_delay=5, max_send_delay=1)

    def test_non_positive_delay_rejected(self):
        """Test zero delays are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, idle_poll_interval=0)

    def test_unknown_id_mode_rejected(self):
        """Test id modes are validated."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, id_mode="sequential")
