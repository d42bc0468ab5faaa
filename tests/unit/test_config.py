"""
Unit tests for router configuration.
"""

import pytest

from eventroute import RouterConfig


class TestRouterConfig:
    """Tests for RouterConfig."""

    def test_defaults(self):
        """Test default values."""
        config = RouterConfig()

        assert config.views_dir is None
        assert config.static_chunk_size == 8192
        assert config.default_mime_type == "application/octet-stream"
        assert config.session_key == "session"
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        config.validate()

    def test_from_env(self, monkeypatch):
        """Test reading configuration from the environment."""
        monkeypatch.setenv("EVENTROUTE_VIEWS_DIR", "/srv/views")
        monkeypatch.setenv("EVENTROUTE_CHUNK_SIZE", "1024")
        monkeypatch.setenv("EVENTROUTE_DEFAULT_MIME", "text/plain")
        monkeypatch.setenv("EVENTROUTE_SESSION_KEY", "rack.session")
        monkeypatch.setenv("EVENTROUTE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EVENTROUTE_LOG_FORMAT", "json")

        config = RouterConfig.from_env()

        assert config.views_dir == "/srv/views"
        assert config.static_chunk_size == 1024
        assert config.default_mime_type == "text/plain"
        assert config.session_key == "rack.session"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_defaults(self, monkeypatch):
        """Test unset variables fall back to defaults."""
        for name in ("VIEWS_DIR", "CHUNK_SIZE", "DEFAULT_MIME", "SESSION_KEY",
                     "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(f"EVENTROUTE_{name}", raising=False)

        assert RouterConfig.from_env() == RouterConfig()

    @pytest.mark.parametrize("kwargs", [
        {"static_chunk_size": 0},
        {"log_format": "xml"},
        {"log_level": "LOUD"},
        {"default_mime_type": ""},
    ])
    def test_validate_rejects(self, kwargs):
        """Test invalid values fail validation."""
        with pytest.raises(ValueError):
            RouterConfig(**kwargs).validate()

    def test_log_level_case_insensitive(self):
        """Test lower-case levels are accepted."""
        RouterConfig(log_level="warning").validate()
