import pytest

from app.config.settings import DEFAULT_TARGET_URL, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ["PORT", "RELAY_TARGET_URL", "RELAY_FETCH_TIMEOUT", "CORS_ORIGINS"]:
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.port == 3000
        assert settings.default_target_url == DEFAULT_TARGET_URL
        assert settings.fetch_timeout == 60.0
        assert settings.cors_origins == ["*"]

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("RELAY_TARGET_URL", "https://upload.internal/api")
        monkeypatch.setenv("RELAY_FORWARD_TIMEOUT", "2.5")
        monkeypatch.setenv("RELAY_STAGING_DIR", str(tmp_path))
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()
        assert settings.port == 8080
        assert settings.default_target_url == "https://upload.internal/api"
        assert settings.forward_timeout == 2.5
        assert settings.staging_dir == str(tmp_path)
        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]
        assert settings.log_level == "DEBUG"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValueError, match="PORT"):
            Settings.from_env()

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("RELAY_FETCH_TIMEOUT", "0")
        with pytest.raises(ValueError):
            Settings.from_env()
