"""Tests for environment-driven settings."""

from backend.app.config.settings import Settings, resolve_api_key, resolve_model


def test_defaults_when_environment_is_empty(monkeypatch):
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_TIMEOUT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.openai_api_key is None
    assert settings.openai_model == "gpt-4.1-mini"
    assert settings.openai_timeout == 60.0
    assert settings.cors_origins == ["*"]


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-env")
    monkeypatch.setenv("OPENAI_TIMEOUT", "15")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:8501, http://127.0.0.1:8501")

    settings = Settings.from_env()

    assert settings.openai_api_key == "sk-env"
    assert settings.openai_model == "gpt-env"
    assert settings.openai_timeout == 15.0
    assert settings.cors_origins == ["http://localhost:8501", "http://127.0.0.1:8501"]


def test_server_key_beats_request_key():
    assert resolve_api_key(Settings(openai_api_key="sk-server"), "sk-request") == "sk-server"
    assert resolve_api_key(Settings(), "sk-request") == "sk-request"
    assert resolve_api_key(Settings(), "") is None


def test_request_model_beats_configured_model():
    settings = Settings(openai_model="gpt-server")
    assert resolve_model(settings, "gpt-request") == "gpt-request"
    assert resolve_model(settings, None) == "gpt-server"
