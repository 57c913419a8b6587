"""Tests for environment-driven settings."""
from settings import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "MODEL_NAME", "TEMPERATURE", "MAX_HISTORY_TURNS", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.PORT == 3000
    assert settings.MODEL_NAME == "gemini-2.5-flash"
    assert settings.TEMPERATURE == 0.9
    assert settings.MAX_HISTORY_TURNS == 0
    assert settings.cors_origins == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")

    settings = Settings()

    assert settings.PORT == 8080
    assert settings.API_KEY == "abc"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
