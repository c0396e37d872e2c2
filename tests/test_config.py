from __future__ import annotations

from app.shared.config import get_settings


def test_settings_defaults(monkeypatch):
    for name in ("PUBLIC_BASE_URL", "STRIPE_API_VERSION", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.public_base_url == "http://localhost:3000"
    assert settings.stripe_api_version == "2023-10-16"
    assert settings.cors_allow_origins == ["*"]
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://cipher.example/")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("STRIPE_PRICE_ID_SUPPORTER", "price_env_supporter")
    monkeypatch.delenv("STRIPE_PRICE_ID_AI_TRANSFORMATION", raising=False)

    settings = get_settings()

    assert settings.public_base_url == "https://cipher.example"
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]
    assert settings.price_overrides["supporter"] == "price_env_supporter"
    assert "ai-transformation-5day" not in settings.price_overrides
