from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


# Price id override for each catalog product.
PRICE_ID_ENV_VARS = {
    "individual-founder": "STRIPE_PRICE_ID_INDIVIDUAL_FOUNDER",
    "team-crisis-pack": "STRIPE_PRICE_ID_TEAM_CRISIS_PACK",
    "enterprise-emergency": "STRIPE_PRICE_ID_ENTERPRISE_EMERGENCY",
    "supporter": "STRIPE_PRICE_ID_SUPPORTER",
    "ai-business-diagnostic-standard": "STRIPE_PRICE_ID_AI_DIAGNOSTIC_STANDARD",
    "ai-business-diagnostic-premium": "STRIPE_PRICE_ID_AI_DIAGNOSTIC_PREMIUM",
    "website-conversion-audit": "STRIPE_PRICE_ID_WEBSITE_AUDIT",
    "ai-starter-kits": "STRIPE_PRICE_ID_AI_STARTER_KITS",
    "ai-transformation-5day": "STRIPE_PRICE_ID_AI_TRANSFORMATION",
}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    public_base_url: str
    stripe_secret_key: str
    stripe_api_version: str
    price_overrides: dict
    cors_allow_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    price_overrides = {
        product_id: _env(env_name, "")
        for product_id, env_name in PRICE_ID_ENV_VARS.items()
        if _env(env_name)
    }
    return Settings(
        public_base_url=(_env("PUBLIC_BASE_URL") or "http://localhost:3000").rstrip("/"),
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        stripe_api_version=_env("STRIPE_API_VERSION", "2023-10-16"),
        price_overrides=price_overrides,
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
