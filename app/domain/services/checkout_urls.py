from __future__ import annotations

from app.domain.entities.product import (
    CATEGORY_AUDIT,
    CATEGORY_DIAGNOSTIC,
    CATEGORY_KIT,
    CATEGORY_OMNIPANEL,
    CATEGORY_TRANSFORMATION,
)


# Stripe substitutes the placeholder with the real session id on redirect.
SESSION_ID_QUERY = "?session_id={CHECKOUT_SESSION_ID}"

SUCCESS_PATHS = {
    CATEGORY_OMNIPANEL: "/omnipanel/success",
    CATEGORY_DIAGNOSTIC: "/products/ai-business-diagnostic/success",
    CATEGORY_AUDIT: "/products/website-audit/success",
    CATEGORY_KIT: "/products/ai-starter-kits/success",
    CATEGORY_TRANSFORMATION: "/products/ai-transformation/success",
}

CANCEL_PATHS = {
    CATEGORY_OMNIPANEL: "/omnipanel",
    CATEGORY_DIAGNOSTIC: "/products/ai-business-diagnostic",
    CATEGORY_AUDIT: "/products/website-audit",
    CATEGORY_KIT: "/products/ai-starter-kits",
    CATEGORY_TRANSFORMATION: "/products/ai-transformation",
}

DEFAULT_SUCCESS_PATH = "/success"
DEFAULT_CANCEL_PATH = "/products"


def success_path_for(category: str) -> str:
    return SUCCESS_PATHS.get(category, DEFAULT_SUCCESS_PATH)


def cancel_path_for(category: str) -> str:
    return CANCEL_PATHS.get(category, DEFAULT_CANCEL_PATH)


def default_success_url(*, base_url: str, category: str) -> str:
    return f"{base_url}{success_path_for(category)}{SESSION_ID_QUERY}"


def default_cancel_url(*, base_url: str, category: str) -> str:
    return f"{base_url}{cancel_path_for(category)}"


def resolve_redirect_urls(
    *,
    base_url: str,
    category: str,
    success_url: str | None,
    cancel_url: str | None,
) -> tuple[str, str]:
    """Caller URLs win; empty or missing ones fall back to the category defaults."""
    return (
        success_url or default_success_url(base_url=base_url, category=category),
        cancel_url or default_cancel_url(base_url=base_url, category=category),
    )
