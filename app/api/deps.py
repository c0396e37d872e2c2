from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.create_product_checkout_session import (
    CreateProductCheckoutSessionUseCase,
)
from app.application.use_cases.create_tier_checkout_session import (
    CreateTierCheckoutSessionUseCase,
)
from app.application.use_cases.get_product import GetProductUseCase
from app.application.use_cases.list_products import ListProductsUseCase
from app.infrastructure.catalog.static_product_catalog import StaticProductCatalog
from app.infrastructure.clients.stripe_client import StripeClient
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_product_catalog() -> StaticProductCatalog:
    settings = get_settings()
    return StaticProductCatalog(price_overrides=settings.price_overrides)


@lru_cache(maxsize=1)
def _get_stripe_client() -> StripeClient:
    settings = get_settings()
    return StripeClient(
        secret_key=settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
    )


def get_create_tier_checkout_session_use_case() -> CreateTierCheckoutSessionUseCase:
    return CreateTierCheckoutSessionUseCase(
        catalog_port=_get_product_catalog(),
        payment_port=_get_stripe_client(),
        base_url=get_settings().public_base_url,
    )


def get_create_product_checkout_session_use_case() -> CreateProductCheckoutSessionUseCase:
    return CreateProductCheckoutSessionUseCase(
        catalog_port=_get_product_catalog(),
        payment_port=_get_stripe_client(),
        base_url=get_settings().public_base_url,
    )


def get_list_products_use_case() -> ListProductsUseCase:
    return ListProductsUseCase(catalog_port=_get_product_catalog())


def get_get_product_use_case() -> GetProductUseCase:
    return GetProductUseCase(catalog_port=_get_product_catalog())
