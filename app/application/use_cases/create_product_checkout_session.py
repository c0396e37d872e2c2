from __future__ import annotations

import logging

from app.application.dto.checkout import (
    CheckoutSessionOutput,
    CreateProductCheckoutSessionInput,
    PaymentLineItem,
    PaymentSessionRequest,
)
from app.application.ports.payment_provider_port import PaymentProviderPort
from app.application.ports.product_catalog_port import ProductCatalogPort
from app.domain.exceptions import CheckoutInputError, ProductNotFoundError
from app.domain.services.checkout_policy import (
    BILLING_ADDRESS_REQUIRED,
    PAYMENT_MODE,
    base_metadata,
    ensure_purchasable,
    shipping_countries_for,
    validate_quantity,
)
from app.domain.services.checkout_urls import resolve_redirect_urls


logger = logging.getLogger(__name__)


class CreateProductCheckoutSessionUseCase:
    def __init__(
        self,
        *,
        catalog_port: ProductCatalogPort,
        payment_port: PaymentProviderPort,
        base_url: str,
    ):
        self._catalog_port = catalog_port
        self._payment_port = payment_port
        self._base_url = base_url

    def execute(self, command: CreateProductCheckoutSessionInput) -> CheckoutSessionOutput:
        if not command.product_id:
            raise CheckoutInputError("Product ID is required")

        product = self._catalog_port.resolve(command.product_id)
        if product is None:
            raise ProductNotFoundError("Product not found")

        quantity = validate_quantity(command.quantity)
        ensure_purchasable(product)

        success_url, cancel_url = resolve_redirect_urls(
            base_url=self._base_url,
            category=product.category,
            success_url=command.success_url,
            cancel_url=command.cancel_url,
        )
        metadata = {**base_metadata(product, quantity=quantity), **command.metadata}

        result = self._payment_port.create_checkout_session(
            PaymentSessionRequest(
                line_items=[PaymentLineItem(price=product.price_id, quantity=quantity)],
                mode=PAYMENT_MODE,
                success_url=success_url,
                cancel_url=cancel_url,
                customer_email=command.customer_email,
                metadata=metadata,
                allow_promotion_codes=False,
                billing_address_collection=BILLING_ADDRESS_REQUIRED,
                shipping_allowed_countries=shipping_countries_for(product),
            )
        )
        logger.info(
            "product_checkout: session_created product_id=%s category=%s quantity=%s session_id=%s",
            product.id,
            product.category,
            quantity,
            result.id,
        )
        return CheckoutSessionOutput(session_id=result.id, url=result.url)
