from __future__ import annotations

import logging

from app.application.dto.checkout import (
    CheckoutSessionOutput,
    CreateTierCheckoutSessionInput,
    PaymentLineItem,
    PaymentSessionRequest,
)
from app.application.ports.payment_provider_port import PaymentProviderPort
from app.application.ports.product_catalog_port import ProductCatalogPort
from app.domain.entities.product import CATEGORY_OMNIPANEL
from app.domain.exceptions import InvalidTierError
from app.domain.services.checkout_policy import (
    BILLING_ADDRESS_REQUIRED,
    PAYMENT_MODE,
    SHIPPABLE_COUNTRIES,
    base_metadata,
    ensure_purchasable,
    validate_quantity,
)
from app.domain.services.checkout_urls import resolve_redirect_urls


logger = logging.getLogger(__name__)


class CreateTierCheckoutSessionUseCase:
    """Creates a hosted payment session for one campaign pricing tier."""

    def __init__(
        self,
        *,
        catalog_port: ProductCatalogPort,
        payment_port: PaymentProviderPort,
        base_url: str,
        expected_category: str = CATEGORY_OMNIPANEL,
    ):
        self._catalog_port = catalog_port
        self._payment_port = payment_port
        self._base_url = base_url
        self._expected_category = expected_category

    def execute(self, command: CreateTierCheckoutSessionInput) -> CheckoutSessionOutput:
        tier = command.tier if isinstance(command.tier, str) else None
        product = self._catalog_port.resolve(tier) if tier else None
        if product is None or product.category != self._expected_category:
            raise InvalidTierError("Invalid pricing tier")

        quantity = validate_quantity(command.quantity)
        ensure_purchasable(product)

        success_url, cancel_url = resolve_redirect_urls(
            base_url=self._base_url,
            category=self._expected_category,
            success_url=command.success_url,
            cancel_url=command.cancel_url,
        )
        metadata = base_metadata(product, quantity=quantity)
        metadata["tier"] = tier

        result = self._payment_port.create_checkout_session(
            PaymentSessionRequest(
                line_items=[PaymentLineItem(price=product.price_id, quantity=quantity)],
                mode=PAYMENT_MODE,
                success_url=success_url,
                cancel_url=cancel_url,
                customer_email=command.email,
                metadata=metadata,
                allow_promotion_codes=True,
                billing_address_collection=BILLING_ADDRESS_REQUIRED,
                shipping_allowed_countries=SHIPPABLE_COUNTRIES,
            )
        )
        logger.info(
            "tier_checkout: session_created tier=%s quantity=%s session_id=%s",
            tier,
            quantity,
            result.id,
        )
        return CheckoutSessionOutput(session_id=result.id, url=result.url)
