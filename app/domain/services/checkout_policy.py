from __future__ import annotations

from app.domain.entities.product import CATEGORY_KIT, Product
from app.domain.exceptions import CheckoutInputError


SHIPPABLE_COUNTRIES = (
    "US",
    "CA",
    "GB",
    "AU",
    "DE",
    "FR",
    "IT",
    "ES",
    "NL",
    "SE",
    "NO",
    "DK",
    "FI",
)

PAYMENT_MODE = "payment"
BILLING_ADDRESS_REQUIRED = "required"


def validate_quantity(quantity: object) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise CheckoutInputError("Quantity must be a positive integer.")
    if quantity < 1:
        raise CheckoutInputError("Quantity must be a positive integer.")
    return quantity


def ensure_purchasable(product: Product) -> None:
    if not product.is_purchasable:
        raise CheckoutInputError(f"Product '{product.id}' is not available for purchase.")


def shipping_countries_for(product: Product) -> tuple[str, ...]:
    if product.category == CATEGORY_KIT:
        return SHIPPABLE_COUNTRIES
    return ()


def base_metadata(product: Product, *, quantity: int) -> dict[str, str]:
    return {
        "productId": product.id,
        "productName": product.name,
        "category": product.category,
        "quantity": str(quantity),
    }
