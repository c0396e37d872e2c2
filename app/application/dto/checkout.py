from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CreateTierCheckoutSessionInput:
    tier: object
    email: str | None = None
    success_url: str | None = None
    cancel_url: str | None = None
    quantity: int = 1


@dataclass(frozen=True)
class CreateProductCheckoutSessionInput:
    product_id: str | None
    quantity: int = 1
    customer_email: str | None = None
    success_url: str | None = None
    cancel_url: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CheckoutSessionOutput:
    session_id: str
    url: str


@dataclass(frozen=True)
class PaymentLineItem:
    price: str
    quantity: int


@dataclass(frozen=True)
class PaymentSessionRequest:
    line_items: list[PaymentLineItem]
    mode: str
    success_url: str
    cancel_url: str
    customer_email: str | None
    metadata: dict[str, str]
    allow_promotion_codes: bool
    billing_address_collection: str
    shipping_allowed_countries: tuple[str, ...] = ()


@dataclass(frozen=True)
class PaymentSessionResult:
    id: str
    url: str
