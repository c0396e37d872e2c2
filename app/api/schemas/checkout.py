from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TierCheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Non-string values resolve to no product.
    tier: Any = None
    email: str | None = None
    success_url: str | None = Field(default=None, alias="successUrl")
    cancel_url: str | None = Field(default=None, alias="cancelUrl")
    quantity: StrictInt = 1


class ProductCheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str | None = Field(default=None, alias="productId")
    quantity: StrictInt = 1
    customer_email: str | None = Field(default=None, alias="customerEmail")
    success_url: str | None = Field(default=None, alias="successUrl")
    cancel_url: str | None = Field(default=None, alias="cancelUrl")
    metadata: dict[str, str] = Field(default_factory=dict)


class CheckoutSessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    url: str
