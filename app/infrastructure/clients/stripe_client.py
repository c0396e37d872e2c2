from __future__ import annotations

import logging

import stripe

from app.application.dto.checkout import PaymentSessionRequest, PaymentSessionResult
from app.application.ports.payment_provider_port import PaymentProviderPort
from app.domain.exceptions import PaymentProviderError


logger = logging.getLogger(__name__)


class StripeClient(PaymentProviderPort):
    def __init__(self, *, secret_key: str, api_version: str | None = None):
        self._secret_key = secret_key
        if secret_key:
            stripe.api_key = secret_key
        if api_version:
            stripe.api_version = api_version

    def create_checkout_session(self, request: PaymentSessionRequest) -> PaymentSessionResult:
        if not self._secret_key:
            logger.error("stripe_client: not_configured missing=STRIPE_SECRET_KEY")
            raise PaymentProviderError("Stripe secret key is not configured.")

        payload = build_checkout_session_payload(request)

        try:
            session = stripe.checkout.Session.create(**payload)
        except stripe.StripeError as exc:
            message = getattr(exc, "user_message", None) or str(exc)
            logger.warning(
                "stripe_client: checkout_session_rejected error=%s code=%s",
                type(exc).__name__,
                getattr(exc, "code", None),
            )
            raise PaymentProviderError(
                "Stripe rejected the checkout session request.",
                provider_message=message,
            ) from exc
        except Exception as exc:  # pragma: no cover - external API
            raise PaymentProviderError("Failed to create Stripe checkout session.") from exc

        session_id = getattr(session, "id", None)
        session_url = getattr(session, "url", None)
        if not session_id or not session_url:
            raise PaymentProviderError("Stripe checkout session response is incomplete.")

        return PaymentSessionResult(id=str(session_id), url=str(session_url))


def build_checkout_session_payload(request: PaymentSessionRequest) -> dict:
    payload: dict = {
        "payment_method_types": ["card"],
        "line_items": [
            {"price": item.price, "quantity": item.quantity} for item in request.line_items
        ],
        "mode": request.mode,
        "success_url": request.success_url,
        "cancel_url": request.cancel_url,
        "metadata": dict(request.metadata),
        "billing_address_collection": request.billing_address_collection,
    }
    if request.customer_email:
        payload["customer_email"] = request.customer_email
    if request.allow_promotion_codes:
        payload["allow_promotion_codes"] = True
    if request.shipping_allowed_countries:
        payload["shipping_address_collection"] = {
            "allowed_countries": list(request.shipping_allowed_countries),
        }
    return payload
