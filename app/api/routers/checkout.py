from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_create_product_checkout_session_use_case,
    get_create_tier_checkout_session_use_case,
)
from app.api.errors import ApiError
from app.api.schemas.checkout import (
    CheckoutSessionResponse,
    ProductCheckoutRequest,
    TierCheckoutRequest,
)
from app.application.dto.checkout import (
    CreateProductCheckoutSessionInput,
    CreateTierCheckoutSessionInput,
)
from app.application.use_cases.create_product_checkout_session import (
    CreateProductCheckoutSessionUseCase,
)
from app.application.use_cases.create_tier_checkout_session import (
    CreateTierCheckoutSessionUseCase,
)
from app.domain.exceptions import (
    CheckoutInputError,
    InvalidTierError,
    PaymentProviderError,
    ProductNotFoundError,
)


logger = logging.getLogger(__name__)

router = APIRouter()

TIER_CHECKOUT_FAILED = "Failed to create checkout session"
INTERNAL_SERVER_ERROR = "Internal server error"


@router.post("/api/stripe/checkout", response_model=CheckoutSessionResponse)
def create_tier_checkout_session(
    req: TierCheckoutRequest,
    use_case: CreateTierCheckoutSessionUseCase = Depends(get_create_tier_checkout_session_use_case),
):
    try:
        output = use_case.execute(
            CreateTierCheckoutSessionInput(
                tier=req.tier,
                email=req.email,
                success_url=req.success_url,
                cancel_url=req.cancel_url,
                quantity=req.quantity,
            )
        )
    except (InvalidTierError, CheckoutInputError) as exc:
        logger.warning("checkout_router: tier_checkout_rejected tier=%s reason=%s", req.tier, exc)
        raise ApiError(400, str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("checkout_router: tier_checkout_failed tier=%s", req.tier)
        raise ApiError(500, TIER_CHECKOUT_FAILED) from exc

    return CheckoutSessionResponse(session_id=output.session_id, url=output.url)


@router.post("/api/checkout", response_model=CheckoutSessionResponse)
def create_product_checkout_session(
    req: ProductCheckoutRequest,
    use_case: CreateProductCheckoutSessionUseCase = Depends(
        get_create_product_checkout_session_use_case
    ),
):
    try:
        output = use_case.execute(
            CreateProductCheckoutSessionInput(
                product_id=req.product_id,
                quantity=req.quantity,
                customer_email=req.customer_email,
                success_url=req.success_url,
                cancel_url=req.cancel_url,
                metadata=req.metadata,
            )
        )
    except CheckoutInputError as exc:
        logger.warning(
            "checkout_router: product_checkout_rejected product_id=%s reason=%s",
            req.product_id,
            exc,
        )
        raise ApiError(400, str(exc)) from exc
    except ProductNotFoundError as exc:
        logger.warning("checkout_router: product_not_found product_id=%s", req.product_id)
        raise ApiError(404, str(exc)) from exc
    except PaymentProviderError as exc:
        logger.exception("checkout_router: product_checkout_failed product_id=%s", req.product_id)
        if exc.provider_message:
            raise ApiError(400, exc.provider_message) from exc
        raise ApiError(500, INTERNAL_SERVER_ERROR) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("checkout_router: product_checkout_failed product_id=%s", req.product_id)
        raise ApiError(500, INTERNAL_SERVER_ERROR) from exc

    return CheckoutSessionResponse(session_id=output.session_id, url=output.url)
