from __future__ import annotations

import pytest

from app.application.dto.checkout import CreateTierCheckoutSessionInput, PaymentLineItem
from app.application.use_cases.create_tier_checkout_session import (
    CreateTierCheckoutSessionUseCase,
)
from app.domain.exceptions import CheckoutInputError, InvalidTierError, PaymentProviderError
from app.domain.services.checkout_policy import SHIPPABLE_COUNTRIES

from tests.fakes import FakeCatalogPort, FakePaymentPort, make_product


BASE_URL = "https://cipher.example"


def _make_use_case(payment_port: FakePaymentPort, products=None) -> CreateTierCheckoutSessionUseCase:
    catalog = FakeCatalogPort(
        products
        if products is not None
        else [
            make_product(product_id="pro", price_id="price_123"),
            make_product(product_id="audit", category="audit", price_id="price_audit"),
            make_product(product_id="soon", price_id=""),
        ]
    )
    return CreateTierCheckoutSessionUseCase(
        catalog_port=catalog,
        payment_port=payment_port,
        base_url=BASE_URL,
    )


@pytest.mark.parametrize("tier", ["unknown", "", None, "PRO", 123])
def test_unknown_tier_is_rejected_without_calling_provider(tier):
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    with pytest.raises(InvalidTierError) as exc_info:
        use_case.execute(CreateTierCheckoutSessionInput(tier=tier))

    assert str(exc_info.value) == "Invalid pricing tier"
    assert payment_port.requests == []


def test_tier_from_other_category_is_rejected():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    with pytest.raises(InvalidTierError):
        use_case.execute(CreateTierCheckoutSessionInput(tier="audit", email="a@b.com"))

    assert payment_port.requests == []


def test_quantity_defaults_to_one():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    use_case.execute(CreateTierCheckoutSessionInput(tier="pro", email="a@b.com"))

    assert payment_port.requests[0].line_items == [PaymentLineItem(price="price_123", quantity=1)]


def test_default_redirect_urls_use_base_url():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    use_case.execute(CreateTierCheckoutSessionInput(tier="pro"))

    request = payment_port.requests[0]
    assert request.success_url == (
        "https://cipher.example/omnipanel/success?session_id={CHECKOUT_SESSION_ID}"
    )
    assert request.cancel_url == "https://cipher.example/omnipanel"


def test_caller_redirect_urls_are_forwarded_unchanged():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    use_case.execute(
        CreateTierCheckoutSessionInput(
            tier="pro",
            success_url="https://shop.example/thanks",
            cancel_url="https://shop.example/back",
        )
    )

    request = payment_port.requests[0]
    assert request.success_url == "https://shop.example/thanks"
    assert request.cancel_url == "https://shop.example/back"


def test_pro_tier_builds_full_provider_request_and_mirrors_result():
    payment_port = FakePaymentPort(session_id="cs_live_42", url="https://pay.example/cs_live_42")
    use_case = _make_use_case(payment_port)

    output = use_case.execute(
        CreateTierCheckoutSessionInput(tier="pro", email="a@b.com", quantity=2)
    )

    assert output.session_id == "cs_live_42"
    assert output.url == "https://pay.example/cs_live_42"

    request = payment_port.requests[0]
    assert request.line_items == [PaymentLineItem(price="price_123", quantity=2)]
    assert request.mode == "payment"
    assert request.customer_email == "a@b.com"
    assert request.allow_promotion_codes is True
    assert request.billing_address_collection == "required"
    assert request.shipping_allowed_countries == SHIPPABLE_COUNTRIES
    assert request.metadata == {
        "productId": "pro",
        "productName": "Pro",
        "category": "omnipanel",
        "tier": "pro",
        "quantity": "2",
    }


def test_metadata_quantity_is_text():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    use_case.execute(CreateTierCheckoutSessionInput(tier="pro", quantity=3))

    assert payment_port.requests[0].metadata["quantity"] == "3"


@pytest.mark.parametrize("quantity", [0, -1, True])
def test_non_positive_quantity_is_rejected_early(quantity):
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    with pytest.raises(CheckoutInputError):
        use_case.execute(CreateTierCheckoutSessionInput(tier="pro", quantity=quantity))

    assert payment_port.requests == []


def test_tier_without_price_reference_is_rejected():
    payment_port = FakePaymentPort()
    use_case = _make_use_case(payment_port)

    with pytest.raises(CheckoutInputError):
        use_case.execute(CreateTierCheckoutSessionInput(tier="soon"))

    assert payment_port.requests == []


def test_provider_failure_propagates_after_single_attempt():
    payment_port = FakePaymentPort(error=PaymentProviderError("boom"))
    use_case = _make_use_case(payment_port)

    with pytest.raises(PaymentProviderError):
        use_case.execute(CreateTierCheckoutSessionInput(tier="pro"))

    assert len(payment_port.requests) == 1
