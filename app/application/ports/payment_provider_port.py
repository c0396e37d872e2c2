from __future__ import annotations

from typing import Protocol

from app.application.dto.checkout import PaymentSessionRequest, PaymentSessionResult


class PaymentProviderPort(Protocol):
    def create_checkout_session(self, request: PaymentSessionRequest) -> PaymentSessionResult:
        ...
