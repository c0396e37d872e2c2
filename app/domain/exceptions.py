from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidTierError(DomainError):
    """Tier does not resolve to a product of the expected category."""


class ProductNotFoundError(DomainError):
    """Requested product is not in the catalog."""


class CheckoutInputError(DomainError):
    """Checkout parameters are invalid."""


class PaymentProviderError(DomainError):
    """The payment provider could not create the session.

    ``provider_message`` is set when the provider itself rejected the call
    and is None for transport or unknown failures.
    """

    def __init__(self, message: str, *, provider_message: str | None = None):
        super().__init__(message)
        self.provider_message = provider_message
