from __future__ import annotations

from dataclasses import dataclass, field


CATEGORY_OMNIPANEL = "omnipanel"
CATEGORY_DIAGNOSTIC = "diagnostic"
CATEGORY_AUDIT = "audit"
CATEGORY_KIT = "kit"
CATEGORY_TRANSFORMATION = "transformation"

PRODUCT_CATEGORIES = (
    CATEGORY_OMNIPANEL,
    CATEGORY_DIAGNOSTIC,
    CATEGORY_AUDIT,
    CATEGORY_KIT,
    CATEGORY_TRANSFORMATION,
)


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    price: int
    price_id: str
    category: str
    features: tuple[str, ...] = field(default_factory=tuple)
    delivery_time: str | None = None
    badge: str | None = None

    @property
    def is_purchasable(self) -> bool:
        return bool(self.price_id)
