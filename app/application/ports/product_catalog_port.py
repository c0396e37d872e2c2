from __future__ import annotations

from typing import Protocol

from app.domain.entities.product import Product


class ProductCatalogPort(Protocol):
    def resolve(self, product_id: str) -> Product | None:
        ...

    def list_products(self, *, category: str | None = None) -> list[Product]:
        ...
