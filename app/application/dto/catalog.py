from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListProductsInput:
    category: str | None = None


@dataclass(frozen=True)
class GetProductInput:
    product_id: str
