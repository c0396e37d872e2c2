from __future__ import annotations

from app.application.dto.catalog import ListProductsInput
from app.application.ports.product_catalog_port import ProductCatalogPort
from app.domain.entities.product import Product


class ListProductsUseCase:
    def __init__(self, *, catalog_port: ProductCatalogPort):
        self._catalog_port = catalog_port

    def execute(self, command: ListProductsInput) -> list[Product]:
        return self._catalog_port.list_products(category=command.category)
