from __future__ import annotations

from app.application.dto.catalog import GetProductInput
from app.application.ports.product_catalog_port import ProductCatalogPort
from app.domain.entities.product import Product
from app.domain.exceptions import ProductNotFoundError


class GetProductUseCase:
    def __init__(self, *, catalog_port: ProductCatalogPort):
        self._catalog_port = catalog_port

    def execute(self, command: GetProductInput) -> Product:
        product = self._catalog_port.resolve(command.product_id)
        if product is None:
            raise ProductNotFoundError("Product not found")
        return product
