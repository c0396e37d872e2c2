from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_get_product_use_case, get_list_products_use_case
from app.api.errors import ApiError
from app.api.schemas.products import ProductResponse
from app.application.dto.catalog import GetProductInput, ListProductsInput
from app.application.use_cases.get_product import GetProductUseCase
from app.application.use_cases.list_products import ListProductsUseCase
from app.domain.entities.product import Product
from app.domain.exceptions import ProductNotFoundError


router = APIRouter()


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        features=list(product.features),
        delivery_time=product.delivery_time,
        badge=product.badge,
    )


@router.get("/api/products", response_model=list[ProductResponse])
def list_products(
    category: str | None = None,
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
):
    rows = use_case.execute(ListProductsInput(category=category))
    return [_to_response(row) for row in rows]


@router.get("/api/products/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
):
    try:
        row = use_case.execute(GetProductInput(product_id=product_id))
    except ProductNotFoundError as exc:
        raise ApiError(404, str(exc)) from exc
    return _to_response(row)
