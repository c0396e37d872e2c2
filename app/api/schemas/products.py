from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: int
    category: str
    features: list[str]
    delivery_time: str | None = Field(default=None, alias="deliveryTime")
    badge: str | None = None
