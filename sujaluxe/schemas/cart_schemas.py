from datetime import datetime

from pydantic import Field

from sujaluxe.schemas.base import APIModel


class CartAddRequest(APIModel):
    customer_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    quantity: int = Field(default=1, gt=0)


class CartUpdateRequest(APIModel):
    quantity: int


class CartItemRead(APIModel):
    id: str
    customer_id: str
    product_id: str
    quantity: int
    created_at: datetime
