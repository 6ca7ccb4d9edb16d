from datetime import datetime
from typing import Optional

from pydantic import Field

from sujaluxe.constants.statuses import PlacementType
from sujaluxe.schemas.base import APIModel, Money


class ProductCreate(APIModel):
    retailer_id: str
    name: str = Field(min_length=1)
    description: Optional[str] = None
    category: str
    price: Money
    stock_quantity: int = Field(default=0, ge=0)
    image_url: Optional[str] = None
    specifications: Optional[str] = None
    placement: Optional[str] = None
    placement_type: PlacementType = PlacementType.floor


class ProductUpdate(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Money] = None
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    specifications: Optional[str] = None
    placement: Optional[str] = None
    placement_type: Optional[PlacementType] = None


class ProductRead(APIModel):
    id: str
    retailer_id: str
    name: str
    description: Optional[str] = None
    category: str
    price: Money
    stock_quantity: int
    image_url: Optional[str] = None
    specifications: Optional[str] = None
    placement: Optional[str] = None
    placement_type: PlacementType
    created_at: datetime
