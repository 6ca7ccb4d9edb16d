from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from sujaluxe.constants.statuses import PlacementType
from sujaluxe.models.base import new_id


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: str = Field(default_factory=new_id, primary_key=True)
    retailer_id: str = Field(index=True)
    name: str
    description: Optional[str] = None
    category: str = Field(index=True)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    stock_quantity: int = Field(default=0)
    image_url: Optional[str] = None
    specifications: Optional[str] = None  # JSON text
    placement: Optional[str] = None       # Living Room, Bedroom, ...
    placement_type: PlacementType = PlacementType.floor
    created_at: datetime = Field(default_factory=datetime.utcnow)
