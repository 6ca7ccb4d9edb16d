from sqlmodel import SQLModel, Field
from datetime import datetime
from decimal import Decimal

from sujaluxe.models.base import new_id


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: str = Field(default_factory=new_id, primary_key=True)
    order_id: str = Field(index=True)
    product_id: str = Field(index=True)
    retailer_id: str = Field(index=True)

    product_name: str
    quantity: int
    price: Decimal = Field(max_digits=10, decimal_places=2)
    subtotal: Decimal = Field(max_digits=10, decimal_places=2)

    created_at: datetime = Field(default_factory=datetime.utcnow)
