from sqlmodel import SQLModel, Field
from datetime import datetime

from sujaluxe.models.base import new_id


class CartItem(SQLModel, table=True):
    __tablename__ = "cart_items"

    id: str = Field(default_factory=new_id, primary_key=True)
    customer_id: str = Field(index=True)
    product_id: str
    quantity: int = 1
    created_at: datetime = Field(default_factory=datetime.utcnow)
