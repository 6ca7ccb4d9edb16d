from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from sujaluxe.constants.statuses import OrderStatus, PaymentStatus
from sujaluxe.models.base import new_id


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: str = Field(default_factory=new_id, primary_key=True)
    customer_id: str = Field(index=True)

    total_amount: Decimal = Field(max_digits=10, decimal_places=2)
    payment_status: PaymentStatus = PaymentStatus.pending
    order_status: OrderStatus = OrderStatus.pending

    delivery_address: str
    shipping_partner: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    remarks: Optional[str] = None

    order_date: datetime = Field(default_factory=datetime.utcnow)
    created_at: datetime = Field(default_factory=datetime.utcnow)
