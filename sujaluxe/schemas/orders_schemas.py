from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from sujaluxe.constants.statuses import OrderStatus, PaymentStatus
from sujaluxe.schemas.base import APIModel, Money


class OrderFields(APIModel):
    customer_id: str = Field(min_length=1)
    total_amount: Money
    payment_status: PaymentStatus = PaymentStatus.pending
    order_status: OrderStatus = OrderStatus.pending
    delivery_address: str = Field(min_length=1)
    shipping_partner: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    remarks: Optional[str] = None


class OrderItemFields(APIModel):
    product_id: str = Field(min_length=1)
    retailer_id: str = Field(min_length=1)
    product_name: Optional[str] = None
    quantity: int = Field(gt=0)
    price: Money
    # accepted for compatibility, recomputed server side
    subtotal: Optional[Decimal] = None


class OrderCreateRequest(APIModel):
    order: OrderFields
    items: List[OrderItemFields] = Field(min_length=1)


class OrderUpdate(APIModel):
    payment_status: Optional[PaymentStatus] = None
    order_status: Optional[OrderStatus] = None
    delivery_address: Optional[str] = None
    shipping_partner: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    remarks: Optional[str] = None


class OrderItemRead(APIModel):
    id: str
    order_id: str
    product_id: str
    product_name: str
    retailer_id: str
    quantity: int
    price: Decimal
    subtotal: Decimal
    created_at: datetime


class OrderRead(APIModel):
    id: str
    customer_id: str
    total_amount: Decimal
    payment_status: PaymentStatus
    order_status: OrderStatus
    delivery_address: str
    shipping_partner: Optional[str] = None
    estimated_delivery_date: Optional[datetime] = None
    remarks: Optional[str] = None
    order_date: datetime
    created_at: datetime


class OrderWithItems(OrderRead):
    items: List[OrderItemRead] = []


def order_with_items(order, items) -> OrderWithItems:
    return OrderWithItems(
        **OrderRead.model_validate(order).model_dump(),
        items=[OrderItemRead.model_validate(i) for i in items],
    )
