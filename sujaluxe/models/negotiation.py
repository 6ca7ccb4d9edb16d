from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from sujaluxe.constants.statuses import NegotiationStatus, UserType
from sujaluxe.models.base import new_id


class Negotiation(SQLModel, table=True):
    __tablename__ = "negotiations"

    id: str = Field(default_factory=new_id, primary_key=True)
    customer_id: str = Field(index=True)
    retailer_id: str = Field(index=True)
    product_id: str
    status: NegotiationStatus = NegotiationStatus.active
    created_at: datetime = Field(default_factory=datetime.utcnow)


class NegotiationMessage(SQLModel, table=True):
    __tablename__ = "negotiation_messages"

    id: str = Field(default_factory=new_id, primary_key=True)
    negotiation_id: str = Field(index=True)
    sender_id: str
    sender_type: UserType
    message: str
    offer_price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    created_at: datetime = Field(default_factory=datetime.utcnow)
