from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from sujaluxe.constants.statuses import NegotiationStatus, UserType
from sujaluxe.schemas.base import APIModel, Money


class NegotiationCreate(APIModel):
    customer_id: str = Field(min_length=1)
    retailer_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)


class NegotiationUpdate(APIModel):
    status: Optional[NegotiationStatus] = None


class NegotiationRead(APIModel):
    id: str
    customer_id: str
    retailer_id: str
    product_id: str
    status: NegotiationStatus
    created_at: datetime


class MessageCreate(APIModel):
    """Sender identity comes from the bearer token, not from this body."""

    message: str = Field(min_length=1)
    offer_price: Optional[Money] = None


class MessageRead(APIModel):
    id: str
    negotiation_id: str
    sender_id: str
    sender_type: UserType
    message: str
    offer_price: Optional[Decimal] = None
    created_at: datetime
