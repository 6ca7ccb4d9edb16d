from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, model_validator

from sujaluxe.constants.statuses import AuctionStatus, PaymentStatus
from sujaluxe.schemas.base import APIModel, Money


class AuctionCreate(APIModel):
    product_id: str = Field(min_length=1)
    retailer_id: str = Field(min_length=1)
    customer_id: str = Field(min_length=1)
    start_price: Money
    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def validate_window(self):
        if self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


class BidCreate(APIModel):
    bidder_id: str = Field(min_length=1)
    bid_amount: Money


class AuctionClose(APIModel):
    winner_id: Optional[str] = None


class BidRead(APIModel):
    id: str
    auction_id: str
    bidder_id: str
    bid_amount: Decimal
    bid_date: datetime


class AuctionRead(APIModel):
    id: str
    product_id: str
    retailer_id: str
    customer_id: str
    start_price: Decimal
    current_highest_bid: Optional[Decimal] = None
    current_bidder_id: Optional[str] = None
    start_date: datetime
    end_date: datetime
    number_of_bidders: int
    status: AuctionStatus
    winner_id: Optional[str] = None
    payment_status: PaymentStatus
    created_at: datetime


class AuctionWithBids(AuctionRead):
    bids: List[BidRead] = []
