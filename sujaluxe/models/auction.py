from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from sujaluxe.constants.statuses import AuctionStatus, PaymentStatus
from sujaluxe.models.base import new_id


class Auction(SQLModel, table=True):
    __tablename__ = "auctions"

    id: str = Field(default_factory=new_id, primary_key=True)
    product_id: str
    retailer_id: str = Field(index=True)
    customer_id: str = Field(index=True)

    start_price: Decimal = Field(max_digits=10, decimal_places=2)
    current_highest_bid: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    current_bidder_id: Optional[str] = None

    start_date: datetime
    end_date: datetime
    number_of_bidders: int = 0

    status: AuctionStatus = Field(default=AuctionStatus.active, index=True)
    winner_id: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.pending

    created_at: datetime = Field(default_factory=datetime.utcnow)


class Bid(SQLModel, table=True):
    __tablename__ = "bids"

    id: str = Field(default_factory=new_id, primary_key=True)
    auction_id: str = Field(index=True)
    bidder_id: str = Field(index=True)
    bid_amount: Decimal = Field(max_digits=10, decimal_places=2)
    bid_date: datetime = Field(default_factory=datetime.utcnow)
