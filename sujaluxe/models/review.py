from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from sujaluxe.constants.statuses import ReviewStatus
from sujaluxe.models.base import new_id


class Review(SQLModel, table=True):
    __tablename__ = "reviews"

    id: str = Field(default_factory=new_id, primary_key=True)
    customer_id: str
    customer_name: str
    retailer_id: str = Field(index=True)
    product_id: str = Field(index=True)
    product_name: str
    rating: int  # 1-5
    comment: Optional[str] = None
    response: Optional[str] = None
    status: ReviewStatus = ReviewStatus.pending
    review_date: datetime = Field(default_factory=datetime.utcnow)
