from datetime import datetime
from typing import Optional

from pydantic import Field

from sujaluxe.constants.statuses import ReviewStatus
from sujaluxe.schemas.base import APIModel


class ReviewCreate(APIModel):
    customer_id: str
    customer_name: str
    retailer_id: str
    product_id: str
    product_name: str
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewUpdate(APIModel):
    response: Optional[str] = None
    status: Optional[ReviewStatus] = None


class ReviewRead(APIModel):
    id: str
    customer_id: str
    customer_name: str
    retailer_id: str
    product_id: str
    product_name: str
    rating: int
    comment: Optional[str] = None
    response: Optional[str] = None
    status: ReviewStatus
    review_date: datetime
