from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from sujaluxe.constants.statuses import CampaignStatus, Visibility
from sujaluxe.models.base import new_id


class Campaign(SQLModel, table=True):
    __tablename__ = "campaigns"

    id: str = Field(default_factory=new_id, primary_key=True)
    retailer_id: str = Field(index=True)
    name: str
    start_date: datetime
    end_date: datetime
    discount_percentage: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    products_included: Optional[str] = None  # JSON array of product ids
    banner_image_url: Optional[str] = None
    status: CampaignStatus = CampaignStatus.draft
    visibility_level: Visibility = Visibility.public
    created_at: datetime = Field(default_factory=datetime.utcnow)
