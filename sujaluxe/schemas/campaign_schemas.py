from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from sujaluxe.constants.statuses import CampaignStatus, Visibility
from sujaluxe.schemas.base import APIModel


class CampaignCreate(APIModel):
    retailer_id: str
    name: str = Field(min_length=1)
    start_date: datetime
    end_date: datetime
    discount_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, decimal_places=2)
    products_included: Optional[str] = None
    banner_image_url: Optional[str] = None
    status: CampaignStatus = CampaignStatus.draft
    visibility_level: Visibility = Visibility.public


class CampaignUpdate(APIModel):
    name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    discount_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, decimal_places=2)
    products_included: Optional[str] = None
    banner_image_url: Optional[str] = None
    status: Optional[CampaignStatus] = None
    visibility_level: Optional[Visibility] = None


class CampaignRead(APIModel):
    id: str
    retailer_id: str
    name: str
    start_date: datetime
    end_date: datetime
    discount_percentage: Optional[Decimal] = None
    products_included: Optional[str] = None
    banner_image_url: Optional[str] = None
    status: CampaignStatus
    visibility_level: Visibility
    created_at: datetime
