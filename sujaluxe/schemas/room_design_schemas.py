from datetime import datetime
from typing import List, Optional

from pydantic import Field

from sujaluxe.constants.statuses import PlacementType
from sujaluxe.schemas.base import APIModel


class RoomDesignRequest(APIModel):
    customer_id: str = Field(min_length=1)
    product_ids: Optional[List[str]] = None
    room_type: str = "living room"
    theme: str = "elegant"
    style: str = "modern"


class RoomDesignRead(APIModel):
    id: str
    customer_id: str
    product_id: str
    room_type: str
    theme: str
    style: str
    placement_type: PlacementType
    image_url: str
    saved: bool
    created_at: datetime
