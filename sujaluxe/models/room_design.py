from sqlmodel import SQLModel, Field
from datetime import datetime

from sujaluxe.constants.statuses import PlacementType
from sujaluxe.models.base import new_id


class RoomDesign(SQLModel, table=True):
    __tablename__ = "room_designs"

    id: str = Field(default_factory=new_id, primary_key=True)
    customer_id: str = Field(index=True)
    product_id: str
    room_type: str   # living room, bedroom, ...
    theme: str       # elegant, cozy, ...
    style: str       # modern, traditional, ...
    placement_type: PlacementType = PlacementType.floor
    image_url: str   # provider URL or data: URI
    saved: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
