from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from sujaluxe.constants.statuses import UserType
from sujaluxe.models.base import new_id


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: str = Field(default_factory=new_id, primary_key=True)

    user_id: str = Field(index=True)
    user_type: UserType

    type: str  # order / auction / review / negotiation / low_stock
    title: str
    message: str

    is_read: bool = False
    related_id: Optional[str] = None  # order_id, auction_id, ...

    created_at: datetime = Field(default_factory=datetime.utcnow)
