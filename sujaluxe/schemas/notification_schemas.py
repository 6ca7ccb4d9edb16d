from datetime import datetime
from typing import Optional

from sujaluxe.constants.statuses import UserType
from sujaluxe.schemas.base import APIModel


class NotificationRead(APIModel):
    id: str
    user_id: str
    user_type: UserType
    type: str
    title: str
    message: str
    is_read: bool
    related_id: Optional[str] = None
    created_at: datetime


class UnreadCount(APIModel):
    unread: int


class MarkAllRead(APIModel):
    updated: int
