from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.schemas.notification_schemas import MarkAllRead, NotificationRead, UnreadCount
from sujaluxe.services import notification_service

router = APIRouter()


def recipient_params(
    user_id: str = Query(None, alias="userId"),
    user_type: str = Query(None, alias="userType"),
):
    if not user_id or not user_type:
        raise HTTPException(400, "userId and userType required")
    try:
        return user_id, UserType(user_type)
    except ValueError:
        raise HTTPException(400, "userType must be 'retailer' or 'customer'")


@router.get("", response_model=List[NotificationRead])
def list_notifications(
    recipient: tuple = Depends(recipient_params),
    session: Session = Depends(get_session),
):
    return notification_service.list_notifications(session, *recipient)


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    recipient: tuple = Depends(recipient_params),
    session: Session = Depends(get_session),
):
    return UnreadCount(unread=notification_service.unread_count(session, *recipient))


@router.put("/read-all", response_model=MarkAllRead)
def mark_all_read(
    recipient: tuple = Depends(recipient_params),
    session: Session = Depends(get_session),
):
    return MarkAllRead(updated=notification_service.mark_all_read(session, *recipient))


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_read(notification_id: str, session: Session = Depends(get_session)):
    notification = notification_service.mark_read(session, notification_id)

    if not notification:
        raise HTTPException(404, "Notification not found")

    return NotificationRead.model_validate(notification)
