from typing import List, Optional

from sqlmodel import Session, func, select

from sujaluxe.constants.statuses import UserType
from sujaluxe.models.notifications import Notification


def create_notification(
    *,
    session: Session,
    user_id: str,
    user_type: UserType,
    type: str,
    title: str,
    message: str,
    related_id: Optional[str] = None,
) -> Notification:
    notification = Notification(
        user_id=user_id,
        user_type=user_type,
        type=type,
        title=title,
        message=message,
        related_id=related_id,
    )
    session.add(notification)
    session.flush()
    return notification


def list_notifications(session: Session, user_id: str, user_type: UserType) -> List[Notification]:
    return session.exec(
        select(Notification)
        .where(Notification.user_id == user_id, Notification.user_type == user_type)
        .order_by(Notification.created_at.desc())
    ).all()


def mark_read(session: Session, notification_id: str) -> Optional[Notification]:
    """Idempotent: reading an already read notification is a no-op."""
    notification = session.get(Notification, notification_id)
    if not notification:
        return None

    if not notification.is_read:
        notification.is_read = True
        session.add(notification)
        session.commit()
        session.refresh(notification)

    return notification


def mark_all_read(session: Session, user_id: str, user_type: UserType) -> int:
    unread = session.exec(
        select(Notification).where(
            Notification.user_id == user_id,
            Notification.user_type == user_type,
            Notification.is_read == False,  # noqa: E712
        )
    ).all()

    for notification in unread:
        notification.is_read = True
        session.add(notification)

    session.commit()
    return len(unread)


def unread_count(session: Session, user_id: str, user_type: UserType) -> int:
    return session.exec(
        select(func.count(Notification.id)).where(
            Notification.user_id == user_id,
            Notification.user_type == user_type,
            Notification.is_read == False,  # noqa: E712
        )
    ).one()
