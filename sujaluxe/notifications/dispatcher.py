import logging
from typing import Optional

from fastapi import BackgroundTasks
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from sujaluxe.notifications.channels import Channel
from sujaluxe.notifications.connections import ConnectionRegistry, Identity
from sujaluxe.notifications.events import MarketEvent, PushType
from sujaluxe.notifications.rules import NOTIFICATION_RULES, NOTIFICATION_TYPES
from sujaluxe.schemas.notification_schemas import NotificationRead
from sujaluxe.services.notification_service import create_notification

logger = logging.getLogger(__name__)


def dispatch_event(
    *,
    event: MarketEvent,
    recipient: Identity,
    session: Session,
    registry: ConnectionRegistry,
    background_tasks: BackgroundTasks,
    title: str,
    message: str,
    related_id: Optional[str] = None,
    push: Optional[dict] = None,
):
    """
    Central notification dispatcher.

    Handles:
    - the durable notification row
    - the event specific live push (``push``)
    - the generic live "notification" push

    Runs after the business write has been committed. A failed
    notification write is logged and rolled back, it never fails the
    request. Pushes are scheduled to run once the response is sent.
    """

    rules = NOTIFICATION_RULES.get(event, {})
    notification = None

    # -------------------------
    # IN-APP NOTIFICATION
    # -------------------------
    if rules.get(Channel.IN_APP):
        try:
            notification = create_notification(
                session=session,
                user_id=recipient.user_id,
                user_type=recipient.user_type,
                type=NOTIFICATION_TYPES[event].value,
                title=title,
                message=message,
                related_id=related_id,
            )
            session.commit()
            session.refresh(notification)
        except SQLAlchemyError:
            logger.exception(f"Notification write failed for {event.value} -> {recipient}")
            session.rollback()
            notification = None

    # -------------------------
    # LIVE EVENT
    # -------------------------
    if rules.get(Channel.LIVE_EVENT) and push is not None:
        background_tasks.add_task(registry.send_to, recipient, push)

    # -------------------------
    # LIVE BADGE
    # -------------------------
    if rules.get(Channel.LIVE_BADGE) and notification is not None:
        background_tasks.add_task(
            registry.send_to,
            recipient,
            {
                "type": PushType.NOTIFICATION.value,
                "notification": NotificationRead.model_validate(notification).model_dump(
                    mode="json", by_alias=True
                ),
            },
        )

    return notification
