import logging
from typing import List, Optional

from sqlmodel import Session, select

from sujaluxe.constants.statuses import NegotiationStatus, UserType
from sujaluxe.models.negotiation import Negotiation, NegotiationMessage
from sujaluxe.notifications.connections import Identity
from sujaluxe.schemas.negotiation_schemas import MessageCreate
from sujaluxe.schemas.user_schemas import AuthUser
from sujaluxe.services.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def get_negotiation(session: Session, negotiation_id: str) -> Negotiation:
    negotiation = session.get(Negotiation, negotiation_id)
    if not negotiation:
        raise NotFoundError("Negotiation not found")
    return negotiation


def list_negotiations(
    session: Session,
    customer_id: Optional[str] = None,
    retailer_id: Optional[str] = None,
) -> List[Negotiation]:
    if customer_id:
        query = select(Negotiation).where(Negotiation.customer_id == customer_id)
    elif retailer_id:
        query = select(Negotiation).where(Negotiation.retailer_id == retailer_id)
    else:
        return []

    return session.exec(query.order_by(Negotiation.created_at.desc())).all()


def list_messages(session: Session, negotiation_id: str) -> List[NegotiationMessage]:
    return session.exec(
        select(NegotiationMessage)
        .where(NegotiationMessage.negotiation_id == negotiation_id)
        .order_by(NegotiationMessage.created_at)
    ).all()


def counterparty(negotiation: Negotiation, sender: AuthUser) -> Identity:
    """
    The other side of the thread. The sender must be the negotiation's
    customer or its retailer.
    """
    if sender.user_type == UserType.customer and sender.id == negotiation.customer_id:
        return Identity.of(negotiation.retailer_id, UserType.retailer)
    if sender.user_type == UserType.retailer and sender.id == negotiation.retailer_id:
        return Identity.of(negotiation.customer_id, UserType.customer)
    raise ForbiddenError("You are not a party to this negotiation")


def post_message(
    session: Session,
    negotiation_id: str,
    sender: AuthUser,
    data: MessageCreate,
) -> tuple:
    """
    Append a message sent by the authenticated caller. An offer moves the
    negotiation to ``pending``. Returns ``(message, recipient)``.
    """
    negotiation = get_negotiation(session, negotiation_id)
    recipient = counterparty(negotiation, sender)

    message = NegotiationMessage(
        negotiation_id=negotiation.id,
        sender_id=sender.id,
        sender_type=sender.user_type,
        message=data.message,
        offer_price=data.offer_price,
    )
    session.add(message)

    if data.offer_price is not None:
        negotiation.status = NegotiationStatus.pending
        session.add(negotiation)

    session.commit()
    session.refresh(message)

    logger.info(f"Message {message.id} in negotiation {negotiation.id} from {sender.user_type.value}")
    return message, recipient
