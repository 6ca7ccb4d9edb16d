from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlmodel import Session

from sujaluxe.constants.statuses import NegotiationStatus, UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.models.negotiation import Negotiation
from sujaluxe.notifications import ConnectionRegistry, Identity, MarketEvent, PushType, dispatch_event
from sujaluxe.schemas.negotiation_schemas import (
    MessageCreate,
    MessageRead,
    NegotiationCreate,
    NegotiationRead,
    NegotiationUpdate,
)
from sujaluxe.schemas.user_schemas import AuthUser
from sujaluxe.services import negotiation_service
from sujaluxe.utils.token import get_current_user

router = APIRouter()


@router.get("", response_model=List[NegotiationRead])
def list_negotiations(
    customer_id: Optional[str] = Query(None, alias="customerId"),
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    session: Session = Depends(get_session),
):
    return negotiation_service.list_negotiations(session, customer_id, retailer_id)


@router.post("", response_model=NegotiationRead, status_code=201)
def open_negotiation(
    data: NegotiationCreate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    negotiation = Negotiation(**data.model_dump())
    session.add(negotiation)
    session.commit()
    session.refresh(negotiation)
    negotiation_read = NegotiationRead.model_validate(negotiation)

    dispatch_event(
        event=MarketEvent.NEGOTIATION_OPENED,
        recipient=Identity.of(negotiation_read.retailer_id, UserType.retailer),
        session=session,
        registry=registry,
        background_tasks=background_tasks,
        title="New Negotiation Request",
        message="Customer interested in negotiating",
        related_id=negotiation_read.id,
    )

    return negotiation_read


@router.put("/{negotiation_id}", response_model=NegotiationRead)
def update_negotiation(
    negotiation_id: str,
    data: NegotiationUpdate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    negotiation = negotiation_service.get_negotiation(session, negotiation_id)
    status_changed = data.status is not None and data.status != negotiation.status

    if status_changed:
        negotiation.status = data.status
        session.add(negotiation)
        session.commit()
        session.refresh(negotiation)

    negotiation_read = NegotiationRead.model_validate(negotiation)

    if status_changed and data.status in (NegotiationStatus.accepted, NegotiationStatus.rejected):
        dispatch_event(
            event=MarketEvent.NEGOTIATION_DECIDED,
            recipient=Identity.of(negotiation_read.customer_id, UserType.customer),
            session=session,
            registry=registry,
            background_tasks=background_tasks,
            title=f"Negotiation {data.status.value}",
            message=f"Your negotiation was {data.status.value}",
            related_id=negotiation_read.id,
        )

    return negotiation_read


# ---------------------------------------------------------
# MESSAGES
# ---------------------------------------------------------

@router.get("/{negotiation_id}/messages", response_model=List[MessageRead])
def list_messages(negotiation_id: str, session: Session = Depends(get_session)):
    return negotiation_service.list_messages(session, negotiation_id)


@router.post("/{negotiation_id}/messages", response_model=MessageRead, status_code=201)
def post_message(
    negotiation_id: str,
    data: MessageCreate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
    current_user: AuthUser = Depends(get_current_user),
):
    message, recipient = negotiation_service.post_message(session, negotiation_id, current_user, data)
    message_read = MessageRead.model_validate(message)

    dispatch_event(
        event=MarketEvent.NEGOTIATION_MESSAGE,
        recipient=recipient,
        session=session,
        registry=registry,
        background_tasks=background_tasks,
        title="New Message",
        message="New message in negotiation",
        related_id=negotiation_id,
        push={
            "type": PushType.NEW_MESSAGE.value,
            "negotiationId": negotiation_id,
            "message": message_read.model_dump(mode="json", by_alias=True),
        },
    )

    return message_read
