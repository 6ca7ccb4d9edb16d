from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.notifications import ConnectionRegistry, Identity, MarketEvent, PushType, dispatch_event
from sujaluxe.schemas.orders_schemas import (
    OrderCreateRequest,
    OrderRead,
    OrderUpdate,
    OrderWithItems,
    order_with_items,
)
from sujaluxe.services import order_service


router = APIRouter()


# ---------------------------------------------------------
# LIST ORDERS (WITH ITEMS)
# ---------------------------------------------------------

@router.get("", response_model=List[OrderWithItems])
def list_orders(
    customer_id: Optional[str] = Query(None, alias="customerId"),
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    session: Session = Depends(get_session),
):
    rows = order_service.list_orders(session, customer_id=customer_id, retailer_id=retailer_id)
    return [order_with_items(order, items) for order, items in rows]


@router.get("/{order_id}", response_model=OrderWithItems)
def get_order(order_id: str, session: Session = Depends(get_session)):
    order = order_service.get_order(session, order_id)
    items = order_service.items_for(session, [order.id])[order.id]
    return order_with_items(order, items)


# ---------------------------------------------------------
# CHECKOUT
# ---------------------------------------------------------

@router.post("", response_model=OrderWithItems, status_code=201)
def create_order(
    data: OrderCreateRequest,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    try:
        order, items = order_service.place_order(session, data)
    except SQLAlchemyError:
        raise HTTPException(500, "Failed to create order")

    # one notification and one push per retailer in the order
    for retailer_id, retailer_items in order_service.group_by_retailer(items).items():
        names = ", ".join(i.product_name for i in retailer_items)
        dispatch_event(
            event=MarketEvent.ORDER_PLACED,
            recipient=Identity.of(retailer_id, UserType.retailer),
            session=session,
            registry=registry,
            background_tasks=background_tasks,
            title="New Order Received",
            message=f"New order for {names}",
            related_id=order.id,
            push={
                "type": PushType.NEW_ORDER.value,
                "order": order_with_items(order, retailer_items).model_dump(mode="json", by_alias=True),
            },
        )

    return order_with_items(order, items)


# ---------------------------------------------------------
# UPDATE ORDER (STATUS, SHIPPING)
# ---------------------------------------------------------

@router.put("/{order_id}", response_model=OrderRead)
def update_order(
    order_id: str,
    data: OrderUpdate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    order, status_changed = order_service.update_order(session, order_id, data)

    if status_changed:
        dispatch_event(
            event=MarketEvent.ORDER_STATUS_CHANGED,
            recipient=Identity.of(order.customer_id, UserType.customer),
            session=session,
            registry=registry,
            background_tasks=background_tasks,
            title="Order Status Updated",
            message=f"Your order status is now: {order.order_status.value}",
            related_id=order.id,
            push={
                "type": PushType.ORDER_UPDATE.value,
                "order": OrderRead.model_validate(order).model_dump(mode="json", by_alias=True),
            },
        )

    return OrderRead.model_validate(order)
