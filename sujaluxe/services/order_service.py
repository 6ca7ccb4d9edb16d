import logging
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from sujaluxe.models.order import Order
from sujaluxe.models.order_item import OrderItem
from sujaluxe.models.product import Product
from sujaluxe.schemas.orders_schemas import OrderCreateRequest, OrderUpdate
from sujaluxe.services.cart_service import clear_cart
from sujaluxe.services.errors import NotFoundError

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def line_subtotal(price: Decimal, quantity: int) -> Decimal:
    return (Decimal(price) * quantity).quantize(CENT)


def place_order(session: Session, request: OrderCreateRequest) -> Tuple[Order, List[OrderItem]]:
    """
    Persist the order, its items and the cart clear as one transaction.

    Any failure rolls all three back. Notifications are not written here;
    the caller sends them once this has committed.
    """
    order = Order(**request.order.model_dump())

    try:
        session.add(order)
        session.flush()

        items = []
        for line in request.items:
            item = OrderItem(
                order_id=order.id,
                product_id=line.product_id,
                product_name=line.product_name or _catalogue_name(session, line.product_id),
                retailer_id=line.retailer_id,
                quantity=line.quantity,
                price=line.price,
                subtotal=line_subtotal(line.price, line.quantity),
            )
            session.add(item)
            items.append(item)

        cleared = clear_cart(session, order.customer_id, commit=False)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception(f"Order creation rolled back for customer {request.order.customer_id}")
        raise

    session.refresh(order)
    for item in items:
        session.refresh(item)

    logger.info(
        f"Order {order.id} placed by {order.customer_id}: "
        f"{len(items)} items, {cleared} cart rows cleared"
    )
    check_total(order, items)
    return order, items


def check_total(order: Order, items: List[OrderItem]) -> bool:
    """
    The order total is trusted from the client. A mismatch with the item
    subtotals is reported, not rejected.
    """
    computed = sum((Decimal(i.subtotal) for i in items), Decimal("0.00"))
    if computed != Decimal(order.total_amount):
        logger.warning(
            f"Order {order.id} total {order.total_amount} != item subtotals {computed}"
        )
        return False
    return True


def group_by_retailer(items: List[OrderItem]) -> Dict[str, List[OrderItem]]:
    """Items per retailer, retailers in first-seen order."""
    grouped: Dict[str, List[OrderItem]] = OrderedDict()
    for item in items:
        grouped.setdefault(item.retailer_id, []).append(item)
    return grouped


def get_order(session: Session, order_id: str) -> Order:
    order = session.get(Order, order_id)
    if not order:
        raise NotFoundError("Order not found")
    return order


def items_for(session: Session, order_ids: List[str]) -> Dict[str, List[OrderItem]]:
    grouped: Dict[str, List[OrderItem]] = {order_id: [] for order_id in order_ids}
    if not order_ids:
        return grouped

    items = session.exec(
        select(OrderItem)
        .where(OrderItem.order_id.in_(order_ids))
        .order_by(OrderItem.created_at)
    ).all()

    for item in items:
        grouped[item.order_id].append(item)
    return grouped


def list_orders(
    session: Session,
    customer_id: Optional[str] = None,
    retailer_id: Optional[str] = None,
) -> List[Tuple[Order, List[OrderItem]]]:
    query = select(Order)

    if customer_id:
        query = query.where(Order.customer_id == customer_id)
    elif retailer_id:
        retailer_orders = select(OrderItem.order_id).where(OrderItem.retailer_id == retailer_id)
        query = query.where(Order.id.in_(retailer_orders))

    orders = session.exec(query.order_by(Order.order_date.desc())).all()
    items = items_for(session, [o.id for o in orders])

    return [(order, items[order.id]) for order in orders]


def update_order(session: Session, order_id: str, data: OrderUpdate) -> Tuple[Order, bool]:
    """Apply a partial update. Returns the order and whether its status changed."""
    order = get_order(session, order_id)
    changes = data.model_dump(exclude_unset=True)

    status_changed = (
        "order_status" in changes
        and changes["order_status"] is not None
        and changes["order_status"] != order.order_status
    )

    for field, value in changes.items():
        if value is None and field in ("order_status", "payment_status", "delivery_address"):
            continue  # not nullable
        setattr(order, field, value)

    session.add(order)
    session.commit()
    session.refresh(order)

    if status_changed:
        logger.info(f"Order {order.id} status -> {order.order_status.value}")

    return order, status_changed


def _catalogue_name(session: Session, product_id: str) -> str:
    product = session.get(Product, product_id)
    return product.name if product else product_id
