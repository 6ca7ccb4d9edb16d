from typing import List, Optional

from sqlmodel import Session, select

from sujaluxe.models.cart import CartItem


def list_cart(session: Session, customer_id: str) -> List[CartItem]:
    return session.exec(
        select(CartItem)
        .where(CartItem.customer_id == customer_id)
        .order_by(CartItem.created_at)
    ).all()


def add_to_cart(session: Session, customer_id: str, product_id: str, quantity: int) -> CartItem:
    # Check if the customer already has this product
    existing_item = session.exec(
        select(CartItem).where(
            CartItem.customer_id == customer_id,
            CartItem.product_id == product_id,
        )
    ).first()

    if existing_item:
        existing_item.quantity += quantity
        session.add(existing_item)
        session.commit()
        session.refresh(existing_item)
        return existing_item

    new_item = CartItem(customer_id=customer_id, product_id=product_id, quantity=quantity)
    session.add(new_item)
    session.commit()
    session.refresh(new_item)
    return new_item


def set_quantity(session: Session, item: CartItem, quantity: int) -> Optional[CartItem]:
    """Returns None when the quantity removed the row."""
    if quantity <= 0:
        session.delete(item)
        session.commit()
        return None

    item.quantity = quantity
    session.add(item)
    session.commit()
    session.refresh(item)
    return item


def clear_cart(session: Session, customer_id: str, commit: bool = True) -> int:
    items = session.exec(
        select(CartItem).where(CartItem.customer_id == customer_id)
    ).all()

    for item in items:
        session.delete(item)

    if commit:
        session.commit()
    return len(items)
