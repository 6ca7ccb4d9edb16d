from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from sujaluxe.database import get_session
from sujaluxe.models.cart import CartItem
from sujaluxe.schemas.cart_schemas import CartAddRequest, CartItemRead, CartUpdateRequest
from sujaluxe.services import cart_service

router = APIRouter()


# View Cart

@router.get("", response_model=List[CartItemRead])
def get_cart(
    customer_id: str = Query(None, alias="customerId"),
    session: Session = Depends(get_session),
):
    if not customer_id:
        raise HTTPException(400, "customerId required")

    return cart_service.list_cart(session, customer_id)


# Add to Cart

@router.post("", response_model=CartItemRead, status_code=201)
def add_to_cart(data: CartAddRequest, session: Session = Depends(get_session)):
    item = cart_service.add_to_cart(session, data.customer_id, data.product_id, data.quantity)
    return CartItemRead.model_validate(item)


# Update Cart

@router.put("/{item_id}")
def update_cart_item(
    item_id: str,
    data: CartUpdateRequest,
    session: Session = Depends(get_session),
):
    item = session.get(CartItem, item_id)
    if not item:
        raise HTTPException(404, "Cart item not found")

    item = cart_service.set_quantity(session, item, data.quantity)
    if item is None:
        return {"success": True, "removed": True}

    return CartItemRead.model_validate(item).model_dump(mode="json", by_alias=True)


# Remove Cart

@router.delete("/{item_id}")
def remove_item(item_id: str, session: Session = Depends(get_session)):
    item = session.get(CartItem, item_id)
    if not item:
        raise HTTPException(404, "Cart item not found")

    session.delete(item)
    session.commit()

    return {"success": True}


# Clear Cart

@router.delete("")
def clear_cart_endpoint(
    customer_id: str = Query(None, alias="customerId"),
    session: Session = Depends(get_session),
):
    if not customer_id:
        raise HTTPException(400, "customerId required")

    removed = cart_service.clear_cart(session, customer_id)
    return {"success": True, "removed": removed}
