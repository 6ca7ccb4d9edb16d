from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlmodel import Session, or_, select

from sujaluxe.config import settings
from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.models.product import Product
from sujaluxe.notifications import ConnectionRegistry, Identity, MarketEvent, dispatch_event
from sujaluxe.schemas.product_schemas import ProductCreate, ProductRead, ProductUpdate

router = APIRouter()


@router.get("", response_model=List[ProductRead])
def list_products(
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    category: Optional[str] = None,
    search: Optional[str] = None,
    session: Session = Depends(get_session),
):
    query = select(Product)

    if retailer_id:
        query = query.where(Product.retailer_id == retailer_id)
    elif category:
        query = query.where(Product.category == category)
    elif search:
        pattern = f"%{search}%"
        query = query.where(
            or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
        )

    return session.exec(query.order_by(Product.created_at.desc())).all()


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: str, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(404, "Product not found")
    return ProductRead.model_validate(product)


@router.post("", response_model=ProductRead, status_code=201)
def create_product(data: ProductCreate, session: Session = Depends(get_session)):
    product = Product(**data.model_dump())

    session.add(product)
    session.commit()
    session.refresh(product)

    return ProductRead.model_validate(product)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: str,
    data: ProductUpdate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(404, "Product not found")

    previous_stock = product.stock_quantity

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(product, field, value)

    session.add(product)
    session.commit()
    session.refresh(product)
    product_read = ProductRead.model_validate(product)

    threshold = settings.low_stock_threshold
    if previous_stock >= threshold > product_read.stock_quantity:
        dispatch_event(
            event=MarketEvent.LOW_STOCK,
            recipient=Identity.of(product_read.retailer_id, UserType.retailer),
            session=session,
            registry=registry,
            background_tasks=background_tasks,
            title="Low Stock",
            message=f"{product_read.name} has only {product_read.stock_quantity} left in stock",
            related_id=product_read.id,
        )

    return product_read


@router.delete("/{product_id}")
def delete_product(product_id: str, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(404, "Product not found")

    session.delete(product)
    session.commit()

    return {"success": True}
