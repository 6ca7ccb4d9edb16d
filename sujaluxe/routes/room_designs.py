import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from sujaluxe.database import get_session
from sujaluxe.models.product import Product
from sujaluxe.models.room_design import RoomDesign
from sujaluxe.schemas.room_design_schemas import RoomDesignRead, RoomDesignRequest
from sujaluxe.services.room_designer import ImageGenerationError, build_prompt, generate_room_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RoomDesignRead, status_code=201)
def create_room_design(data: RoomDesignRequest, session: Session = Depends(get_session)):
    if not data.product_ids:
        raise HTTPException(400, "At least one product ID is required")

    products = [session.get(Product, product_id) for product_id in data.product_ids]
    product_names = [p.name for p in products if p]

    prompt = build_prompt(data.room_type, data.style, data.theme, product_names)

    try:
        image_url = generate_room_image(prompt)
    except ImageGenerationError as exc:
        if exc.configuration:
            raise HTTPException(502, "AI service configuration error. Please contact support.")
        raise HTTPException(502, "Failed to generate AI design. Please try again.")

    # one row per product, all sharing the generated image
    designs = []
    for product_id, product in zip(data.product_ids, products):
        design = RoomDesign(
            customer_id=data.customer_id,
            product_id=product_id,
            room_type=data.room_type,
            theme=data.theme,
            style=data.style,
            image_url=image_url,
        )
        if product:
            design.placement_type = product.placement_type
        session.add(design)
        designs.append(design)

    session.commit()
    session.refresh(designs[0])

    logger.info(f"Room design generated for {data.customer_id} with {len(designs)} products")
    return RoomDesignRead.model_validate(designs[0])


@router.get("", response_model=List[RoomDesignRead])
def list_room_designs(
    customer_id: str = Query(None, alias="customerId"),
    session: Session = Depends(get_session),
):
    if not customer_id:
        raise HTTPException(400, "customerId required")

    return session.exec(
        select(RoomDesign)
        .where(RoomDesign.customer_id == customer_id)
        .order_by(RoomDesign.created_at.desc())
    ).all()


@router.put("/{design_id}/save", response_model=RoomDesignRead)
def save_room_design(design_id: str, session: Session = Depends(get_session)):
    design = session.get(RoomDesign, design_id)
    if not design:
        raise HTTPException(404, "Room design not found")

    design.saved = True
    session.add(design)
    session.commit()
    session.refresh(design)

    return RoomDesignRead.model_validate(design)
