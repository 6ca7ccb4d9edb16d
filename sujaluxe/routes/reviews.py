from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlmodel import Session, select

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.auth import require_retailer
from sujaluxe.dependencies.connections import get_connection_registry
from sujaluxe.models.review import Review
from sujaluxe.notifications import ConnectionRegistry, Identity, MarketEvent, dispatch_event
from sujaluxe.schemas.review_schemas import ReviewCreate, ReviewRead, ReviewUpdate
from sujaluxe.schemas.user_schemas import AuthUser

router = APIRouter()


# ---------------------------------------------------------
# LIST REVIEWS (BY PRODUCT OR RETAILER)
# ---------------------------------------------------------

@router.get("", response_model=List[ReviewRead])
def list_reviews(
    product_id: Optional[str] = Query(None, alias="productId"),
    retailer_id: Optional[str] = Query(None, alias="retailerId"),
    session: Session = Depends(get_session),
):
    if product_id:
        query = select(Review).where(Review.product_id == product_id)
    elif retailer_id:
        query = select(Review).where(Review.retailer_id == retailer_id)
    else:
        return []

    return session.exec(query.order_by(Review.review_date.desc())).all()


# ---------------------------------------------------------
# CREATE A REVIEW
# ---------------------------------------------------------

@router.post("", response_model=ReviewRead, status_code=201)
def create_review(
    data: ReviewCreate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    registry: ConnectionRegistry = Depends(get_connection_registry),
):
    review = Review(**data.model_dump())

    session.add(review)
    session.commit()
    session.refresh(review)
    review_read = ReviewRead.model_validate(review)

    dispatch_event(
        event=MarketEvent.REVIEW_POSTED,
        recipient=Identity.of(review_read.retailer_id, UserType.retailer),
        session=session,
        registry=registry,
        background_tasks=background_tasks,
        title="New Review Received",
        message=f"{review_read.rating} star review for your product",
        related_id=review_read.id,
    )

    return review_read


# ---------------------------------------------------------
# RESPOND / MODERATE (OWNING RETAILER ONLY)
# ---------------------------------------------------------

@router.put("/{review_id}", response_model=ReviewRead)
def update_review(
    review_id: str,
    data: ReviewUpdate,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(require_retailer),
):
    if not data.response and not data.status:
        raise HTTPException(400, "Response or status required")

    review = session.get(Review, review_id)
    if not review:
        raise HTTPException(404, "Review not found")

    if review.retailer_id != current_user.id:
        raise HTTPException(403, "Unauthorized")

    if data.response:
        review.response = data.response

    if data.status:
        review.status = data.status

    session.add(review)
    session.commit()
    session.refresh(review)

    return ReviewRead.model_validate(review)
