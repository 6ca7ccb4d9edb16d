from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.auth import ensure_self
from sujaluxe.models.retailer import Retailer
from sujaluxe.schemas.user_schemas import AuthUser, RetailerRead, RetailerUpdate
from sujaluxe.utils.token import get_current_user

router = APIRouter()


@router.get("/{retailer_id}", response_model=RetailerRead)
def get_retailer(
    retailer_id: str,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(get_current_user),
):
    ensure_self(current_user, UserType.retailer, retailer_id)

    retailer = session.get(Retailer, retailer_id)
    if not retailer:
        raise HTTPException(404, "Retailer not found")
    return RetailerRead.model_validate(retailer)


@router.put("/{retailer_id}", response_model=RetailerRead)
def update_retailer(
    retailer_id: str,
    data: RetailerUpdate,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(get_current_user),
):
    ensure_self(current_user, UserType.retailer, retailer_id)

    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(400, "No fields to update")

    retailer = session.get(Retailer, retailer_id)
    if not retailer:
        raise HTTPException(404, "Retailer not found")

    for field, value in changes.items():
        setattr(retailer, field, value)

    session.add(retailer)
    session.commit()
    session.refresh(retailer)

    return RetailerRead.model_validate(retailer)
