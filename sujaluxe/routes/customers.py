from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.dependencies.auth import ensure_self
from sujaluxe.models.customer import Customer
from sujaluxe.schemas.user_schemas import AuthUser, CustomerRead, CustomerUpdate
from sujaluxe.utils.token import get_current_user

router = APIRouter()


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: str,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(get_current_user),
):
    ensure_self(current_user, UserType.customer, customer_id)

    customer = session.get(Customer, customer_id)
    if not customer:
        raise HTTPException(404, "Customer not found")
    return CustomerRead.model_validate(customer)


@router.put("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    session: Session = Depends(get_session),
    current_user: AuthUser = Depends(get_current_user),
):
    ensure_self(current_user, UserType.customer, customer_id)

    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(400, "No fields to update")

    customer = session.get(Customer, customer_id)
    if not customer:
        raise HTTPException(404, "Customer not found")

    for field, value in changes.items():
        setattr(customer, field, value)

    session.add(customer)
    session.commit()
    session.refresh(customer)

    return CustomerRead.model_validate(customer)
