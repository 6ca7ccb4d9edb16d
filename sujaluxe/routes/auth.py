import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from sujaluxe.database import get_session
from sujaluxe.models.customer import Customer
from sujaluxe.models.retailer import Retailer
from sujaluxe.schemas.user_schemas import (
    AuthResponse,
    AuthUser,
    CustomerRead,
    CustomerRegister,
    LoginRequest,
    RetailerRead,
    RetailerRegister,
)
from sujaluxe.utils.hash import hash_password, verify_password
from sujaluxe.utils.token import auth_user_for, get_current_user, token_for

logger = logging.getLogger(__name__)

router = APIRouter()


def _email_taken(session: Session, model, email: str) -> bool:
    return session.exec(select(model).where(model.email == email)).first() is not None


# -------- REGISTRATION --------

@router.post("/customer/register", status_code=201)
def register_customer(payload: CustomerRegister, session: Session = Depends(get_session)):
    if _email_taken(session, Customer, payload.email):
        raise HTTPException(409, "Email already registered")

    customer = Customer(
        **payload.model_dump(exclude={"password"}),
        password=hash_password(payload.password),
    )

    session.add(customer)
    session.commit()
    session.refresh(customer)

    user = auth_user_for(customer)
    logger.info(f"Customer registered: {customer.id}")

    return {
        "user": user.model_dump(mode="json", by_alias=True),
        "token": token_for(user),
        "customer": CustomerRead.model_validate(customer).model_dump(mode="json", by_alias=True),
        "message": "Registration successful",
    }


@router.post("/retailer/register", status_code=201)
def register_retailer(payload: RetailerRegister, session: Session = Depends(get_session)):
    if _email_taken(session, Retailer, payload.email):
        raise HTTPException(409, "Email already registered")

    retailer = Retailer(
        **payload.model_dump(exclude={"password"}),
        password=hash_password(payload.password),
    )

    session.add(retailer)
    session.commit()
    session.refresh(retailer)

    user = auth_user_for(retailer)
    logger.info(f"Retailer registered: {retailer.id}")

    return {
        "user": user.model_dump(mode="json", by_alias=True),
        "token": token_for(user),
        "retailer": RetailerRead.model_validate(retailer).model_dump(mode="json", by_alias=True),
        "message": "Registration successful",
    }


# -------- LOGIN --------

def _login(session: Session, model, payload: LoginRequest) -> AuthResponse:
    account = session.exec(select(model).where(model.email == payload.email)).first()

    if not account or not verify_password(payload.password, account.password):
        raise HTTPException(401, "Invalid email or password")

    user = auth_user_for(account)
    return AuthResponse(user=user, token=token_for(user), message="Login successful")


@router.post("/customer/login", response_model=AuthResponse)
def login_customer(payload: LoginRequest, session: Session = Depends(get_session)):
    return _login(session, Customer, payload)


@router.post("/retailer/login", response_model=AuthResponse)
def login_retailer(payload: LoginRequest, session: Session = Depends(get_session)):
    return _login(session, Retailer, payload)


@router.get("/me", response_model=AuthUser)
def me(current_user: AuthUser = Depends(get_current_user)):
    return current_user


@router.post("/logout")
def logout():
    # tokens are stateless, the client drops its copy
    return {"message": "Logout successful"}
