from jose import jwt, JWTError
from datetime import datetime, timedelta
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from sujaluxe.config import settings
from sujaluxe.constants.statuses import UserType
from sujaluxe.database import get_session
from sujaluxe.models.customer import Customer
from sujaluxe.models.retailer import Retailer
from sujaluxe.schemas.user_schemas import AuthUser

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/customer/login")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    expire = datetime.utcnow() + (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.access_token_expire_minutes)
    )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.algorithm
    )
    return encoded_jwt


def decode_access_token(token: str):
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
        return payload
    except JWTError:
        return None


def token_for(user: AuthUser) -> str:
    return create_access_token(
        {"sub": user.id, "email": user.email, "userType": user.user_type.value}
    )


def auth_user_for(account) -> AuthUser:
    if isinstance(account, Retailer):
        return AuthUser(
            id=account.id,
            email=account.email,
            user_type=UserType.retailer,
            business_name=account.business_name,
        )
    return AuthUser(
        id=account.id,
        email=account.email,
        user_type=UserType.customer,
        name=account.name,
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: Session = Depends(get_session)
) -> AuthUser:
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    user_type = payload.get("userType")

    if user_id is None or user_type not in (UserType.retailer.value, UserType.customer.value):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload"
        )

    model = Retailer if user_type == UserType.retailer.value else Customer
    account = session.get(model, str(user_id))

    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )

    return auth_user_for(account)
