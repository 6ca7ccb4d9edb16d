from fastapi import Depends, HTTPException

from sujaluxe.constants.statuses import UserType
from sujaluxe.schemas.user_schemas import AuthUser
from sujaluxe.utils.token import get_current_user


def require_retailer(current_user: AuthUser = Depends(get_current_user)):
    if current_user.user_type != UserType.retailer:
        raise HTTPException(status_code=403, detail="Retailer access required")
    return current_user


def ensure_self(current_user: AuthUser, user_type: UserType, user_id: str):
    """403 unless the caller is exactly (user_type, user_id)."""
    if current_user.user_type != user_type or current_user.id != user_id:
        raise HTTPException(status_code=403, detail="Unauthorized")
