from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from sujaluxe.constants.statuses import UserType
from sujaluxe.schemas.base import APIModel


class CustomerRegister(APIModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    contact_number: Optional[str] = None
    address: Optional[str] = None


class RetailerRegister(APIModel):
    business_name: str = Field(min_length=1)
    owner_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    contact_number: str
    address: str
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None


class LoginRequest(APIModel):
    email: EmailStr
    password: str


class AuthUser(APIModel):
    id: str
    email: str
    user_type: UserType
    name: Optional[str] = None
    business_name: Optional[str] = None


class AuthResponse(APIModel):
    user: AuthUser
    token: str
    message: str


class CustomerRead(APIModel):
    id: str
    name: str
    email: str
    contact_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime


class CustomerUpdate(APIModel):
    name: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None


class RetailerRead(APIModel):
    id: str
    business_name: str
    owner_name: str
    email: str
    contact_number: str
    address: str
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    logo_url: Optional[str] = None
    about: Optional[str] = None
    working_hours: Optional[str] = None
    bank_details: Optional[str] = None
    created_at: datetime


class RetailerUpdate(APIModel):
    business_name: Optional[str] = None
    owner_name: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    logo_url: Optional[str] = None
    about: Optional[str] = None
    working_hours: Optional[str] = None
    bank_details: Optional[str] = None
