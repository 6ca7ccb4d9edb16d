from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from sujaluxe.models.base import new_id


class Retailer(SQLModel, table=True):
    __tablename__ = "retailers"

    id: str = Field(default_factory=new_id, primary_key=True)
    business_name: str
    owner_name: str
    email: str = Field(index=True, unique=True)
    password: str
    contact_number: str
    address: str
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    logo_url: Optional[str] = None
    about: Optional[str] = None
    working_hours: Optional[str] = None
    bank_details: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
