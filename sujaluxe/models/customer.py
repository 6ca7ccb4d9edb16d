from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from sujaluxe.models.base import new_id


class Customer(SQLModel, table=True):
    __tablename__ = "customers"

    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password: str
    contact_number: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
