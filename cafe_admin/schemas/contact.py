# cafe_admin/schemas/contact.py
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class ContactCreate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    email: str
    subject: Optional[str] = None
    message: str
    is_read: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
