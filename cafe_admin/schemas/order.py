# cafe_admin/schemas/order.py
import json
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional
from datetime import datetime


class CustomerIn(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def phone_as_text(cls, value):
        # Numeric phones are kept as text
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class OrderCreate(BaseModel):
    customer: Optional[CustomerIn] = None
    items: Optional[List[Any]] = None
    total: Optional[float] = None


class OrderStatusUpdate(BaseModel):
    status: Optional[str] = None
    payment_status: Optional[str] = None


class OrderResponse(BaseModel):
    id: int
    customer_name: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
    items: List[Any] = Field(default_factory=list)
    total: float
    status: str
    payment_status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("items", mode="before")
    @classmethod
    def decode_items(cls, value):
        # Stored as JSON text
        if isinstance(value, str):
            return json.loads(value) if value else []
        return value
