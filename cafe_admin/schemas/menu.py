# cafe_admin/schemas/menu.py
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class MenuItemResponse(BaseModel):
    id: int
    name: str
    price: float
    image: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
