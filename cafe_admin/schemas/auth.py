# cafe_admin/schemas/auth.py
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
