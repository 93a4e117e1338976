"""
Menu item model
"""
from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func
from cafe_admin.core.database import Base


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    price = Column(Float, nullable=False)

    # Public URL of the uploaded image (/uploads/menu/...)
    image = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
