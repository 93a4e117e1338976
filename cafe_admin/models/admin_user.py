"""
Admin user model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from cafe_admin.core.database import Base


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash

    created_at = Column(DateTime(timezone=True), server_default=func.now())
