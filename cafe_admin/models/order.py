"""
Order model
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, Text
from sqlalchemy.sql import func
from cafe_admin.core.database import Base


ORDER_STATUSES = ("pending", "preparing", "completed", "cancelled")
DEFAULT_PAYMENT_STATUS = "unpaid"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Customer
    customer_name = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)
    email = Column(String(200), nullable=True)
    address = Column(Text, nullable=True)

    # Line items are kept as a JSON list, decoded on read
    items = Column(Text, nullable=False, default="[]")
    total = Column(Float, nullable=False)

    # State
    status = Column(String(20), nullable=False, default="pending")  # pending | preparing | completed | cancelled
    payment_status = Column(String(30), nullable=False, default=DEFAULT_PAYMENT_STATUS)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
