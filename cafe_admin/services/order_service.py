"""
Order service: public submission and admin management
"""
import json
import logging
import math
from typing import Any, List, Optional

from cafe_admin.core.errors import NotFound, ValidationError
from cafe_admin.core.store import Store
from cafe_admin.models.order import DEFAULT_PAYMENT_STATUS, ORDER_STATUSES, Order
from cafe_admin.schemas.order import CustomerIn, OrderResponse
from cafe_admin.services.auth_service import AdminSession, ensure_admin

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, store: Store):
        self.store = store

    async def submit(
        self,
        customer: Optional[CustomerIn],
        items: Optional[List[Any]],
        total: Optional[float]
    ) -> int:
        """
        Register a new order from the public site

        Returns:
            The id of the created order
        """
        if not customer or not customer.name or not customer.phone or not items or total is None:
            raise ValidationError("Missing required fields")

        if not math.isfinite(total) or total < 0:
            raise ValidationError("Invalid total")

        order_id = await self.store.insert(
            Order,
            customer_name=customer.name,
            phone=customer.phone,
            email=customer.email or "",
            address=customer.address or "",
            items=json.dumps(items),
            total=total,
            status="pending",
            payment_status=DEFAULT_PAYMENT_STATUS
        )

        logger.info(f"[Orders] ✅ Order created: ID {order_id} ({len(items)} items, total {total})")
        return order_id

    async def list(self, session: AdminSession) -> List[OrderResponse]:
        ensure_admin(session)
        orders = await self.store.all(Order)
        return [OrderResponse.model_validate(o) for o in orders]

    async def get(self, session: AdminSession, order_id: int) -> OrderResponse:
        ensure_admin(session)
        order = await self.store.get(Order, order_id)
        if not order:
            raise NotFound("Order not found")
        return OrderResponse.model_validate(order)

    async def update_status(
        self,
        session: AdminSession,
        order_id: int,
        status: Optional[str],
        payment_status: Optional[str] = None
    ) -> None:
        """
        Set status and payment status.

        Any status may move to any other; only membership in ORDER_STATUSES
        is checked.
        """
        ensure_admin(session)

        if not status:
            raise ValidationError("Status required")

        if status not in ORDER_STATUSES:
            raise ValidationError("Invalid status")

        updated = await self.store.update(
            Order,
            order_id,
            status=status,
            payment_status=payment_status or DEFAULT_PAYMENT_STATUS
        )
        if not updated:
            raise NotFound("Order not found")

        logger.info(f"[Orders] Order {order_id} -> {status} ({payment_status or DEFAULT_PAYMENT_STATUS})")

    async def delete(self, session: AdminSession, order_id: int) -> None:
        ensure_admin(session)
        deleted = await self.store.delete(Order, order_id)
        if deleted:
            logger.info(f"[Orders] Order {order_id} deleted")
