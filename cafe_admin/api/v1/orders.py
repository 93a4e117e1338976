"""
Order endpoints
"""
from fastapi import APIRouter, Depends

from cafe_admin.api.dependencies import get_order_service, require_admin
from cafe_admin.schemas.order import OrderCreate, OrderStatusUpdate
from cafe_admin.services.auth_service import AdminSession
from cafe_admin.services.order_service import OrderService


router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("")
async def create_order(
    data: OrderCreate,
    orders: OrderService = Depends(get_order_service)
):
    """Public order submission"""
    order_id = await orders.submit(data.customer, data.items, data.total)
    return {"success": True, "orderId": order_id}


@router.get("")
async def list_orders(
    session: AdminSession = Depends(require_admin),
    orders: OrderService = Depends(get_order_service)
):
    result = await orders.list(session)
    return {
        "success": True,
        "orders": [o.model_dump(mode="json") for o in result]
    }


@router.get("/{order_id}")
async def get_order(
    order_id: int,
    session: AdminSession = Depends(require_admin),
    orders: OrderService = Depends(get_order_service)
):
    order = await orders.get(session, order_id)
    return {"success": True, "order": order.model_dump(mode="json")}


@router.put("/{order_id}/status")
async def update_order_status(
    order_id: int,
    data: OrderStatusUpdate,
    session: AdminSession = Depends(require_admin),
    orders: OrderService = Depends(get_order_service)
):
    """
    Change status and payment status

    - status: pending | preparing | completed | cancelled
    - payment_status: free text, "unpaid" when omitted
    """
    await orders.update_status(session, order_id, data.status, data.payment_status)
    return {"success": True, "message": "Order status updated"}


@router.delete("/{order_id}")
async def delete_order(
    order_id: int,
    session: AdminSession = Depends(require_admin),
    orders: OrderService = Depends(get_order_service)
):
    await orders.delete(session, order_id)
    return {"success": True, "message": "Order deleted"}
