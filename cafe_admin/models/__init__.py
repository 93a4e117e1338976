"""
Export all models
"""
from cafe_admin.models.order import Order
from cafe_admin.models.contact import Contact
from cafe_admin.models.menu_item import MenuItem
from cafe_admin.models.admin_user import AdminUser

__all__ = [
    "Order",
    "Contact",
    "MenuItem",
    "AdminUser"
]
