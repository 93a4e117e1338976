from .auth import LoginRequest
from .order import CustomerIn, OrderCreate, OrderStatusUpdate, OrderResponse
from .contact import ContactCreate, ContactResponse
from .menu import MenuItemResponse
