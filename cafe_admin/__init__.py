"""
Café Admin - ordering and admin-management backend
"""
__version__ = "1.0.0"
