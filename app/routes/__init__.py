from .auth import user_bp
from .customer import customer_bp
from .admin import admin_bp


__all__ = [
    'user_bp',
    'customer_bp',
    'admin_bp',
]
