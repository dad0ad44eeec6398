from .reference import User, Location, Purpose, Category, Product
from .registrations import Registration

__all__ = [
    'User', 'Location', 'Purpose', 'Category', 'Product',
    'Registration',
]
