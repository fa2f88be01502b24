from .base import BaseRepository
from .client_repository import ClientRepository
from .bakery_repository import BakeryRepository
from .product_repository import ProductRepository

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "BakeryRepository",
    "ProductRepository",
]
