# Client schemas
from .client import ClientDTO

# Product schemas
from .product import ProductDTO, StockUpdate

# Bakery schemas
from .bakery import BakeryBase, BakeryCreate, Bakery

# Make all schemas available at package level
__all__ = [
    # Client
    "ClientDTO",
    # Product
    "ProductDTO",
    "StockUpdate",
    # Bakery
    "BakeryBase",
    "BakeryCreate",
    "Bakery",
]
