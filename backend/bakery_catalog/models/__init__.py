# Import and re-export all models

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .bakery import Bakery
from .client import Client, ClientBakeryLink
from .product import Product, product_bakeries

# Ensure all models are available at package level
__all__ = [
    "Base",
    "Bakery",
    "Client",
    "ClientBakeryLink",
    "Product",
    "product_bakeries",
]
