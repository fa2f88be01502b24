from fastapi import Depends
from sqlalchemy.orm import Session

# Re-export database dependency
from .db import get_db

# Re-export directory dependency
from .services.directory_client import DirectoryClient, get_directory_client

from .services.bakery_service import BakeryService
from .services.client_service import ClientService
from .services.product_service import ProductService


def get_client_service(
    db: Session = Depends(get_db),
    directory: DirectoryClient = Depends(get_directory_client),
) -> ClientService:
    return ClientService(db, directory)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_bakery_service(db: Session = Depends(get_db)) -> BakeryService:
    return BakeryService(db)
