from sqlalchemy.orm import Session

from ..models import Product
from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product

    def add_to_stock(self, db: Session, product_id: int, delta: int) -> bool:
        """
        Add a signed delta to a product's stock in a single UPDATE statement.

        The increment happens inside the database, so concurrent callers
        cannot lose each other's updates.

        Returns:
            True if the product exists and was updated, False otherwise
        """
        updated = (
            db.query(Product)
            .filter(Product.id == product_id)
            .update({Product.stock: Product.stock + delta}, synchronize_session=False)
        )
        return updated > 0
