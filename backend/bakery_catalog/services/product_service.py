from typing import Iterable, List, Optional, Set
import logging

from sqlalchemy.orm import Session

from ..exceptions import ProductNotFoundError
from ..models import Bakery, Product
from ..repositories import BakeryRepository, ProductRepository
from ..schemas import ProductDTO

logger = logging.getLogger(__name__)


class ProductService:
    """Service for products, their bakery associations and stock accumulation."""

    def __init__(
        self,
        db: Session,
        products: Optional[ProductRepository] = None,
        bakeries: Optional[BakeryRepository] = None,
    ):
        self.db = db
        self.products = products or ProductRepository()
        self.bakeries = bakeries or BakeryRepository()

    def get_all_products(self) -> List[ProductDTO]:
        """
        List every product.

        Raises:
            ProductNotFoundError: If the catalog is empty
        """
        products = self.products.find_all(self.db)
        if not products:
            raise ProductNotFoundError()
        return [ProductDTO.model_validate(product) for product in products]

    def get_product_by_id(self, product_id: int) -> ProductDTO:
        product = self.products.find_by_id(self.db, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDTO.model_validate(product)

    def save_product(self, data: ProductDTO) -> ProductDTO:
        """
        Create a product linked to the bakeries in ``data.bakery_ids``.

        Bakery ids that do not resolve are skipped rather than rejected, so the
        stored set is the resolvable subset. The store assigns the id.
        """
        product = Product(name=data.name, stock=data.stock)
        try:
            product.bakeries = self._resolve_bakeries(data.bakery_ids)
            self.products.save(self.db, product)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(product)
        logger.info(f"Saved product {product.id} with bakeries {sorted(product.bakery_ids)}")
        return ProductDTO.model_validate(product)

    def delete_product(self, product_id: int) -> None:
        if not self.products.exists_by_id(self.db, product_id):
            raise ProductNotFoundError(product_id)

        try:
            self.products.delete_by_id(self.db, product_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Deleted product {product_id}")

    def update_stock(self, product_id: int, delta: int) -> ProductDTO:
        """
        Add a signed delta to a product's stock.

        Stock has no lower bound, so the result may be negative.

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        try:
            if not self.products.add_to_stock(self.db, product_id, delta):
                raise ProductNotFoundError(product_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        product = self.products.find_by_id(self.db, product_id)
        self.db.refresh(product)
        logger.info(f"Adjusted stock of product {product_id} by {delta} to {product.stock}")
        return ProductDTO.model_validate(product)

    def _resolve_bakeries(self, bakery_ids: Iterable[int]) -> Set[Bakery]:
        bakeries = set()
        for bakery_id in sorted(set(bakery_ids or ())):
            bakery = self.bakeries.find_by_id(self.db, bakery_id)
            if bakery is None:
                logger.debug(f"Skipping unknown bakery {bakery_id} for product")
                continue
            bakeries.add(bakery)
        return bakeries
