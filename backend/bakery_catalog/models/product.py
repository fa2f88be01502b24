from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from ..db import Base


product_bakeries = Table(
    "product_bakeries",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("bakery_id", Integer, ForeignKey("bakeries.id", ondelete="CASCADE"), primary_key=True),
)


class Product(Base):
    """
    Represents a product sold by one or more bakeries.
    Stock is adjusted by accumulation, never replaced.
    """
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True, index=True)
    stock = Column(Integer, nullable=False, default=0)
    
    bakeries = relationship("Bakery", secondary=product_bakeries, collection_class=set)

    @property
    def bakery_ids(self):
        return {bakery.id for bakery in self.bakeries}
