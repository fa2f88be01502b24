from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from ..db import Base


class Bakery(Base):
    """
    Represents a bakery in the network.
    Clients and products reference bakeries; the reconciliation services only look them up.
    """
    __tablename__ = "bakeries"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
