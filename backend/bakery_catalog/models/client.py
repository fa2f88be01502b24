from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base


class Client(Base):
    """
    Represents a bakery client.
    The bakery links are owned by the client and deleted with it.
    """
    __tablename__ = "clients"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True, index=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
    
    bakery_links = relationship(
        "ClientBakeryLink",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="ClientBakeryLink.id",
    )

    @property
    def bakery_id(self):
        """Bakery of the first association link, if any"""
        if not self.bakery_links:
            return None
        return self.bakery_links[0].bakery_id


class ClientBakeryLink(Base):
    """Join record tying one client to one bakery."""
    __tablename__ = "client_bakeries"
    
    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    bakery_id = Column(Integer, ForeignKey("bakeries.id"), nullable=False, index=True)
    
    client = relationship("Client", back_populates="bakery_links")
    bakery = relationship("Bakery")
