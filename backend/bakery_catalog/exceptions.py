"""
Domain errors raised by the catalog services.

Services raise these and never HTTPException; routers translate them into
HTTP responses.
"""
from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog errors."""

    def __init__(self, message: str, entity_id: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.entity_id = entity_id


class NotFoundError(CatalogError):
    """Raised when an entity is absent by id."""
    pass


class ClientNotFoundError(NotFoundError):
    """Raised when a client exists neither locally nor in the directory."""

    def __init__(self, client_id: int, message: Optional[str] = None):
        super().__init__(message or f"Client not found with ID: {client_id}", client_id)


class ProductNotFoundError(NotFoundError):
    """Raised when a product is absent, or when the catalog is empty."""

    def __init__(self, product_id: Optional[int] = None, message: Optional[str] = None):
        if message is None:
            message = f"Product not found with ID: {product_id}" if product_id is not None else "No products found"
        super().__init__(message, product_id)


class AssociationNotFoundError(CatalogError):
    """Raised when a referenced entity in an association does not resolve."""
    pass


class BakeryNotFoundError(AssociationNotFoundError):
    """Raised when a bakery id does not resolve."""

    def __init__(self, bakery_id: int):
        super().__init__(f"Bakery not found with ID: {bakery_id}", bakery_id)


class UpstreamUnavailableError(CatalogError):
    """
    Raised when a call to the external user directory fails.

    local_committed is True when the local store already committed the change
    before the directory call failed, i.e. the two stores now diverge.
    """

    def __init__(self, message: str, entity_id: Optional[int] = None, local_committed: bool = False):
        super().__init__(message, entity_id)
        self.local_committed = local_committed
