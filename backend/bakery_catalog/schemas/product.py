from pydantic import BaseModel, Field, AliasChoices
from typing import Optional, Set


class ProductDTO(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    stock: int = 0
    bakery_ids: Set[int] = Field(
        default_factory=set,
        validation_alias=AliasChoices("bakery_ids", "bakeryIds"),
    )

    class Config:
        from_attributes = True


class StockUpdate(BaseModel):
    """Signed amount added to the current stock"""
    delta: int
