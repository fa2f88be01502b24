from pydantic import BaseModel, Field, AliasChoices
from typing import Optional


class ClientDTO(BaseModel):
    """
    Client transfer form shared by the local store and the external directory.
    Directory records carry extra fields (username, address, company...) which are ignored.
    """
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bakery_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("bakery_id", "bakeryId"),
    )

    class Config:
        from_attributes = True
