from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class BakeryBase(BaseModel):
    name: str
    address: Optional[str] = None


class BakeryCreate(BakeryBase):
    pass


class Bakery(BakeryBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
