from ..models import Bakery
from .base import BaseRepository


class BakeryRepository(BaseRepository[Bakery]):
    model = Bakery
