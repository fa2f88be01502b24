from ..models import Client
from .base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    model = Client
