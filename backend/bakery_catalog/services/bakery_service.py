from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..exceptions import BakeryNotFoundError
from ..models import Bakery
from ..repositories import BakeryRepository
from .. import schemas

logger = logging.getLogger(__name__)


class BakeryService:
    """Service for looking up and registering bakeries."""

    def __init__(self, db: Session, bakeries: Optional[BakeryRepository] = None):
        self.db = db
        self.bakeries = bakeries or BakeryRepository()

    def get_all_bakeries(self) -> List[schemas.Bakery]:
        return [schemas.Bakery.model_validate(bakery) for bakery in self.bakeries.find_all(self.db)]

    def get_bakery_by_id(self, bakery_id: int) -> schemas.Bakery:
        bakery = self.bakeries.find_by_id(self.db, bakery_id)
        if bakery is None:
            raise BakeryNotFoundError(bakery_id)
        return schemas.Bakery.model_validate(bakery)

    def create_bakery(self, data: schemas.BakeryCreate) -> schemas.Bakery:
        bakery = Bakery(name=data.name, address=data.address)
        try:
            self.bakeries.save(self.db, bakery)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(bakery)
        logger.info(f"Created bakery {bakery.id}")
        return schemas.Bakery.model_validate(bakery)
