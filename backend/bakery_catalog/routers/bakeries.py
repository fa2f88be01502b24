from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from .. import schemas
from ..dependencies import get_bakery_service
from ..exceptions import BakeryNotFoundError
from ..services.bakery_service import BakeryService

router = APIRouter(
    prefix="/bakeries",
    tags=["Bakeries"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Bakery])
def list_bakeries(service: BakeryService = Depends(get_bakery_service)):
    return service.get_all_bakeries()


@router.get("/{bakery_id}", response_model=schemas.Bakery)
def get_bakery(bakery_id: int, service: BakeryService = Depends(get_bakery_service)):
    try:
        return service.get_bakery_by_id(bakery_id)
    except BakeryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("", response_model=schemas.Bakery, status_code=status.HTTP_201_CREATED)
def create_bakery(bakery: schemas.BakeryCreate, service: BakeryService = Depends(get_bakery_service)):
    """Register a bakery"""
    return service.create_bakery(bakery)
