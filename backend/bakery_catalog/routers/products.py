from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from .. import schemas
from ..dependencies import get_product_service
from ..exceptions import ProductNotFoundError
from ..services.product_service import ProductService

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.ProductDTO])
def list_products(service: ProductService = Depends(get_product_service)):
    """List all products; an empty catalog is reported as 404"""
    try:
        return service.get_all_products()
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.get("/{product_id}", response_model=schemas.ProductDTO)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    try:
        return service.get_product_by_id(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("", response_model=schemas.ProductDTO, status_code=status.HTTP_201_CREATED)
def create_product(product: schemas.ProductDTO, service: ProductService = Depends(get_product_service)):
    """Create a product; unknown bakery ids are dropped"""
    return service.save_product(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    try:
        service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{product_id}/stock", response_model=schemas.ProductDTO)
def update_stock(
    product_id: int,
    stock_update: schemas.StockUpdate,
    service: ProductService = Depends(get_product_service),
):
    """Add a signed delta to the product's stock"""
    try:
        return service.update_stock(product_id, stock_update.delta)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
