from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from .. import schemas
from ..dependencies import get_client_service
from ..exceptions import BakeryNotFoundError, ClientNotFoundError, UpstreamUnavailableError
from ..services.client_service import ClientService

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    responses={404: {"description": "Not found"}},
)


def _raise_http(e: Exception):
    """Translate a client service error into an HTTPException"""
    if isinstance(e, ClientNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    if isinstance(e, BakeryNotFoundError):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    if isinstance(e, UpstreamUnavailableError):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    raise e


@router.get("", response_model=List[schemas.ClientDTO])
def list_clients(service: ClientService = Depends(get_client_service)):
    """List local clients followed by the directory's clients"""
    return service.get_all_clients()


@router.get("/{client_id}", response_model=schemas.ClientDTO)
def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Get a client from the database, falling back to the directory"""
    try:
        return service.get_client_by_id(client_id)
    except ClientNotFoundError as e:
        _raise_http(e)


@router.post("", response_model=schemas.ClientDTO, status_code=status.HTTP_201_CREATED)
def create_client(client: schemas.ClientDTO, service: ClientService = Depends(get_client_service)):
    """Create a client, optionally associated with a bakery"""
    try:
        return service.create_client(client)
    except BakeryNotFoundError as e:
        _raise_http(e)


@router.post("/import/{client_id}", response_model=schemas.ClientDTO, status_code=status.HTTP_201_CREATED)
def import_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Copy a client from the directory into the database"""
    try:
        return service.import_client(client_id)
    except (ClientNotFoundError, BakeryNotFoundError, UpstreamUnavailableError) as e:
        _raise_http(e)


@router.put("/{client_id}", response_model=schemas.ClientDTO)
def update_client(
    client_id: int,
    client: schemas.ClientDTO,
    service: ClientService = Depends(get_client_service),
):
    """Update a client in the database and then in the directory"""
    try:
        return service.update_client(client_id, client)
    except (ClientNotFoundError, BakeryNotFoundError, UpstreamUnavailableError) as e:
        _raise_http(e)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    """Delete a client from the database and then from the directory"""
    try:
        service.delete_client(client_id)
    except (ClientNotFoundError, UpstreamUnavailableError) as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
