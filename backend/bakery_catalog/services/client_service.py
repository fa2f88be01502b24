"""
Client reconciliation between the local store and the external user directory.

Reads merge both sources; writes commit locally first and then propagate to
the directory as a separate step. A directory failure after the local commit
is reported with UpstreamUnavailableError(local_committed=True) and is not
compensated.
"""

from datetime import datetime, timezone
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..exceptions import BakeryNotFoundError, ClientNotFoundError, UpstreamUnavailableError
from ..models import Client, ClientBakeryLink
from ..repositories import BakeryRepository, ClientRepository
from ..schemas import ClientDTO
from .directory_client import DirectoryClient

logger = logging.getLogger(__name__)


class ClientService:
    """Service for client reconciliation and client-bakery association upkeep."""

    def __init__(
        self,
        db: Session,
        directory: DirectoryClient,
        clients: Optional[ClientRepository] = None,
        bakeries: Optional[BakeryRepository] = None,
    ):
        self.db = db
        self.directory = directory
        self.clients = clients or ClientRepository()
        self.bakeries = bakeries or BakeryRepository()

    def get_all_clients(self) -> List[ClientDTO]:
        """
        List local clients followed by the clients the directory returns.

        The directory is a best-effort source: no data, or a failed call,
        yields the local clients only.
        """
        result = [ClientDTO.model_validate(client) for client in self.clients.find_all(self.db)]

        try:
            remote_clients = self.directory.list_clients()
        except UpstreamUnavailableError as e:
            logger.warning(f"Directory unavailable while listing clients, returning local clients only: {e}")
            remote_clients = []

        result.extend(remote_clients or [])
        return result

    def get_client_by_id(self, client_id: int) -> ClientDTO:
        """
        Get a client from the local store, falling back to the directory.

        A client found only in the directory is returned as-is and not persisted.

        Raises:
            ClientNotFoundError: If neither source has the client
        """
        client = self.clients.find_by_id(self.db, client_id)
        if client is not None:
            return ClientDTO.model_validate(client)

        try:
            remote_client = self.directory.get_client(client_id)
        except UpstreamUnavailableError as e:
            logger.warning(f"Directory unavailable while looking up client {client_id}: {e}")
            remote_client = None

        if remote_client is None:
            raise ClientNotFoundError(
                client_id,
                f"Client not found in the database or the directory with ID: {client_id}",
            )
        return remote_client

    def import_client(self, client_id: int) -> ClientDTO:
        """
        Copy a directory client into the local store under the same id.

        Re-importing an id that already exists locally refreshes that row and
        replaces its bakery links.

        Raises:
            ClientNotFoundError: If the directory has no such client
            BakeryNotFoundError: If the record names a bakery that does not exist locally
            UpstreamUnavailableError: If the directory cannot be reached
        """
        remote_client = self.directory.get_client(client_id)
        if remote_client is None:
            raise ClientNotFoundError(client_id, f"Client not found in the directory with ID: {client_id}")

        client = self.clients.find_by_id(self.db, client_id) or Client(id=client_id)
        saved = self._store(client, remote_client)

        logger.info(f"Imported client {saved.id} from directory with bakery {saved.bakery_id}")
        return ClientDTO.model_validate(saved)

    def create_client(self, data: ClientDTO) -> ClientDTO:
        """
        Create a local client from caller-supplied data.

        The store assigns the id; any id in ``data`` is ignored.

        Raises:
            BakeryNotFoundError: If ``data`` names a bakery that does not exist
        """
        saved = self._store(Client(), data)

        logger.info(f"Created client {saved.id} with bakery {saved.bakery_id}")
        return ClientDTO.model_validate(saved)

    def update_client(self, client_id: int, data: ClientDTO) -> ClientDTO:
        """
        Overwrite a local client and push the same update to the directory.

        Existing bakery links are always replaced: by one link when ``data``
        names a bakery, by none otherwise.

        Raises:
            ClientNotFoundError: If the client does not exist locally
            BakeryNotFoundError: If ``data`` names a bakery that does not exist
            UpstreamUnavailableError: If the directory update fails after the local commit
        """
        client = self.clients.find_by_id(self.db, client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        saved = self._store(client, data, touch=True)
        result = ClientDTO.model_validate(saved)
        logger.info(f"Updated client {client_id} locally with bakery {result.bakery_id}")

        try:
            self.directory.update_client(client_id, data)
        except UpstreamUnavailableError as e:
            logger.error(f"Client {client_id} updated locally but directory update failed: {e}")
            raise UpstreamUnavailableError(
                f"Client {client_id} was updated locally but the directory update failed: {e.message}",
                client_id,
                local_committed=True,
            ) from e

        return result

    def delete_client(self, client_id: int) -> None:
        """
        Delete a local client and then the same id in the directory.

        Raises:
            ClientNotFoundError: If the client does not exist locally; the directory is not called
            UpstreamUnavailableError: If the directory delete fails after the local commit
        """
        if not self.clients.exists_by_id(self.db, client_id):
            raise ClientNotFoundError(client_id)

        try:
            self.clients.delete_by_id(self.db, client_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"Deleted client {client_id} locally")

        try:
            self.directory.delete_client(client_id)
        except UpstreamUnavailableError as e:
            logger.error(f"Client {client_id} deleted locally but directory delete failed: {e}")
            raise UpstreamUnavailableError(
                f"Client {client_id} was deleted locally but the directory delete failed: {e.message}",
                client_id,
                local_committed=True,
            ) from e

    def _resolve_links(self, bakery_id: Optional[int]) -> List[ClientBakeryLink]:
        """Build the replacement link set, failing before anything is staged"""
        if bakery_id is None:
            return []
        bakery = self.bakeries.find_by_id(self.db, bakery_id)
        if bakery is None:
            raise BakeryNotFoundError(bakery_id)
        return [ClientBakeryLink(bakery=bakery)]

    def _store(self, client: Client, data: ClientDTO, touch: bool = False) -> Client:
        """Apply ``data`` to ``client``, swap in its new bakery links and commit"""
        try:
            links = self._resolve_links(data.bakery_id)

            client.name = data.name
            client.email = data.email
            client.phone = data.phone
            if touch:
                client.updated_at = datetime.now(timezone.utc)
            client.bakery_links = links

            self.clients.save(self.db, client)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(client)
        return client
