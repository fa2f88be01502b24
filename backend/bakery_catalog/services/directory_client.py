from typing import Any, List, Optional
import logging

import requests
from pydantic import ValidationError

from ..core.settings import get_settings
from ..exceptions import UpstreamUnavailableError
from ..schemas import ClientDTO

logger = logging.getLogger(__name__)


class DirectoryClient:
    """
    HTTP client for the external placeholder user directory.

    Transport failures and unexpected status codes raise UpstreamUnavailableError.
    A 404 or an empty body on reads means "no data" and is not an error.
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.directory_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.directory_timeout_s
        self.session = session or requests.Session()
    
    def _request(self, method: str, path: str = "", allow_not_found: bool = False, **kwargs) -> Optional[requests.Response]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Directory request {method} {url} failed: {e}")
            raise UpstreamUnavailableError(f"Directory request {method} {url} failed: {e}") from e
        
        if allow_not_found and response.status_code == 404:
            return None
        if not response.ok:
            logger.error(f"Directory request {method} {url} returned HTTP {response.status_code}")
            raise UpstreamUnavailableError(
                f"Directory request {method} {url} returned HTTP {response.status_code}"
            )
        return response
    
    @staticmethod
    def _json(response: requests.Response) -> Any:
        """Decode a response body, treating an empty or malformed body as no data"""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Directory returned a non-JSON body from {response.url}")
            return None
    
    def list_clients(self) -> List[ClientDTO]:
        """Fetch every client the directory lists, in the order it returns them"""
        payload = self._json(self._request("GET"))
        if not isinstance(payload, list):
            return []
        clients = []
        for item in payload:
            if not isinstance(item, dict):
                continue
            try:
                clients.append(ClientDTO.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed directory record {item.get('id')!r}: {e}")
        return clients
    
    def get_client(self, client_id: int) -> Optional[ClientDTO]:
        """
        Fetch a single client by id.
        
        Args:
            client_id: Directory client id
            
        Returns:
            ClientDTO if the directory has the client, None otherwise
            
        Raises:
            UpstreamUnavailableError: If the directory cannot be reached or errors
        """
        response = self._request("GET", f"/{client_id}", allow_not_found=True)
        if response is None:
            return None
        payload = self._json(response)
        if not isinstance(payload, dict) or not payload:
            return None
        try:
            return ClientDTO.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Directory returned a malformed record for client {client_id}: {e}")
            return None
    
    def update_client(self, client_id: int, client: ClientDTO) -> None:
        self._request("PUT", f"/{client_id}", json=client.model_dump(mode="json"))
        logger.info(f"Pushed update for client {client_id} to directory")
    
    def delete_client(self, client_id: int) -> None:
        self._request("DELETE", f"/{client_id}")
        logger.info(f"Deleted client {client_id} from directory")


# Global instance - will be initialized when first accessed
directory_client = None

def get_directory_client() -> DirectoryClient:
    """Get or create the directory client instance"""
    global directory_client
    if directory_client is None:
        directory_client = DirectoryClient()
    return directory_client
