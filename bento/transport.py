"""HTTP transport used by a Session to talk to the Bento API."""

from typing import Dict, Optional, Protocol

import requests

from bento.errors import TransportError
from bento.logger import get_logger

logger = get_logger("bento.transport")

# Seconds; applies to both connect and read
DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Performs one HTTP exchange and returns the raw response body."""

    def send(
        self,
        method: str,
        api_uri: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> bytes:
        ...


class RequestsTransport:
    """Production transport backed by a requests.Session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, http: Optional[requests.Session] = None):
        self.timeout = timeout
        self.http = http or requests.Session()

    def exchange(
        self,
        method: str,
        url: str,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Issue the request and return the full response.

        Raises TransportError on connection, timeout or TLS failures.
        """
        try:
            response = self.http.request(
                method,
                url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"Request failed {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def send(
        self,
        method: str,
        api_uri: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> bytes:
        """Send a request to api_uri + path and return the body bytes."""
        return self.exchange(method, f"{api_uri}{path}", body, headers).content
