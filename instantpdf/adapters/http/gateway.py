"""
Authenticated request gateway for the remote PDF service.

Wraps a requests.Session: attaches the persisted bearer token when there is
one and always carries the session cookie jar, which anonymous users rely on.
No retries and no internal timeout; transport errors propagate unchanged.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlparse

import requests

from instantpdf.config.ledger_limits import TOKEN_KEY
from instantpdf.core.errors.classifier import ErrorCategory, classify_error
from instantpdf.core.exceptions import RejectedOperationError
from instantpdf.core.ports.persistence import PersistencePort

logger = logging.getLogger(__name__)

DOWNLOAD_FAILED_MESSAGE = "Download failed. Please try again."
DEFAULT_DOWNLOAD_NAME = "download.pdf"


class AuthenticatedGateway:
    """Single entry point for requests to the PDF service."""

    def __init__(
        self,
        persistence: PersistencePort,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the gateway.

        Args:
            persistence: Client storage holding the bearer token
            base_url: Service URL (default: $INSTANTPDF_API_URL or http://localhost:5000)
            session: Session whose cookie jar is sent with every request
        """
        self.base_url = (
            base_url or os.getenv("INSTANTPDF_API_URL", "http://localhost:5000")
        ).rstrip("/")
        self._persistence = persistence
        self._session = session or requests.Session()

    def _read_token(self) -> Optional[str]:
        """Bearer token from client storage, read fresh on every call."""
        result = self._persistence.load(TOKEN_KEY)
        if result.found and isinstance(result.value, str) and result.value:
            return result.value
        return None

    @property
    def has_auth_token(self) -> bool:
        return self._read_token() is not None

    def auth_headers(self) -> Dict[str, str]:
        """Authorization header for the current token, or {} when anonymous."""
        token = self._read_token()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _resolve(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return urljoin(f"{self.base_url}/", url.lstrip("/"))

    def request(self, url: str, method: str = "GET", **options: Any) -> requests.Response:
        """Send a request with credentials attached.

        A caller-supplied Authorization header is never overwritten.

        Args:
            url: Absolute URL or path relative to base_url
            method: HTTP method
            **options: Passed through to requests.Session.request

        Returns:
            The response, whatever its status

        Raises:
            requests.RequestException: On transport failure
        """
        headers = dict(options.pop("headers", None) or {})
        if not any(name.lower() == "authorization" for name in headers):
            headers.update(self.auth_headers())

        target = self._resolve(url)
        logger.debug(f"{method} {target}")
        return self._session.request(method, target, headers=headers, **options)

    def _rejection(
        self,
        response: requests.Response,
        fallback_message: Optional[str] = None,
    ) -> RejectedOperationError:
        """Classify a non-2xx response into a user-facing error."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if body is None and fallback_message:
            category, message = ErrorCategory.GENERIC, fallback_message
        else:
            classified = classify_error(body, self.has_auth_token)
            category, message = classified.category, classified.message

        logger.warning(
            f"Operation rejected: {response.status_code} {category.value} - {message}"
        )
        return RejectedOperationError(message, category=category, status_code=response.status_code)

    def submit_operation(
        self,
        endpoint: str,
        files: Any = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """POST a tool operation.

        Returns:
            Decoded JSON body of the successful response

        Raises:
            RejectedOperationError: On a non-2xx response
            requests.RequestException: On transport failure
        """
        response = self.request(endpoint, method="POST", files=files, data=data)
        if not response.ok:
            raise self._rejection(response)
        return response.json()

    def download_file(self, download_url: str, destination: Optional[str] = None) -> Path:
        """Download a processed artifact.

        Absolute URLs are reduced to their path, so the download always goes
        through this gateway's origin.

        Args:
            download_url: URL or path returned by the service
            destination: Target file or existing directory (default: cwd)

        Returns:
            Path of the written file

        Raises:
            RejectedOperationError: On a non-2xx response
            requests.RequestException: On transport failure
        """
        path = urlparse(download_url).path if download_url.startswith("http") else download_url

        response = self.request(path)
        if not response.ok:
            raise self._rejection(response, fallback_message=DOWNLOAD_FAILED_MESSAGE)

        filename = path.rstrip("/").split("/")[-1] or DEFAULT_DOWNLOAD_NAME
        target = Path(destination) if destination else Path.cwd()
        if target.is_dir():
            target = target / filename
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(response.content)

        logger.info(f"Downloaded {target}")
        return target
