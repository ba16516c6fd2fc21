"""
HTTP leads client

Talks to the site's JSON API over httpx: lead submissions, newsletter
signups and PDF guide downloads.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

from .base import (
    LeadsClient, LeadSubmission, LeadsApiError, LeadRejectedError,
    ApiUnavailableError,
)
from .resources import PdfResource
from ..config import config


logger = logging.getLogger(__name__)


class HttpLeadsClient(LeadsClient):
    """
    Leads API client over HTTP.

    Base URL, timeout and download directory fall back to config.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        download_dir: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API origin (falls back to FORTUNE_FIRST_API_URL)
            timeout: Request timeout in seconds
            download_dir: Directory PDF guides are saved to
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url or config.api.base_url
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.download_dir = Path(download_dir or config.downloads.download_dir)
        self._transport = transport
        self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request and map transport and status failures to LeadsApiError."""
        client = self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = f"{status}: {e.response.text or e.response.reason_phrase}"
            if 400 <= status < 500:
                raise LeadRejectedError(message, status_code=status)
            raise ApiUnavailableError(message, status_code=status)
        except httpx.HTTPError as e:
            raise ApiUnavailableError(f"Connection error: {e}")

    async def _post_json(self, path: str, payload: dict) -> dict:
        response = await self._request("POST", path, json=payload)
        try:
            return response.json()
        except ValueError as e:
            raise LeadsApiError(f"Invalid JSON from {path}: {e}", status_code=response.status_code)

    async def submit_lead(self, lead: LeadSubmission) -> dict:
        """POST the lead to /api/leads."""
        data = await self._post_json("/api/leads", lead.to_dict())
        logger.info(f"Lead submitted: {lead.email} from {lead.source}")
        return data

    async def subscribe_newsletter(self, email: str) -> dict:
        """POST the address to /api/newsletter."""
        data = await self._post_json("/api/newsletter", {"email": email})
        logger.info(f"Newsletter signup: {email}")
        return data

    async def download_resource(self, resource: PdfResource) -> Path:
        """GET a PDF guide and write it under its fixed filename."""
        response = await self._request("GET", resource.path)

        target = self.download_dir / resource.filename
        try:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(response.content)
        except OSError as e:
            raise LeadsApiError(f"Could not save {resource.filename}: {e}") from e

        logger.info(f"Downloaded {resource.key} to {target}")
        return target

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"
