"""
Mock leads client for testing

Records everything it is sent and answers without making HTTP calls.
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .base import LeadsClient, LeadSubmission, LeadsApiError, ApiUnavailableError
from .resources import PdfResource


# Smallest file a PDF viewer will open
PLACEHOLDER_PDF = (
    b"%PDF-1.4\n1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
    b"2 0 obj<</Type/Pages/Kids[]/Count 0>>endobj\ntrailer<</Root 1 0 R>>\n%%EOF\n"
)


@dataclass
class MockLeadsClient(LeadsClient):
    """
    In-memory leads client.

    Set ``fail`` (or ``fail_downloads``) to simulate API errors, and
    ``delay_seconds`` to keep requests in flight long enough to observe
    pending state.
    """

    fail: bool = False
    fail_downloads: bool = False
    error: Optional[LeadsApiError] = None
    delay_seconds: float = 0.0
    download_dir: Optional[Path] = None
    leads: list[LeadSubmission] = field(default_factory=list)
    subscribers: list[str] = field(default_factory=list)
    downloads: list[PdfResource] = field(default_factory=list)

    async def _simulate(self):
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        if self.fail:
            raise self.error or ApiUnavailableError("500: Simulated leads API failure", status_code=500)

    async def submit_lead(self, lead: LeadSubmission) -> dict:
        await self._simulate()
        self.leads.append(lead)
        return {"id": str(uuid.uuid4()), **lead.to_dict()}

    async def subscribe_newsletter(self, email: str) -> dict:
        await self._simulate()
        self.subscribers.append(email)
        return {"id": str(uuid.uuid4()), "email": email}

    async def download_resource(self, resource: PdfResource) -> Path:
        if self.fail_downloads:
            raise ApiUnavailableError(f"500: Could not generate {resource.key}", status_code=500)

        self.downloads.append(resource)
        if self.download_dir is None:
            return Path(resource.filename)

        target = self.download_dir / resource.filename
        try:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(PLACEHOLDER_PDF)
        except OSError as e:
            raise LeadsApiError(f"Could not save {resource.filename}: {e}") from e
        return target
