"""
Leads API clients for fortune-first

Submits captured leads and newsletter signups, and downloads the PDF
guides offered in exchange.
"""

from .base import (
    LeadsClient,
    LeadSubmission,
    LeadsApiError,
    LeadRejectedError,
    ApiUnavailableError,
    LEAD_SOURCES,
)
from .resources import (
    PdfResource,
    INSURANCE_GUIDE,
    RETIREMENT_CHECKLIST,
    DISTRIBUTOR_KIT,
    PDF_RESOURCES,
    get_resource,
)
from .http import HttpLeadsClient
from .mock import MockLeadsClient

__all__ = [
    "LeadsClient",
    "LeadSubmission",
    "LeadsApiError",
    "LeadRejectedError",
    "ApiUnavailableError",
    "LEAD_SOURCES",
    "PdfResource",
    "INSURANCE_GUIDE",
    "RETIREMENT_CHECKLIST",
    "DISTRIBUTOR_KIT",
    "PDF_RESOURCES",
    "get_resource",
    "HttpLeadsClient",
    "MockLeadsClient",
    "get_client",
]


def get_client(name: str = "http", **kwargs) -> LeadsClient:
    """
    Factory function to get a leads client by name.

    Args:
        name: Client name ('http', 'mock')
        **kwargs: Client-specific options

    Returns:
        Configured LeadsClient instance

    Raises:
        ValueError: If client name is unknown
    """
    clients = {
        "http": HttpLeadsClient,
        "mock": MockLeadsClient,
    }

    if name not in clients:
        raise ValueError(f"Unknown leads client: {name}. Valid options: {list(clients.keys())}")

    return clients[name](**kwargs)
