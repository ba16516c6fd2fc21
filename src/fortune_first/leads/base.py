"""
Base protocol for leads API clients

Defines the lead record sent to the API and the interface every client
(HTTP or in-memory) must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .resources import PdfResource


LEAD_SOURCES = ("quiz", "insurance", "retirement", "recruiting", "newsletter")


class LeadsApiError(Exception):
    """Base exception for leads API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LeadRejectedError(LeadsApiError):
    """The API refused the payload (4xx)."""
    pass


class ApiUnavailableError(LeadsApiError):
    """The API could not be reached or failed (connection error, 5xx)."""
    pass


@dataclass
class LeadSubmission:
    """
    A visitor's contact details plus whatever they told us.

    Built once at submit time, sent to the API and then dropped.
    """
    name: str
    email: str
    source: str
    phone: Optional[str] = None
    interests: list[str] = field(default_factory=list)
    quiz_answers: Optional[dict[str, str]] = None
    employment_status: Optional[str] = None

    def __post_init__(self):
        if self.source not in LEAD_SOURCES:
            raise ValueError(f"Invalid lead source: {self.source!r}")

    def to_dict(self) -> dict:
        """Serialize to the JSON body the API expects."""
        result = {
            "name": self.name,
            "email": self.email,
            "source": self.source,
            "interests": list(self.interests),
        }
        if self.phone:
            result["phone"] = self.phone
        if self.quiz_answers is not None:
            result["quizAnswers"] = dict(self.quiz_answers)
        if self.employment_status:
            result["employmentStatus"] = self.employment_status
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "LeadSubmission":
        return cls(
            name=data["name"],
            email=data["email"],
            source=data["source"],
            phone=data.get("phone"),
            interests=data.get("interests", []),
            quiz_answers=data.get("quizAnswers"),
            employment_status=data.get("employmentStatus"),
        )


class LeadsClient(ABC):
    """
    Abstract base class for leads API clients.

    Clients submit leads and newsletter signups and fetch the PDF guides
    handed out after a successful submission.
    """

    @abstractmethod
    async def submit_lead(self, lead: LeadSubmission) -> dict:
        """
        Send a lead to the API.

        Args:
            lead: The lead to submit

        Returns:
            The API's JSON response

        Raises:
            LeadRejectedError: When the API refuses the lead
            ApiUnavailableError: When the API can't be reached
        """
        pass

    @abstractmethod
    async def subscribe_newsletter(self, email: str) -> dict:
        """
        Subscribe an email address to the newsletter.

        Raises:
            LeadsApiError: On any API failure
        """
        pass

    @abstractmethod
    async def download_resource(self, resource: PdfResource) -> Path:
        """
        Fetch a PDF guide and save it under its suggested filename.

        Returns:
            Path the file was written to

        Raises:
            LeadsApiError: On any API failure, or if the file can't be saved
        """
        pass

    async def close(self):
        """Release any open connections."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
