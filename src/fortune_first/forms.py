"""
Lead capture forms

The landing pages (insurance, retirement, recruiting) and the newsletter
box all follow the same pattern as the quiz: collect a few fields, submit
once, tell the visitor how it went, and hand out a guide on success.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .leads.base import LeadsClient, LeadSubmission, LeadsApiError
from .leads.resources import (
    PdfResource, INSURANCE_GUIDE, RETIREMENT_CHECKLIST, DISTRIBUTOR_KIT,
)
from .notifications import Notifier, Toast, ToastLog


logger = logging.getLogger(__name__)


SUBMIT_ERROR_MESSAGE = "There was an error submitting your information. Please try again."


async def trigger_download(client: LeadsClient, resource: PdfResource) -> Optional[Path]:
    """
    Start a guide download. Failures are logged, never raised: the lead is
    already captured by the time this runs.
    """
    try:
        return await client.download_resource(resource)
    except LeadsApiError as e:
        logger.warning(f"Download of {resource.key} failed: {e}")
        return None


async def deliver_lead(
    client: LeadsClient,
    notifier: Notifier,
    lead: LeadSubmission,
    resource: PdfResource,
    success_message: str,
) -> bool:
    """
    Submit a lead and, if the API accepts it, hand out the guide.

    Args:
        client: Leads API client
        notifier: Where to report the outcome
        lead: The lead to submit
        resource: Guide to download on success
        success_message: Toast description on success

    Returns:
        True if the lead was accepted
    """
    try:
        await client.submit_lead(lead)
    except LeadsApiError as e:
        logger.warning(f"Lead submission failed for {lead.email} ({lead.source}): {e}")
        notifier.notify(Toast.error(SUBMIT_ERROR_MESSAGE))
        return False

    notifier.notify(Toast.success(success_message))
    await trigger_download(client, resource)
    return True


# =============================================================================
# LANDING PAGE FORMS
# =============================================================================

EMPLOYMENT_STATUSES = {
    "employed": "Currently Employed",
    "self-employed": "Self-Employed",
    "unemployed": "Looking for Work",
    "retired": "Retired",
}


@dataclass(frozen=True)
class LandingPage:
    """What a landing page's form collects and what it gives back."""
    key: str
    source: str
    interests: tuple[str, ...]
    fields: tuple[str, ...]
    resource: PdfResource
    success_message: str
    offers_consultation: bool = False


INSURANCE_PAGE = LandingPage(
    key="insurance",
    source="insurance",
    interests=("life_insurance", "high_income_strategies"),
    fields=("name", "email", "phone"),
    resource=INSURANCE_GUIDE,
    success_message="Your free insurance guide is downloading now. Check your email for additional resources.",
)

RETIREMENT_PAGE = LandingPage(
    key="retirement",
    source="retirement",
    interests=("retirement_planning", "retirement_security"),
    fields=("name", "email"),
    resource=RETIREMENT_CHECKLIST,
    success_message="Your retirement checklist is downloading now. Check your email for additional resources.",
    offers_consultation=True,
)

RECRUITING_PAGE = LandingPage(
    key="recruiting",
    source="recruiting",
    interests=("distributor_opportunity", "financial_career"),
    fields=("name", "email", "phone", "employment_status"),
    resource=DISTRIBUTOR_KIT,
    success_message="Your distributor starter kit is downloading now. Check your email for additional resources.",
)

LANDING_PAGES = {p.key: p for p in (INSURANCE_PAGE, RETIREMENT_PAGE, RECRUITING_PAGE)}

CONSULTATION_TITLE = "Calendar Integration"
CONSULTATION_MESSAGE = (
    "Calendar booking widget would open here. Please call us to schedule your consultation."
)


class LandingLeadForm:
    """
    Lead form on a landing page. Every field the page shows is required.

    On success the fields are cleared; on failure they are kept so the
    visitor can try again.
    """

    def __init__(
        self,
        page: Union[LandingPage, str],
        client: LeadsClient,
        notifier: Optional[Notifier] = None,
    ):
        if isinstance(page, str):
            if page not in LANDING_PAGES:
                raise ValueError(f"Unknown landing page: {page}. Valid options: {list(LANDING_PAGES)}")
            page = LANDING_PAGES[page]

        self.page = page
        self.client = client
        self.notifier = notifier or ToastLog()
        self.values = {name: "" for name in page.fields}
        self.is_pending = False

    def set_field(self, name: str, value: str):
        if name not in self.values:
            raise ValueError(f"The {self.page.key} form has no field '{name}'")
        if name == "employment_status" and value and value not in EMPLOYMENT_STATUSES:
            raise ValueError(f"Invalid employment status: {value}")
        self.values[name] = value

    def update(self, **fields):
        for name, value in fields.items():
            self.set_field(name, value)

    def missing_fields(self) -> list[str]:
        return [name for name, value in self.values.items() if not value.strip()]

    def clear(self):
        for name in self.values:
            self.values[name] = ""

    def build_submission(self) -> LeadSubmission:
        return LeadSubmission(
            name=self.values["name"],
            email=self.values["email"],
            phone=self.values.get("phone") or None,
            source=self.page.source,
            interests=list(self.page.interests),
            employment_status=self.values.get("employment_status") or None,
        )

    async def submit(self) -> bool:
        """
        Submit the form.

        Returns:
            True if the lead was accepted, False if it failed or another
            submission was already in flight

        Raises:
            ValueError: If a field is blank
        """
        if self.is_pending:
            logger.debug(f"Ignoring {self.page.key} submit while one is in flight")
            return False

        missing = self.missing_fields()
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        lead = self.build_submission()
        self.is_pending = True
        try:
            accepted = await deliver_lead(
                self.client, self.notifier, lead, self.page.resource, self.page.success_message,
            )
        finally:
            self.is_pending = False

        if accepted:
            self.clear()
        return accepted

    def book_consultation(self):
        """Request a 15-minute consultation; the toast asks the visitor to call."""
        if not self.page.offers_consultation:
            raise ValueError(f"The {self.page.key} page doesn't offer consultations")
        self.notifier.notify(Toast(title=CONSULTATION_TITLE, description=CONSULTATION_MESSAGE))


# =============================================================================
# NEWSLETTER
# =============================================================================

NEWSLETTER_SUCCESS_MESSAGE = "Thank you for subscribing! Check your email for confirmation."
NEWSLETTER_DUPLICATE_MESSAGE = "You're already subscribed to our newsletter!"
NEWSLETTER_ERROR_MESSAGE = "There was an error subscribing. Please try again."


class NewsletterSignup:
    """Weekly tips signup: one email field."""

    def __init__(self, client: LeadsClient, notifier: Optional[Notifier] = None):
        self.client = client
        self.notifier = notifier or ToastLog()
        self.email = ""
        self.is_pending = False

    async def submit(self) -> bool:
        """
        Subscribe the entered address.

        Raises:
            ValueError: If the email field is blank
        """
        if self.is_pending:
            return False
        if not self.email.strip():
            raise ValueError("Missing required fields: email")

        self.is_pending = True
        try:
            await self.client.subscribe_newsletter(self.email)
        except LeadsApiError as e:
            logger.warning(f"Newsletter signup failed for {self.email}: {e}")
            if "already subscribed" in str(e):
                description = NEWSLETTER_DUPLICATE_MESSAGE
            else:
                description = NEWSLETTER_ERROR_MESSAGE
            self.notifier.notify(Toast.error(description))
            return False
        finally:
            self.is_pending = False

        self.notifier.notify(Toast.success(NEWSLETTER_SUCCESS_MESSAGE))
        self.email = ""
        return True
