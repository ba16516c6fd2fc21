"""
Downloadable PDF guides

Each guide is served by the leads API and saved under a fixed filename.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfResource:
    """A PDF guide the site hands out after a lead is captured."""
    key: str
    path: str
    filename: str
    title: str


INSURANCE_GUIDE = PdfResource(
    key="insurance-guide",
    path="/api/pdf/insurance-guide",
    filename="Top-5-Life-Insurance-Strategies.pdf",
    title="Top 5 Life Insurance Strategies",
)

RETIREMENT_CHECKLIST = PdfResource(
    key="retirement-checklist",
    path="/api/pdf/retirement-checklist",
    filename="Retirement-Security-Checklist.pdf",
    title="Retirement Security Checklist",
)

DISTRIBUTOR_KIT = PdfResource(
    key="distributor-kit",
    path="/api/pdf/distributor-kit",
    filename="Distributor-Success-Starter-Kit.pdf",
    title="Distributor Success Starter Kit",
)

PDF_RESOURCES = {r.key: r for r in (INSURANCE_GUIDE, RETIREMENT_CHECKLIST, DISTRIBUTOR_KIT)}


def get_resource(key: str) -> PdfResource:
    """
    Look up a guide by key.

    Raises:
        KeyError: If no guide has that key
    """
    try:
        return PDF_RESOURCES[key]
    except KeyError:
        raise KeyError(f"Unknown PDF resource: {key!r}") from None
