"""
fortune-first: lead capture for the Fortune First insurance & wealth site.

Navigation, hero banner, a coverage-fit quiz that turns visitors into leads,
and the landing-page and newsletter forms that share its submission flow.
"""

__version__ = "0.1.0"

from .config import config
from .routes import Router
from .navigation import Navigation, NavLink, NAV_LINKS
from .hero import HeroSection
from .notifications import Toast, Notifier, ToastLog, ConsoleNotifier
from .quiz import InteractiveQuiz, QuestionStep, CaptureStep, COVERAGE_QUIZ
from .forms import LandingLeadForm, NewsletterSignup, LANDING_PAGES
from .leads import (
    LeadsClient,
    LeadSubmission,
    LeadsApiError,
    HttpLeadsClient,
    MockLeadsClient,
    get_client,
)
from .home import HomePage

__all__ = [
    # Config
    "config",
    # Navigation
    "Router",
    "Navigation",
    "NavLink",
    "NAV_LINKS",
    "HeroSection",
    # Notifications
    "Toast",
    "Notifier",
    "ToastLog",
    "ConsoleNotifier",
    # Quiz
    "InteractiveQuiz",
    "QuestionStep",
    "CaptureStep",
    "COVERAGE_QUIZ",
    # Forms
    "LandingLeadForm",
    "NewsletterSignup",
    "LANDING_PAGES",
    # Leads API
    "LeadsClient",
    "LeadSubmission",
    "LeadsApiError",
    "HttpLeadsClient",
    "MockLeadsClient",
    "get_client",
    # Pages
    "HomePage",
]
