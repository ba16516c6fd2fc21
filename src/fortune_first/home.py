"""
Home page

Wires the home page sections to one router, one notifier and one leads
client. Each section still owns its own state.
"""

from typing import Optional

from .forms import NewsletterSignup
from .hero import HeroSection
from .leads.base import LeadsClient
from .navigation import Navigation
from .notifications import Notifier, ToastLog
from .quiz.wizard import InteractiveQuiz
from .routes import Router


class HomePage:
    """Navigation, hero, quiz and newsletter, top to bottom."""

    def __init__(
        self,
        client: LeadsClient,
        router: Optional[Router] = None,
        notifier: Optional[Notifier] = None,
        advance_delay: Optional[float] = None,
    ):
        self.router = router or Router()
        self.notifier = notifier or ToastLog()
        self.client = client

        self.navigation = Navigation(self.router)
        self.hero = HeroSection(self.router)
        self.quiz = InteractiveQuiz(client, self.notifier, advance_delay=advance_delay)
        self.newsletter = NewsletterSignup(client, self.notifier)

    @property
    def sections(self) -> tuple:
        return (self.navigation, self.hero, self.quiz, self.newsletter)
