"""
Hero banner at the top of the home page.
"""

from .routes import Router, RETIREMENT, STORY_VIDEO_URL


HEADLINE = "Protect Your Family. Build Your Legacy."
SUBHEADLINE = "Personalized insurance & wealth solutions for today and tomorrow."

LEGACY_PLAN_LABEL = "Get My Free Legacy Plan"
WATCH_STORY_LABEL = "Watch Our Story"


class HeroSection:
    """Stateless banner with two calls to action."""

    def __init__(self, router: Router):
        self.router = router

    def get_legacy_plan(self):
        """Send the visitor to the retirement page."""
        self.router.set_location(RETIREMENT)

    def watch_story(self):
        """Open the company video in a new tab."""
        self.router.open_external(STORY_VIDEO_URL)
