"""
Site routes and the router that records navigation requests

Components never render pages themselves; they ask the router to go
somewhere and the host decides what that means.
"""

import logging
import webbrowser
from dataclasses import dataclass, field
from typing import Callable


logger = logging.getLogger(__name__)


HOME = "/"
INSURANCE = "/insurance"
RETIREMENT = "/retirement"
RECRUITING = "/recruiting"

PAGES = {
    HOME: "home",
    INSURANCE: "insurance",
    RETIREMENT: "retirement",
    RECRUITING: "recruiting",
}

NOT_FOUND = "not-found"

STORY_VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@dataclass
class Router:
    """
    Client-side router.

    Keeps the current location and the locations visited before it. External
    links go through ``opener`` (a new browser tab by default).
    """
    location: str = HOME
    history: list[str] = field(default_factory=list)
    opener: Callable[[str], object] = webbrowser.open_new_tab
    opened_urls: list[str] = field(default_factory=list)

    @property
    def page(self) -> str:
        """Name of the page at the current location."""
        return resolve_page(self.location)

    def set_location(self, path: str):
        """Navigate to an internal path."""
        if path == self.location:
            return
        logger.debug(f"Navigating {self.location} -> {path}")
        self.history.append(self.location)
        self.location = path

    def back(self) -> str:
        """Return to the previous location, if there is one."""
        if self.history:
            self.location = self.history.pop()
        return self.location

    def open_external(self, url: str):
        """Open a URL outside the site in a new browsing context."""
        logger.debug(f"Opening external link {url}")
        self.opened_urls.append(url)
        self.opener(url)


def resolve_page(path: str) -> str:
    """Map a path to a page name, ignoring query strings and trailing slashes."""
    path = path.split("?", 1)[0].split("#", 1)[0]
    if len(path) > 1:
        path = path.rstrip("/")
    return PAGES.get(path, NOT_FOUND)
