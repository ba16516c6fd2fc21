"""
Site navigation bar

Brand link, page links, a "Get Started" call to action, and a collapsible
menu for small screens.
"""

from dataclasses import dataclass

from .routes import Router, HOME, INSURANCE, RETIREMENT, RECRUITING


BRAND = "Fortune First"


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


NAV_LINKS = (
    NavLink("Home", HOME),
    NavLink("Insurance", INSURANCE),
    NavLink("Retirement", RETIREMENT),
    NavLink("Opportunities", RECRUITING),
)

GET_STARTED_TARGET = INSURANCE


class Navigation:
    """Navigation bar. The only state is whether the mobile menu is open."""

    def __init__(self, router: Router):
        self.router = router
        self.is_mobile_menu_open = False

    def toggle_mobile_menu(self) -> bool:
        """Open the mobile menu if closed, close it if open."""
        self.is_mobile_menu_open = not self.is_mobile_menu_open
        return self.is_mobile_menu_open

    @property
    def desktop_links(self) -> tuple[NavLink, ...]:
        return NAV_LINKS

    @property
    def mobile_links(self) -> tuple[NavLink, ...]:
        """Links in the mobile menu; empty while it is collapsed."""
        return NAV_LINKS if self.is_mobile_menu_open else ()

    def follow(self, link: NavLink):
        self.router.set_location(link.href)

    def get_started(self):
        self.router.set_location(GET_STARTED_TARGET)
