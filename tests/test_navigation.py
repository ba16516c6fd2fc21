"""
Tests for the router, navigation bar, hero banner and home page.
"""

import pytest

from fortune_first.routes import Router, resolve_page, STORY_VIDEO_URL, NOT_FOUND
from fortune_first.navigation import Navigation, NAV_LINKS, BRAND
from fortune_first.hero import HeroSection
from fortune_first.home import HomePage
from fortune_first.leads import MockLeadsClient
from fortune_first.quiz import QuestionStep


@pytest.fixture
def router():
    opened = []
    return Router(opener=opened.append)


class TestRouter:
    """Tests for Router."""

    def test_set_location(self, router):
        """Test navigation records history."""
        router.set_location("/insurance")

        assert router.location == "/insurance"
        assert router.page == "insurance"
        assert router.history == ["/"]

    def test_same_location_is_noop(self, router):
        """Test navigating to the current path adds no history."""
        router.set_location("/")

        assert router.history == []

    def test_back(self, router):
        """Test going back."""
        router.set_location("/retirement")

        assert router.back() == "/"
        assert router.back() == "/"

    def test_open_external(self):
        """Test external links go through the opener."""
        opened = []
        router = Router(opener=opened.append)
        router.open_external("https://example.com")

        assert opened == ["https://example.com"]
        assert router.location == "/"

    @pytest.mark.parametrize("path,page", [
        ("/", "home"),
        ("/insurance/", "insurance"),
        ("/retirement?ref=hero", "retirement"),
        ("/recruiting#apply", "recruiting"),
        ("/pricing", NOT_FOUND),
    ])
    def test_resolve_page(self, path, page):
        """Test path to page mapping."""
        assert resolve_page(path) == page


class TestNavigation:
    """Tests for Navigation."""

    def test_links(self, router):
        """Test the bar's links."""
        nav = Navigation(router)

        assert BRAND == "Fortune First"
        assert [link.href for link in nav.desktop_links] == ["/", "/insurance", "/retirement", "/recruiting"]

    def test_toggle_twice_closes(self, router):
        """Test the mobile menu toggles back to closed."""
        nav = Navigation(router)

        assert nav.toggle_mobile_menu() is True
        assert nav.mobile_links == NAV_LINKS
        assert nav.toggle_mobile_menu() is False
        assert nav.mobile_links == ()

    def test_get_started(self, router):
        """Test the call to action goes to the insurance page."""
        Navigation(router).get_started()

        assert router.location == "/insurance"

    def test_follow(self, router):
        """Test following a link."""
        nav = Navigation(router)
        nav.follow(NAV_LINKS[3])

        assert router.page == "recruiting"


class TestHeroSection:
    """Tests for HeroSection."""

    def test_legacy_plan(self, router):
        """Test the primary action goes to retirement."""
        HeroSection(router).get_legacy_plan()

        assert router.location == "/retirement"

    def test_watch_story(self):
        """Test the video opens externally without navigating."""
        opened = []
        router = Router(opener=opened.append)
        HeroSection(router).watch_story()

        assert opened == [STORY_VIDEO_URL]
        assert router.opened_urls == [STORY_VIDEO_URL]
        assert router.location == "/"


class TestHomePage:
    """Tests for HomePage."""

    def test_sections_share_router(self, router):
        """Test sections are wired to one router and client."""
        client = MockLeadsClient()
        page = HomePage(client, router=router, advance_delay=0)

        assert page.navigation.router is router
        assert page.hero.router is router
        assert page.quiz.client is client
        assert page.newsletter.client is client
        assert page.quiz.step == QuestionStep(0)
        assert len(page.sections) == 4

    def test_hero_and_nav_navigate(self, router):
        """Test actions from different sections move the same router."""
        page = HomePage(MockLeadsClient(), router=router)
        page.hero.get_legacy_plan()
        page.navigation.get_started()

        assert router.history == ["/", "/retirement"]
        assert router.location == "/insurance"
