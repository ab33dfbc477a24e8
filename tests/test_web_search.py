"""
Tests for the WebSearchHandler and BrowserService.

Tests URL construction, bang prefixes and the choice of opener.
"""

import pytest

from searchsh.commands.handlers.web_search import (
    DEFAULT_BANGS,
    DEFAULT_ENGINES,
    DUCKDUCKGO_URL,
    WebSearchHandler,
    build_search_url,
)
from searchsh.errors import ToolNotInstalled, UnsupportedPlatform
from searchsh.services.browser import BrowserService, platform_opener
from searchsh.utils.helpers import join_query


class TestUrlConstruction:
    """Test query joining and URL building."""

    def test_join_query_with_plus(self):
        assert join_query(["foo", "bar"]) == "foo+bar"

    def test_terms_appended_to_base(self):
        url = build_search_url(DEFAULT_ENGINES["google"]["url"], ["foo", "bar"])
        assert url == "https://www.google.com/search?q=foo+bar"

    def test_no_terms_opens_site(self):
        assert build_search_url("https://www.google.com/search?q=", []) == "https://www.google.com/"
        assert build_search_url(DUCKDUCKGO_URL, []) == "https://www.duckduckgo.com/"

    def test_terms_not_percent_encoded(self):
        url = build_search_url(DUCKDUCKGO_URL, ["c++", "a&b"])
        assert url == DUCKDUCKGO_URL + "c+++a&b"

    def test_bang_prefix_is_first_term(self):
        handler = WebSearchHandler("wiki", DUCKDUCKGO_URL, BrowserService(), prefix="!w")
        assert handler.url_for(["python", "language"]) == DUCKDUCKGO_URL + "!w+python+language"

    def test_bang_kept_without_terms(self):
        handler = WebSearchHandler("wiki", DUCKDUCKGO_URL, BrowserService(), prefix="!w")
        assert handler.url_for([]) == DUCKDUCKGO_URL + "!w"

    def test_plain_engine_without_terms_opens_site(self):
        handler = WebSearchHandler("google", DEFAULT_ENGINES["google"]["url"], BrowserService())
        assert handler.url_for([]) == "https://www.google.com/"

    def test_all_bangs_route_through_duckduckgo(self):
        for bang in DEFAULT_BANGS.values():
            assert bang["bang"].startswith("!")


class TestBrowserService:
    """Test opener selection."""

    def test_terminal_browser_preferred(self, installed, runs):
        installed.add("w3m")
        BrowserService(platform="linux").open("https://example.com/")
        assert runs[0]["argv"] == ["w3m", "https://example.com/"]
        assert "stdout" not in runs[0]["kwargs"]

    def test_gui_forced(self, installed, runs):
        installed.add("w3m")
        installed.add("xdg-open")
        BrowserService(force_gui=True, platform="linux").open("https://example.com/")
        assert runs[0]["argv"] == ["xdg-open", "https://example.com/"]
        assert runs[0]["kwargs"].get("stdout") is not None

    def test_falls_back_when_terminal_browser_missing(self, installed, runs):
        installed.add("open")
        BrowserService(platform="darwin").open("https://example.com/")
        assert runs[0]["argv"][0] == "open"

    def test_terminal_browser_disabled(self, installed):
        installed.add("w3m")
        installed.add("cygstart")
        assert BrowserService(terminal_browser="", platform="cygwin").open_command() == "cygstart"

    def test_missing_gui_opener(self, installed, runs):
        with pytest.raises(ToolNotInstalled) as exc_info:
            BrowserService(platform="linux").open("https://example.com/")
        assert "`xdg-open` is not installed." in str(exc_info.value)
        assert runs == []

    @pytest.mark.parametrize("platform,opener", [
        ("darwin", "open"),
        ("cygwin", "cygstart"),
        ("linux", "xdg-open"),
    ])
    def test_platform_openers(self, platform, opener):
        assert platform_opener(platform) == opener

    def test_unsupported_platform(self, installed):
        with pytest.raises(UnsupportedPlatform) as exc_info:
            BrowserService(platform="win32").open_command()
        assert "win32" in str(exc_info.value)


class TestWebSearchHandler:
    """Test the handler end to end with a fake opener."""

    def test_opens_joined_url(self, installed, runs):
        installed.add("w3m")
        handler = WebSearchHandler("bing", DEFAULT_ENGINES["bing"]["url"], BrowserService())
        assert handler(["foo", "bar"]) == 0
        assert runs[0]["argv"] == ["w3m", "https://www.bing.com/search?q=foo+bar"]
