"""
Web Search Handler - Open web searches in a browser.

Engines search their own site:
  google foo bar  → https://www.google.com/search?q=foo+bar

Bang shortcuts route through DuckDuckGo:
  wiki foo bar    → https://www.duckduckgo.com/?q=!w+foo+bar

Base URLs are configurable via settings.toml [engines] section.
"""

from typing import Optional, Sequence

from searchsh.services.browser import BrowserService
from searchsh.utils.helpers import join_query

DUCKDUCKGO_URL = "https://www.duckduckgo.com/?q="

# Default search engine URLs (can be overridden in settings.toml)
DEFAULT_ENGINES = {
    "baidu": {"name": "Baidu", "url": "http://www.baidu.com/s?&wd="},
    "bing": {"name": "Bing", "url": "https://www.bing.com/search?q="},
    "ddg": {"name": "DuckDuckGo", "url": DUCKDUCKGO_URL},
    "google": {"name": "Google", "url": "https://www.google.com/search?q="},
    "yahoo": {"name": "Yahoo!", "url": "https://search.yahoo.com/search?p="},
    "yandex": {"name": "Yandex", "url": "https://yandex.ru/yandsearch?text="},
}

DEFAULT_BANGS = {
    "ducky": {"bang": "!", "summary": "I feel ducky. Go right to the first DuckDuckGo result for this query."},
    "graphemica": {"bang": "!graphemica", "summary": "Search Graphemica, for people who ♥ letters, numbers, punctuation, &c.\n  http://graphemica.com/"},
    "image": {"bang": "!i", "summary": "Search Google Images.\n  https://images.google.com/"},
    "map": {"bang": "!m", "summary": "Search Google Maps.\n  https://maps.google.com/"},
    "news": {"bang": "!n", "summary": "Search Google News.\n  https://news.google.com/"},
    "youtube": {"bang": "!yt", "summary": "Search YouTube.\n  https://www.youtube.com/"},
    "wiki": {"bang": "!w", "summary": "Search Wikipedia.\n  https://en.wikipedia.org/wiki/Main_Page"},
}


def build_search_url(base_url: str, terms: Sequence[str]) -> str:
    """
    Append the +-joined query to a base URL.

    Without terms the URL is cut back to the site itself, e.g.
    https://www.google.com/search?q= → https://www.google.com/
    """
    terms = [t for t in terms if t]
    if not terms:
        return base_url[:base_url.rfind("/") + 1]
    return base_url + join_query(terms)


class WebSearchHandler:
    """Open a search engine query in a browser."""

    def __init__(self, name: str, base_url: str, browser: BrowserService,
                 prefix: Optional[str] = None):
        self.name = name
        self.base_url = base_url
        self.browser = browser
        self.prefix = prefix

    def url_for(self, terms: Sequence[str]) -> str:
        terms = list(terms)
        if self.prefix:
            terms.insert(0, self.prefix)
        return build_search_url(self.base_url, terms)

    def __call__(self, parameters: Sequence[str]) -> int:
        return self.browser.open(self.url_for(parameters))


def engine_description(program: str, name: str, summary: str) -> str:
    return f"""\
Usage:
  {program} {name} [-g|--gui] [<query>]

Options:
  -g --gui  Open in the default GUI browser rather than the terminal.

Description:
  {summary}"""
