"""
Google Scholar search client (HTML scraping via requests).

Result extraction rules:
- Every <div> whose class contains "gs_r" is a candidate block
- Title and URL come from the block's direct child <h3 class="gs_rt"> → <a href>
- Snippet comes from the block's direct child <div class="gs_rs">
- Candidates without title or URL are dropped

Scholar rate-limits scrapers aggressively; a CAPTCHA page parses to zero
results, which callers report as "no online results".
"""

import logging
from html.parser import HTMLParser
from typing import Iterator, List, Optional, Union
from urllib.parse import quote

import requests

from .base import ScholarResult, WebSearchClient

logger = logging.getLogger(__name__)

SCHOLAR_URL = "https://scholar.google.com/scholar"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
MAX_SNIPPET_LENGTH = 200

# Elements that never have a closing tag
_VOID_TAGS = frozenset([
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr'
])


class SearchError(Exception):
    """Fetching or parsing the results page failed"""


class _Node:
    """Minimal element node: tag, attributes, children (nodes and text)"""

    def __init__(self, tag: str, attrs: dict):
        self.tag = tag
        self.attrs = attrs
        self.children: List[Union["_Node", str]] = []

    @property
    def css_class(self) -> str:
        return self.attrs.get('class') or ''

    def elements(self) -> Iterator["_Node"]:
        for child in self.children:
            if isinstance(child, _Node):
                yield child

    def iter(self) -> Iterator["_Node"]:
        """Depth-first walk in document order (self included)"""
        yield self
        for child in self.elements():
            yield from child.iter()

    def text_content(self) -> str:
        parts = []
        for child in self.children:
            parts.append(child.text_content() if isinstance(child, _Node) else child)
        return "".join(parts)

    def find_child(self, tag: str, css_class: Optional[str] = None) -> Optional["_Node"]:
        for child in self.elements():
            if child.tag == tag and (css_class is None or child.css_class == css_class):
                return child
        return None


class _TreeBuilder(HTMLParser):
    """Builds a lenient element tree (unmatched end tags are ignored)"""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = _Node('#document', {})
        self._stack = [self.root]

    def handle_starttag(self, tag, attrs):
        node = _Node(tag, dict(attrs))
        self._stack[-1].children.append(node)
        if tag not in _VOID_TAGS:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        self._stack[-1].children.append(_Node(tag, dict(attrs)))

    def handle_endtag(self, tag):
        for i in range(len(self._stack) - 1, 0, -1):
            if self._stack[i].tag == tag:
                del self._stack[i:]
                break

    def handle_data(self, data):
        self._stack[-1].children.append(data)


def _clean(text: str) -> str:
    return " ".join(text.split())


def parse_results(html_content: str) -> List[ScholarResult]:
    """
    Parse a Scholar results page into ScholarResult records.

    Args:
        html_content: Raw HTML of the results page

    Returns:
        Results in page order
    """
    builder = _TreeBuilder()
    builder.feed(html_content)
    builder.close()

    results = []
    for node in builder.root.iter():
        if node.tag != 'div' or 'gs_r' not in node.css_class:
            continue

        heading = node.find_child('h3', 'gs_rt')
        link = heading.find_child('a') if heading is not None else None
        if link is None:
            continue

        title = _clean(link.text_content())
        url = (link.attrs.get('href') or '').strip()

        snippet = ""
        snippet_node = node.find_child('div', 'gs_rs')
        if snippet_node is not None:
            snippet = _clean(snippet_node.text_content())
            if len(snippet) > MAX_SNIPPET_LENGTH:
                snippet = snippet[:MAX_SNIPPET_LENGTH] + "..."

        if title and url:
            results.append(ScholarResult(title=title, url=url, snippet=snippet))

    return results


class GoogleScholarClient(WebSearchClient):
    """
    Google Scholar search via plain HTTP GET and HTML parsing.

    Uses a browser User-Agent; no API key required.
    """

    def __init__(self, timeout: float = 15.0, session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
            session: Optional requests session (created lazily if None)
        """
        self.timeout = timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": USER_AGENT,
                "Accept-Language": "en-US,en;q=0.9",
            })
        return self._session

    @staticmethod
    def build_url(query: str) -> str:
        return f"{SCHOLAR_URL}?q={quote(query, safe='')}"

    def fetch_html(self, url: str) -> str:
        """
        Fetch raw HTML (redirects followed).

        Raises:
            SearchError: On network failure or non-2xx status
        """
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SearchError(f"Failed to fetch URL {url}: {e}") from e
        return response.text

    def search(self, query: str) -> List[ScholarResult]:
        url = self.build_url(query)
        logger.info(f"Fetching results from Google Scholar: {url}")

        try:
            html_content = self.fetch_html(url)
        except SearchError as e:
            logger.error(f"{e} (check network or User-Agent)")
            return []

        if not html_content:
            logger.error("Empty response from Google Scholar")
            return []

        # First 500 chars are enough to spot a CAPTCHA / block page
        logger.debug(f"HTML received (first 500 chars): {html_content[:500]}")

        logger.debug("Parsing HTML to extract search results...")
        results = parse_results(html_content)
        logger.info(f"Google Scholar returned {len(results)} results")
        return results

    def get_client_info(self) -> dict:
        return {
            "name": "google_scholar",
            "type": "html_scraper",
            "endpoint": SCHOLAR_URL,
            "timeout": self.timeout,
        }

    def close(self):
        if self._session is not None:
            self._session.close()
            self._session = None
