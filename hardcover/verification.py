# hardcover/verification.py
"""
Verification harness for the local book-search API.

Checks that search results, cover images and the bulk genre listing are
sourced exclusively from Hardcover. Checks run in a fixed order and a failing
check never stops the ones after it.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urljoin, urlparse

import requests

from .config import Settings
from .errors import HardcoverError, HttpError, InvariantViolation, ShapeError, TransportError
from .graphql_client import GraphQLClient
from .models import SearchResult, VerificationOutcome, VerificationSummary
from .queries import search_books_query

DEFAULT_SEARCH_TERM = "Dan Brown"

CHECK_SEARCH = "search"
CHECK_PROXY = "image_proxy"
CHECK_UPSTREAM = "direct_upstream"
CHECK_SINGLE_SOURCE = "single_source"

CheckResult = Tuple[VerificationOutcome, Any]


def run_guarded(name: str, check: Callable[[], CheckResult], logger: logging.Logger) -> CheckResult:
    """
    Run one check, turning any failure into a failed outcome.

    Returns:
        (outcome, value) from the check, or (failed outcome, None)
    """
    try:
        return check()
    except InvariantViolation as e:
        logger.error(f"[{name}] invariant violated: {e}")
        return VerificationOutcome(name, passed=False, detail=str(e)), None
    except HardcoverError as e:
        logger.error(f"[{name}] {e.__class__.__name__}: {e}")
        return VerificationOutcome(name, passed=False, detail=f"{e.__class__.__name__}: {e}"), None
    except Exception as e:
        logger.exception(f"[{name}] unexpected error")
        return VerificationOutcome(name, passed=False, detail=f"Unexpected error: {e}"), None


def print_outcome(outcome: VerificationOutcome) -> None:
    marker = {"PASSED": "✅", "FAILED": "❌", "SKIPPED": "⚠️ "}[outcome.status]
    print(f"{marker} [{outcome.status}] {outcome.check_name}")
    for line in outcome.detail.splitlines():
        print(f"     {line}")


def print_summary(summary: VerificationSummary, title: str = "VERIFICATION SUMMARY") -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    for outcome in summary.outcomes:
        print(f"  {outcome.status:<8} {outcome.check_name}")
    print(f"\n  {summary.passed} passed, {summary.failed} failed, {summary.skipped} skipped")


class VerificationHarness:
    """Drives a running search/proxy API and checks it against Hardcover"""

    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
        client: Optional[GraphQLClient] = None,
    ):
        self.settings = settings
        self.base_url = settings.api_base_url.rstrip("/")
        self.expected_source = settings.expected_source
        self.proxy_prefix = settings.proxy_prefix
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()
        self.client = client or GraphQLClient.from_settings(settings, session=self.session)
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, term: str = DEFAULT_SEARCH_TERM) -> VerificationSummary:
        """Run all checks in order and print a summary; never raises"""
        summary = VerificationSummary()

        print(f"🚀 Starting verification against {self.base_url}\n")

        print("=== Search ===")
        outcome, cover = run_guarded(CHECK_SEARCH, lambda: self.check_search(term), self.logger)
        self._record(summary, outcome)

        print("\n=== Image Proxy ===")
        outcome, _ = run_guarded(CHECK_PROXY, lambda: self.check_proxy(cover), self.logger)
        self._record(summary, outcome)

        print("\n=== Direct Hardcover GraphQL ===")
        outcome, _ = run_guarded(CHECK_UPSTREAM, lambda: self.check_upstream(term), self.logger)
        self._record(summary, outcome)

        print("\n=== Single Source ===")
        outcome, _ = run_guarded(CHECK_SINGLE_SOURCE, self.check_single_source, self.logger)
        self._record(summary, outcome)

        print_summary(summary)
        return summary

    def _record(self, summary: VerificationSummary, outcome: VerificationOutcome) -> None:
        summary.add(outcome)
        print_outcome(outcome)

    # -- HTTP helpers --------------------------------------------------------

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        try:
            return self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        response = self._get(url, params)
        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code, response.text or "", url)
        try:
            return response.json()
        except ValueError as e:
            raise ShapeError(f"Invalid JSON response from {url}") from e

    def is_proxied(self, cover: str) -> bool:
        """True if the cover URL routes through the internal image proxy"""
        parsed = urlparse(cover)
        # Absolute and scheme-relative covers must point at the API under test
        if parsed.netloc and parsed.netloc != urlparse(self.base_url).netloc:
            return False
        return parsed.path.startswith(self.proxy_prefix)

    def _absolute(self, url: str) -> str:
        if urlparse(url).netloc:
            return urljoin(self.base_url + "/", url)
        if not url.startswith("/"):
            url = "/" + url
        return f"{self.base_url}{url}"

    # -- Checks --------------------------------------------------------------

    def check_search(self, term: str) -> CheckResult:
        """Search endpoint returns Hardcover results with proxied covers"""
        payload = self._get_json("/api/search", params={"q": term})

        if not isinstance(payload, list):
            raise InvariantViolation(
                f"Search response is not a JSON array (got {type(payload).__name__})"
            )

        if not payload:
            self.logger.warning(f"No search results for '{term}'")
            return VerificationOutcome(
                CHECK_SEARCH, passed=True, detail=f"0 results for '{term}'"
            ), None

        if not isinstance(payload[0], dict):
            raise InvariantViolation("First search result is not a JSON object")

        first = SearchResult.from_api(payload[0])
        if first.source != self.expected_source:
            raise InvariantViolation(
                f'First result "{first.title}" has source {first.source!r}, '
                f"expected {self.expected_source!r}"
            )

        lines = [
            f"{len(payload)} results for '{term}'",
            f'First: "{first.title}" by {first.author} (source: {first.source})',
        ]

        if not first.cover:
            self.logger.warning(f'First result "{first.title}" has no cover')
            lines.append("No cover on first result")
            return VerificationOutcome(CHECK_SEARCH, passed=True, detail="\n".join(lines)), None

        if not self.is_proxied(first.cover):
            raise InvariantViolation(
                f"Cover does not use {self.proxy_prefix}: {first.cover}"
            )

        lines.append(f"Cover uses proxy: {first.cover}")
        return VerificationOutcome(CHECK_SEARCH, passed=True, detail="\n".join(lines)), first.cover

    def check_proxy(self, cover: Optional[str]) -> CheckResult:
        """Image proxy serves an image for the cover found by the search check"""
        if not cover:
            self.logger.warning("No proxy URL available for testing")
            return VerificationOutcome(
                CHECK_PROXY, passed=False, skipped=True,
                detail="no input: search check produced no proxied cover",
            ), None

        url = self._absolute(cover)
        response = self._get(url)

        if not 200 <= response.status_code < 300:
            raise InvariantViolation(f"Image proxy returned HTTP {response.status_code} for {url}")

        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith("image/"):
            raise InvariantViolation(
                f"Image proxy returned Content-Type {content_type!r}, expected image/*"
            )

        return VerificationOutcome(
            CHECK_PROXY, passed=True,
            detail=f"HTTP {response.status_code}, Content-Type: {content_type}",
        ), None

    def check_upstream(self, term: str) -> CheckResult:
        """Hardcover itself answers the same search, bypassing the local API"""
        query = search_books_query(term)
        data = self.client.execute(query.text, query.variables, query.root_field)
        books = data["books"]

        lines = [f"Direct GraphQL returned {len(books)} results"]
        for index, book in enumerate(books, 1):
            lines.append(f'{index}. "{book.get("title")}" by {_first_author(book)}')

        if not books:
            self.logger.warning(f"Hardcover returned no books for '{term}'")

        return VerificationOutcome(CHECK_UPSTREAM, passed=True, detail="\n".join(lines)), books

    def check_single_source(self) -> CheckResult:
        """Every book in the bulk genre listing comes from the expected source"""
        data = self._get_json("/api/books/all")

        if not isinstance(data, dict):
            raise InvariantViolation(
                f"Bulk listing is not a JSON object (got {type(data).__name__})"
            )

        categories = {key: value for key, value in data.items() if isinstance(value, list)}
        self.logger.info(f"Total books reported: {data.get('totalBooks', 0)}")
        for name, books in categories.items():
            self.logger.info(f"  {name}: {len(books)} books")

        all_books: List[Any] = [book for books in categories.values() for book in books]
        offending = [
            book for book in all_books
            if not isinstance(book, dict) or book.get("source") != self.expected_source
        ]

        if offending:
            pairs = [_title_source(book) for book in offending]
            raise InvariantViolation(
                f"Found {len(offending)} non-{self.expected_source} books: " + ", ".join(pairs)
            )

        return VerificationOutcome(
            CHECK_SINGLE_SOURCE, passed=True,
            detail=(
                f"All {len(all_books)} books across {len(categories)} categories "
                f"are {self.expected_source}-only"
            ),
        ), None


def _first_author(book: Dict[str, Any]) -> str:
    contributions = book.get("contributions") or []
    if contributions:
        author = (contributions[0] or {}).get("author") or {}
        if author.get("name"):
            return author["name"]
    return "Unknown"


def _title_source(book: Any) -> str:
    if not isinstance(book, dict):
        return f"{book!r} (no source)"
    return f"{book.get('title')} ({book.get('source')})"
