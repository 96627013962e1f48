# hardcover/__init__.py
"""
Hardcover list discovery, genre classification and single-source verification.

Primary interfaces:
- GraphQLClient: single-shot queries against the Hardcover GraphQL API
- classify / aggregate: keyword genre classification of curated lists
- VerificationHarness: checks a local search API only serves Hardcover data
- run_diagnostics: probe queries against the upstream API
"""

from .config import Settings
from .errors import (
    HardcoverError,
    ConfigError,
    FetchError,
    TransportError,
    HttpError,
    GraphQLError,
    ShapeError,
    EmptyResult,
    InvariantViolation,
)
from .models import (
    Genre,
    ListRecord,
    ClassifiedList,
    GenreReport,
    SearchResult,
    VerificationOutcome,
    VerificationSummary,
)
from .queries import GraphQLQuery
from .graphql_client import GraphQLClient, FetchResult
from .classifier import classify, classify_list, GENRE_RULES
from .reporter import aggregate, render_text, report_to_dataframe, export_report_json
from .discovery import discover, search_genre_lists, list_counts, popular_genre_lists, introspect_type
from .verification import VerificationHarness
from .diagnostics import run_diagnostics

__all__ = [
    "Settings",

    # Errors
    "HardcoverError",
    "ConfigError",
    "FetchError",
    "TransportError",
    "HttpError",
    "GraphQLError",
    "ShapeError",
    "EmptyResult",
    "InvariantViolation",

    # Models
    "Genre",
    "ListRecord",
    "ClassifiedList",
    "GenreReport",
    "SearchResult",
    "VerificationOutcome",
    "VerificationSummary",

    # Discovery
    "GraphQLQuery",
    "GraphQLClient",
    "FetchResult",
    "classify",
    "classify_list",
    "GENRE_RULES",
    "aggregate",
    "render_text",
    "report_to_dataframe",
    "export_report_json",
    "discover",
    "search_genre_lists",
    "list_counts",
    "popular_genre_lists",
    "introspect_type",

    # Verification
    "VerificationHarness",
    "run_diagnostics"
]
