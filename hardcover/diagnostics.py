# hardcover/diagnostics.py
"""
Upstream diagnostics: a fixed sequence of probe queries against Hardcover.

Used to tell token problems, schema changes and search-operator issues apart.
"""

import logging
from typing import Any, Dict, List, Tuple

from .errors import GraphQLError
from .graphql_client import GraphQLClient
from .models import VerificationOutcome, VerificationSummary
from .queries import (
    GraphQLQuery,
    contains_books_query,
    me_query,
    schema_probe_query,
    search_books_query,
    simple_books_query,
)
from .verification import CheckResult, print_outcome, print_summary, run_guarded

logger = logging.getLogger(__name__)

PROBE_SEARCH_TERM = "fantasy"


def diagnostic_probes() -> List[Tuple[str, GraphQLQuery]]:
    """Probe name and query, in the order they run"""
    return [
        ("authentication", me_query()),
        ("introspection", schema_probe_query()),
        ("simple_books", simple_books_query()),
        ("search_ilike", search_books_query(PROBE_SEARCH_TERM)),
        ("search_contains", contains_books_query(PROBE_SEARCH_TERM)),
    ]


def describe_data(data: Dict[str, Any]) -> List[str]:
    lines = [f"Data keys: {', '.join(data)}"]

    books = data.get("books")
    if isinstance(books, list):
        lines.append(f"Found {len(books)} books")
        if books:
            lines.append(f"First book: {books[0].get('title')}")

    me = data.get("me")
    if isinstance(me, list):
        me = me[0] if me else None
    if isinstance(me, dict):
        lines.append(f"User: {me.get('username') or me.get('id')}")

    schema = data.get("__schema")
    if isinstance(schema, dict):
        lines.append(f"Query type: {(schema.get('queryType') or {}).get('name')}")

    return lines


def _probe(client: GraphQLClient, name: str, query: GraphQLQuery) -> CheckResult:
    try:
        data = client.execute(query.text, query.variables, query.root_field)
    except GraphQLError as e:
        detail = "\n".join(f"{i}. {message}" for i, message in enumerate(e.messages, 1))
        logger.error(f"[{name}] GraphQL errors: {e.messages}")
        return VerificationOutcome(name, passed=False, detail=f"GraphQL errors:\n{detail}"), None

    return VerificationOutcome(name, passed=True, detail="\n".join(describe_data(data))), data


def run_diagnostics(client: GraphQLClient) -> VerificationSummary:
    """Run every probe in order; a failing probe does not stop the rest"""
    summary = VerificationSummary()

    for name, query in diagnostic_probes():
        print(f"\n--- {name} ---")
        outcome, _ = run_guarded(name, lambda: _probe(client, name, query), logger)
        summary.add(outcome)
        print_outcome(outcome)

    print_summary(summary, title="DIAGNOSTIC SUMMARY")
    return summary
