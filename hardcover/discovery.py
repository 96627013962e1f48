# hardcover/discovery.py
"""
List discovery workflows on top of the GraphQL client.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .graphql_client import GraphQLClient
from .models import GenreReport, ListRecord
from .queries import (
    DISCOVERY_PAGE_SIZE,
    LIST_COUNTS_PAGE_SIZE,
    SEARCH_PAGE_SIZE,
    list_counts_query,
    popular_lists_query,
    search_lists_query,
    type_introspection_query,
)
from .reporter import GENRE_KEYWORDS, aggregate, filter_by_keywords, nonempty_by_count

logger = logging.getLogger(__name__)

GENRE_SEARCH_TERMS = [
    "fantasy", "romantasy", "sci-fi", "science fiction", "cozy", "romance", "dystopian",
]


def discover(client: GraphQLClient, limit: int = DISCOVERY_PAGE_SIZE) -> GenreReport:
    """
    Fetch the most populated lists and classify them by genre.

    A fetch failure propagates as FetchError so no partial report is built.
    """
    records = client.fetch_lists(limit)
    report = aggregate(records)
    logger.info(
        f"Classified {report.classified_count}/{report.total_input} lists "
        f"into {len(report)} genres"
    )
    return report


def search_genre_lists(
    client: GraphQLClient,
    terms: Sequence[str] = GENRE_SEARCH_TERMS,
    limit: int = SEARCH_PAGE_SIZE,
) -> Dict[str, List[ListRecord]]:
    """Search list names and slugs for each term; failed terms map to []"""
    results: Dict[str, List[ListRecord]] = {}

    for term in terms:
        result = client.run(search_lists_query(term, limit))
        if not result.success:
            logger.warning(f"List search for '{term}' failed: {result.error}")
            results[term] = []
            continue
        results[term] = [ListRecord.from_api(raw) for raw in result.field("lists")]

    return results


def list_counts(client: GraphQLClient, limit: int = LIST_COUNTS_PAGE_SIZE) -> List[ListRecord]:
    """Lists with at least one book, sorted by descending book count"""
    query = list_counts_query(limit)
    data = client.execute(query.text, query.variables, query.root_field)
    return nonempty_by_count(ListRecord.from_api(raw) for raw in data["lists"])


def popular_genre_lists(
    client: GraphQLClient,
    keywords: Sequence[str] = GENRE_KEYWORDS,
    limit: int = DISCOVERY_PAGE_SIZE,
) -> List[ListRecord]:
    query = popular_lists_query(limit)
    data = client.execute(query.text, query.variables, query.root_field)
    records = [ListRecord.from_api(raw) for raw in data["lists"]]
    logger.info(f"Fetched {len(records)} popular lists")
    return filter_by_keywords(records, keywords)


def introspect_type(client: GraphQLClient, type_name: str = "list") -> Optional[Dict[str, Any]]:
    """Schema description of a type, or None if the upstream call fails"""
    result = client.run(type_introspection_query(type_name))
    if not result.success:
        logger.error(f"Introspection of '{type_name}' failed: {result.error}")
        return None
    return result.field("__type")
