# hardcover/queries.py
"""
GraphQL query construction for the Hardcover API.

Static discovery queries interpolate only validated integers. Anything that
may come from a user (search terms, type names) is bound as a variable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

DISCOVERY_PAGE_SIZE = 100
SEARCH_PAGE_SIZE = 20
LIST_COUNTS_PAGE_SIZE = 200
BOOK_SEARCH_LIMIT = 5


@dataclass(frozen=True)
class GraphQLQuery:
    """Query text plus bound variables and the top-level field it returns"""
    text: str
    variables: Dict[str, Any] = field(default_factory=dict)
    root_field: Optional[str] = None

    def payload(self) -> Dict[str, Any]:
        """POST body for the GraphQL endpoint"""
        return {"query": self.text, "variables": dict(self.variables)}


def like_pattern(term: str) -> str:
    """
    Wrap a search term for a case-insensitive ``_ilike`` partial match.

    LIKE metacharacters inside the term are escaped so they match literally.
    """
    if term is None or not str(term).strip():
        raise ValueError("Search term must not be empty")
    escaped = (
        str(term).strip()
        .replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def discover_lists_query(limit: int = DISCOVERY_PAGE_SIZE) -> GraphQLQuery:
    """All public lists ranked by descending book count"""
    limit = _check_limit(limit)
    text = f"""
    query GetAllLists {{
      lists(limit: {limit}, order_by: {{ list_books_aggregate: {{ count: desc }} }}) {{
        id
        name
        slug
        description
        list_books_aggregate {{
          aggregate {{
            count
          }}
        }}
      }}
    }}
    """
    return GraphQLQuery(text=text, root_field="lists")


def list_counts_query(limit: int = LIST_COUNTS_PAGE_SIZE) -> GraphQLQuery:
    """Name, slug and book count for a page of lists"""
    limit = _check_limit(limit)
    text = f"""
    query ListCounts {{
      lists(limit: {limit}) {{
        name
        slug
        list_books_aggregate {{
          aggregate {{
            count
          }}
        }}
      }}
    }}
    """
    return GraphQLQuery(text=text, root_field="lists")


def popular_lists_query(limit: int = DISCOVERY_PAGE_SIZE) -> GraphQLQuery:
    limit = _check_limit(limit)
    text = f"{{ lists(limit: {limit}) {{ id name slug }} }}"
    return GraphQLQuery(text=text, root_field="lists")


SEARCH_LISTS = """
query SearchLists($pattern: String!, $limit: Int!) {
  lists(
    where: {
      _or: [
        { name: { _ilike: $pattern } }
        { slug: { _ilike: $pattern } }
      ]
    }
    limit: $limit
    order_by: { list_books_aggregate: { count: desc } }
  ) {
    id
    name
    slug
    description
    list_books_aggregate {
      aggregate {
        count
      }
    }
  }
}
"""


def search_lists_query(term: str, limit: int = SEARCH_PAGE_SIZE) -> GraphQLQuery:
    """Lists whose name or slug contains the term"""
    return GraphQLQuery(
        text=SEARCH_LISTS,
        variables={"pattern": like_pattern(term), "limit": _check_limit(limit)},
        root_field="lists",
    )


_BOOK_FIELDS = """
    id
    title
    subtitle
    description
    image {
      url
    }
    contributions {
      author {
        name
      }
    }
"""

SEARCH_BOOKS = (
    "query SearchBooks($query: String!, $limit: Int!) {\n"
    "  books(where: {title: {_ilike: $query}}, limit: $limit) {"
    + _BOOK_FIELDS
    + "  }\n}\n"
)

CONTAINS_BOOKS = (
    "query SearchBooksContains($search: String!, $limit: Int!) {\n"
    "  books(where: {title: {contains: $search}}, limit: $limit) {"
    + _BOOK_FIELDS
    + "  }\n}\n"
)


def search_books_query(term: str, limit: int = BOOK_SEARCH_LIMIT) -> GraphQLQuery:
    """Books whose title matches the term (case-insensitive, partial)"""
    return GraphQLQuery(
        text=SEARCH_BOOKS,
        variables={"query": like_pattern(term), "limit": _check_limit(limit)},
        root_field="books",
    )


def contains_books_query(term: str, limit: int = BOOK_SEARCH_LIMIT) -> GraphQLQuery:
    """Alternative title search using the ``contains`` operator"""
    if term is None or not str(term).strip():
        raise ValueError("Search term must not be empty")
    return GraphQLQuery(
        text=CONTAINS_BOOKS,
        variables={"search": str(term).strip(), "limit": _check_limit(limit)},
        root_field="books",
    )


def simple_books_query(limit: int = BOOK_SEARCH_LIMIT) -> GraphQLQuery:
    limit = _check_limit(limit)
    text = f"""
    query {{
      books(limit: {limit}) {{
        id
        title
        contributions {{
          author {{
            name
          }}
        }}
      }}
    }}
    """
    return GraphQLQuery(text=text, root_field="books")


def me_query() -> GraphQLQuery:
    """Authentication check: the user owning the token"""
    return GraphQLQuery(
        text="query { me { id username email } }",
        root_field="me",
    )


def schema_probe_query() -> GraphQLQuery:
    return GraphQLQuery(
        text="query { __schema { queryType { name } } }",
        root_field="__schema",
    )


TYPE_INTROSPECTION = """
query IntrospectType($name: String!) {
  __type(name: $name) {
    name
    fields {
      name
      type {
        name
        kind
      }
    }
  }
}
"""


def type_introspection_query(type_name: str = "list") -> GraphQLQuery:
    """Fields of a schema type, e.g. ``list``"""
    if not type_name or not str(type_name).strip():
        raise ValueError("type_name must not be empty")
    return GraphQLQuery(
        text=TYPE_INTROSPECTION,
        variables={"name": str(type_name).strip()},
        root_field="__type",
    )
