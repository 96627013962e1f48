# hardcover/graphql_client.py
"""
Single-shot GraphQL client for the Hardcover API.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from .config import HARDCOVER_GRAPHQL_URL, Settings
from .errors import (
    EmptyResult,
    FetchError,
    GraphQLError,
    HttpError,
    ShapeError,
    TransportError,
)
from .models import ListRecord
from .queries import DISCOVERY_PAGE_SIZE, GraphQLQuery, discover_lists_query


@dataclass
class FetchResult:
    """Outcome of a fetch: either ``data`` or ``error`` is set"""
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[FetchError] = None

    def field(self, name: str) -> Any:
        return (self.data or {}).get(name)


class GraphQLClient:
    """
    POSTs queries to the Hardcover GraphQL endpoint.

    No retries: every call is exactly one request. Failures are classified into
    TransportError, HttpError, GraphQLError and ShapeError/EmptyResult.
    """

    def __init__(
        self,
        token: str,
        endpoint: str = HARDCOVER_GRAPHQL_URL,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        # Malformed tokens should fail upstream with a 401, not carry stray whitespace
        self.token = (token or "").strip()
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(
        cls, settings: Settings, session: Optional[requests.Session] = None
    ) -> "GraphQLClient":
        return cls(
            token=settings.hardcover_token,
            endpoint=settings.hardcover_api_url,
            timeout=settings.request_timeout,
            session=session,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        root_field: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Run a query and return its ``data`` object.

        Raises:
            TransportError: network, DNS or timeout failure
            HttpError: non-2xx status
            ShapeError: body is not a JSON object
            GraphQLError: payload carries ``errors``
            EmptyResult: ``data`` or ``root_field`` missing
        """
        body = {"query": query, "variables": variables or {}}

        try:
            response = self.session.post(
                self.endpoint, json=body, headers=self.headers, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code, response.text or "", self.endpoint)

        try:
            payload = response.json()
        except ValueError as e:
            raise ShapeError(f"Invalid JSON response from {self.endpoint}") from e

        if not isinstance(payload, dict):
            raise ShapeError(f"Expected a JSON object, got {type(payload).__name__}")

        if payload.get("errors"):
            raise GraphQLError(payload["errors"])

        data = payload.get("data")
        if not isinstance(data, dict):
            raise EmptyResult("Response has no data object")

        if root_field is not None and data.get(root_field) is None:
            raise EmptyResult(f"Response has no '{root_field}' field")

        return data

    def fetch(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        root_field: Optional[str] = None,
    ) -> FetchResult:
        """Run a query and return a FetchResult instead of raising"""
        try:
            data = self.execute(query, variables, root_field)
        except EmptyResult as e:
            self.logger.warning(f"Empty result: {e}")
            return FetchResult(success=False, error=e)
        except GraphQLError as e:
            self.logger.error(f"GraphQL errors: {e.messages}")
            return FetchResult(success=False, error=e)
        except FetchError as e:
            self.logger.error(f"{e.__class__.__name__}: {e}")
            return FetchResult(success=False, error=e)

        return FetchResult(success=True, data=data)

    def run(self, query: GraphQLQuery) -> FetchResult:
        return self.fetch(query.text, query.variables, query.root_field)

    def fetch_lists(self, limit: int = DISCOVERY_PAGE_SIZE) -> List[ListRecord]:
        """Fetch the discovery page of lists; raises FetchError on failure"""
        query = discover_lists_query(limit)
        data = self.execute(query.text, query.variables, query.root_field)
        records = [ListRecord.from_api(raw) for raw in data["lists"]]
        self.logger.info(f"Fetched {len(records)} lists")
        return records
