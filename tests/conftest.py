"""Shared fixtures: settings with fake credentials and mock HTTP responses."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from hardcover.config import Settings
from hardcover.models import ListRecord


def mock_response(json_data=None, status_code: int = 200, headers=None, text: str = "") -> MagicMock:
    """Build a mock requests.Response-like object."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers or {}
    resp.text = text
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


def make_list(name: str, slug: str = "", description=None, book_count: int = 20, id: int = 1) -> ListRecord:
    return ListRecord(id=id, name=name, slug=slug or name.lower().replace(" ", "-"),
                      description=description, book_count=book_count)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        hardcover_token="test-token",
        hardcover_api_url="https://hardcover.test/v1/graphql",
        api_base_url="http://api.test",
        expected_source="hardcover",
        proxy_prefix="/api/proxy-image",
        request_timeout=5,
        log_level="INFO",
    )


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()
