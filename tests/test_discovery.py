"""Tests for hardcover.discovery: discovery workflows over a mocked client."""

from __future__ import annotations

import pytest

from hardcover.discovery import (
    discover,
    introspect_type,
    list_counts,
    popular_genre_lists,
    search_genre_lists,
)
from hardcover.errors import GraphQLError
from hardcover.graphql_client import GraphQLClient
from hardcover.models import Genre

from .conftest import mock_response


def _raw(id, name, slug, count, description=None):
    return {"id": id, "name": name, "slug": slug, "description": description,
            "list_books_aggregate": {"aggregate": {"count": count}}}


def _client(session):
    return GraphQLClient(token="t", endpoint="https://hardcover.test/graphql", session=session)


class TestDiscover:
    def test_builds_report(self, session):
        session.post.return_value = mock_response({"data": {"lists": [
            _raw(1, "Best Romantasy Books", "romantasy-2024", 50),
            _raw(2, "Cozy Mysteries", "cozy-reads", 5),
            _raw(3, "Nothing", "nothing", 0),
        ]}})
        report = discover(_client(session))
        assert report.genre_of("romantasy-2024") is Genre.ROMANTASY
        assert report.genre_of("cozy-reads") is Genre.COZY
        assert report.empty_dropped == 1

    def test_fetch_error_propagates(self, session):
        session.post.return_value = mock_response({"errors": [{"message": "field not found"}]})
        with pytest.raises(GraphQLError):
            discover(_client(session))


class TestSearchGenreLists:
    def test_each_term_searched_with_bound_variable(self, session):
        session.post.side_effect = [
            mock_response({"data": {"lists": [_raw(1, "Fantasy", "fantasy", 9)]}}),
            mock_response({"errors": [{"message": "boom"}]}),
        ]
        results = search_genre_lists(_client(session), terms=["fantasy", "cozy"])

        assert [r.slug for r in results["fantasy"]] == ["fantasy"]
        assert results["cozy"] == []
        first_body = session.post.call_args_list[0].kwargs["json"]
        assert first_body["variables"] == {"pattern": "%fantasy%", "limit": 20}


class TestOtherWorkflows:
    def test_list_counts_sorted(self, session):
        session.post.return_value = mock_response({"data": {"lists": [
            _raw(None, "Small", "small", 3), _raw(None, "Empty", "empty", 0), _raw(None, "Big", "big", 90),
        ]}})
        assert [r.slug for r in list_counts(_client(session))] == ["big", "small"]

    def test_popular_genre_lists_filters(self, session):
        session.post.return_value = mock_response({"data": {"lists": [
            {"id": 1, "name": "Space Opera", "slug": "space-opera"},
            {"id": 2, "name": "Biographies", "slug": "bios"},
        ]}})
        assert [r.id for r in popular_genre_lists(_client(session))] == [1]

    def test_introspect_type(self, session):
        schema = {"name": "lists", "fields": [{"name": "slug", "type": {"name": "String", "kind": "SCALAR"}}]}
        session.post.return_value = mock_response({"data": {"__type": schema}})
        assert introspect_type(_client(session)) == schema

    def test_introspect_type_failure_returns_none(self, session):
        session.post.return_value = mock_response({"data": {"__type": None}})
        assert introspect_type(_client(session), "nope") is None
