"""Tests for hardcover.diagnostics: upstream probe sequence."""

from __future__ import annotations

import requests

from hardcover.diagnostics import describe_data, diagnostic_probes, run_diagnostics
from hardcover.graphql_client import GraphQLClient

from .conftest import mock_response


def _client(session):
    return GraphQLClient(token="t", endpoint="https://hardcover.test/graphql", session=session)


class TestProbes:
    def test_probe_order(self):
        assert [name for name, _ in diagnostic_probes()] == [
            "authentication", "introspection", "simple_books", "search_ilike", "search_contains",
        ]

    def test_describe_books_and_user(self):
        lines = describe_data({"books": [{"title": "Dune"}], "me": [{"id": 1, "username": "reader"}]})
        assert "Found 1 books" in lines
        assert "First book: Dune" in lines
        assert "User: reader" in lines

    def test_describe_schema(self):
        assert "Query type: query_root" in describe_data({"__schema": {"queryType": {"name": "query_root"}}})


class TestRunDiagnostics:
    def test_every_probe_runs_despite_failures(self, session, capsys):
        session.post.side_effect = [
            mock_response({"data": {"me": [{"id": 1, "username": "reader"}]}}),
            mock_response({"data": {"__schema": {"queryType": {"name": "query_root"}}}}),
            requests.exceptions.ConnectionError("reset"),
            mock_response({"data": {"books": [{"title": "Fantasy Lover"}]}}),
            mock_response({"errors": [{"message": "field 'contains' not found in type: 'String_comparison_exp'"}]}),
        ]

        summary = run_diagnostics(_client(session))

        assert session.post.call_count == 5
        assert [o.passed for o in summary.outcomes] == [True, True, False, True, False]
        assert "TransportError" in summary.outcome("simple_books").detail
        assert "1. field 'contains' not found" in summary.outcome("search_contains").detail
        assert "DIAGNOSTIC SUMMARY" in capsys.readouterr().out

    def test_unauthorized_token(self, session):
        session.post.return_value = mock_response(status_code=401, text="invalid-jwt")
        summary = run_diagnostics(_client(session))
        assert summary.failed == 5
        assert "HTTP 401" in summary.outcome("authentication").detail
