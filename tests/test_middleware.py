"""
Tests for request logging middleware helpers
"""

import json

import pytest
from starlette.requests import Request

from bookshelf.middleware import (
    extract_graphql_operation_name,
    operation_name_from_document,
    sanitize_query_params,
)


def make_request(method: str, path: str, body: bytes = b"", query_string: bytes = b"") -> Request:
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query_string,
        "headers": [],
    }
    return Request(scope, receive)


class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self) -> None:
        params = {"access_token": "abc", "API_KEY": "xyz", "page": "2"}

        assert sanitize_query_params(params) == {
            "access_token": "[REDACTED]",
            "API_KEY": "[REDACTED]",
            "page": "2",
        }


class TestOperationNameFromDocument:
    @pytest.mark.parametrize(
        ("document", "expected"),
        [
            ("query GetBooks { getBooks { title } }", "GetBooks"),
            ('mutation AddBook { addBook(title: "x") { title } }', "mutation:AddBook"),
            ("{ getAuthors { name } }", "unnamed_operation"),
            ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
            ("", None),
        ],
    )
    def test_names(self, document: str, expected: str | None) -> None:
        assert operation_name_from_document(document) == expected


class TestExtractGraphqlOperationName:
    @pytest.mark.asyncio
    async def test_ignores_other_paths(self) -> None:
        request = make_request("GET", "/health")

        assert await extract_graphql_operation_name(request) is None

    @pytest.mark.asyncio
    async def test_post_operation_name_field(self) -> None:
        body = json.dumps({"query": "query A { getBooks { title } }", "operationName": "B"})
        request = make_request("POST", "/graphql", body=body.encode())

        assert await extract_graphql_operation_name(request) == "B"

    @pytest.mark.asyncio
    async def test_post_parses_document(self) -> None:
        body = json.dumps({"query": "mutation AddBook { addBook { title } }"})
        request = make_request("POST", "/graphql", body=body.encode())

        assert await extract_graphql_operation_name(request) == "mutation:AddBook"

    @pytest.mark.asyncio
    async def test_post_invalid_json(self) -> None:
        request = make_request("POST", "/graphql", body=b"{not json")

        assert await extract_graphql_operation_name(request) is None

    @pytest.mark.asyncio
    async def test_get_query_param(self) -> None:
        request = make_request(
            "GET", "/graphql", query_string=b"query=query+GetBooks+%7B+getBooks+%7B+title+%7D+%7D"
        )

        assert await extract_graphql_operation_name(request) == "GetBooks"
