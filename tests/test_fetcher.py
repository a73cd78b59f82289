"""Tests for the introspection fetcher."""

import asyncio
import json

import httpx
import pytest

from gql_tsgen.core.errors import IntrospectionError
from gql_tsgen.core.fetcher import IntrospectionFetcher

URL = "https://api.example.com/graphql"


def make_fetcher(handler, headers=None):
    return IntrospectionFetcher(URL, headers=headers, transport=httpx.MockTransport(handler))


class TestIntrospectionFetcher:

    def test_fetch_parses_schema(self, blog_document):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=blog_document)

        schema = asyncio.run(make_fetcher(handler).fetch())

        assert schema.get_type("User") is not None
        assert len(requests) == 1
        body = json.loads(requests[0].content)
        assert "__schema" in body["query"]
        assert requests[0].method == "POST"
        assert str(requests[0].url) == URL

    def test_sends_headers(self, blog_document):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, json=blog_document)

        asyncio.run(make_fetcher(handler, headers={"Authorization": "Bearer abc"}).fetch())

        assert seen["authorization"] == "Bearer abc"
        assert seen["content-type"] == "application/json"

    def test_graphql_errors(self):
        def handler(request):
            return httpx.Response(200, json={"errors": [{"message": "introspection disabled"}]})

        with pytest.raises(IntrospectionError) as exc_info:
            asyncio.run(make_fetcher(handler).fetch())

        assert "introspection disabled" in str(exc_info.value)
        assert exc_info.value.errors == [{"message": "introspection disabled"}]

    def test_http_error_propagates(self):
        def handler(request):
            return httpx.Response(500, text="boom")

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(make_fetcher(handler).fetch())

    def test_no_retry(self):
        attempts = []

        def handler(request):
            attempts.append(request)
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(httpx.ConnectError):
            asyncio.run(make_fetcher(handler).fetch())

        assert len(attempts) == 1

    def test_fetch_raw_returns_data_payload(self, blog_document):
        def handler(request):
            return httpx.Response(200, json=blog_document)

        data = asyncio.run(make_fetcher(handler).fetch_raw())
        assert set(data) == {"__schema"}
