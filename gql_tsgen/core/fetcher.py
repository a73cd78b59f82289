"""Introspection document sources.

Fetches the introspection result from a live GraphQL endpoint, or loads it
from a local introspection JSON or SDL file.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from graphql import build_schema, get_introspection_query, introspection_from_schema

from .errors import IntrospectionError
from .introspection import IntrospectionSchema

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


class IntrospectionFetcher:
    """Runs the introspection query against a GraphQL endpoint.

    Examples:
        fetcher = IntrospectionFetcher("https://api.example.com/graphql")
        schema = asyncio.run(fetcher.fetch())

        fetcher = IntrospectionFetcher(url, headers={"Authorization": "Bearer ..."})
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            url: GraphQL endpoint URL
            headers: Extra request headers (auth, tenant...)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.url = url
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout = timeout
        self.transport = transport

    async def fetch_raw(self) -> dict[str, Any]:
        """Execute the introspection query and return the ``data`` payload.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            IntrospectionError: If the response contains errors
        """
        payload = {"query": get_introspection_query(descriptions=False)}
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
        ) as client:
            logger.info("Introspecting %s", self.url)
            response = await client.post(self.url, json=payload)
            response.raise_for_status()
            result = response.json()

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise IntrospectionError(f"GraphQL errors: {error_messages}", result["errors"])

        return result.get("data") or {}

    async def fetch(self) -> IntrospectionSchema:
        return IntrospectionSchema.from_dict(await self.fetch_raw())


def load_introspection(path: str | Path) -> IntrospectionSchema:
    """Load an introspection document from a JSON or SDL file."""
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    if path.suffix in SDL_SUFFIXES:
        data = introspection_from_schema(build_schema(content))
    else:
        data = json.loads(content)
    return IntrospectionSchema.from_dict(data)
