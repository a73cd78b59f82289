"""Exceptions raised by gql-tsgen."""

from typing import Any


class GenerationError(Exception):
    """Base class for gql-tsgen errors."""


class IntrospectionError(GenerationError):
    """Raised when the endpoint answers the introspection query with errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)
