"""Scalar classification for GraphQL scalars.

Every GraphQL scalar name maps to one of five TypeScript types. The mapping
is a fixed, ordered list of case-insensitive substring rules; the first rule
that matches wins and unknown names fall back to ``string``.

Example usage:
    from gql_tsgen.core.scalars import classify_scalar

    classify_scalar("BigDecimal")   # ScalarKind.NUMBER
    classify_scalar("DateTime")     # ScalarKind.DATE_TIME
    classify_scalar("Email")        # ScalarKind.STRING
"""

import re
from enum import Enum


class ScalarKind(str, Enum):
    """Semantic scalar kinds, valued by the TypeScript name they emit."""
    NUMBER = "number"
    DATE_TIME = "IDate"
    BOOLEAN = "boolean"
    UUID = "UUID"
    STRING = "string"


# Order matters: "UpdatedDateUuid" is a date, not a uuid.
SCALAR_RULES: list[tuple[re.Pattern, ScalarKind]] = [
    (re.compile(r"int|long|double|decimal", re.IGNORECASE), ScalarKind.NUMBER),
    (re.compile(r"date", re.IGNORECASE), ScalarKind.DATE_TIME),
    (re.compile(r"boolean", re.IGNORECASE), ScalarKind.BOOLEAN),
    (re.compile(r"uuid", re.IGNORECASE), ScalarKind.UUID),
]

_KIND_NAMES = {kind.value for kind in ScalarKind}


def classify_scalar(name: str | None) -> ScalarKind:
    """Return the scalar kind for a GraphQL scalar name."""
    for pattern, kind in SCALAR_RULES:
        if name and pattern.search(name):
            return kind
    return ScalarKind.STRING


def is_scalar_kind(type_expression: str) -> bool:
    """Check if a resolved type expression is exactly one of the scalar kinds."""
    return type_expression in _KIND_NAMES
