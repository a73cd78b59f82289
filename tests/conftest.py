"""Shared fixtures: a small blog schema in introspection form."""

import pytest
from builders import arg, field, list_of, named, non_null, scalar

from gql_tsgen.core.introspection import IntrospectionSchema


BLOG_TYPES = [
    {
        "kind": "OBJECT",
        "name": "Query",
        "fields": [
            field("user", named("OBJECT", "User"), [arg("id", non_null(scalar("ID")))]),
            field(
                "users",
                non_null(list_of(non_null(named("OBJECT", "User")))),
                [arg("first", scalar("Int")), arg("role", named("ENUM", "Role"))],
            ),
            field("version", non_null(scalar("String"))),
            field("ping", scalar("Boolean")),
        ],
    },
    {
        "kind": "OBJECT",
        "name": "Mutation",
        "fields": [
            field(
                "createPost",
                non_null(named("OBJECT", "Post")),
                [arg("input", non_null(named("INPUT_OBJECT", "PostInput")))],
            ),
        ],
    },
    {
        "kind": "OBJECT",
        "name": "User",
        "fields": [
            field("id", non_null(scalar("ID"))),
            field("name", scalar("String")),
            field("role", named("ENUM", "Role")),
            field("posts", list_of(non_null(named("OBJECT", "Post")))),
            field("friends", list_of(named("OBJECT", "User"))),
            field("createdAt", non_null(scalar("DateTime"))),
        ],
    },
    {
        "kind": "OBJECT",
        "name": "Post",
        "fields": [
            field("id", non_null(scalar("ID"))),
            field("title", non_null(scalar("String"))),
            field("author", non_null(named("OBJECT", "User"))),
            field("tags", list_of(non_null(scalar("String"))), [arg("limit", scalar("Int"))]),
        ],
    },
    {
        "kind": "INPUT_OBJECT",
        "name": "PostInput",
        "inputFields": [
            {"name": "title", "type": non_null(scalar("String"))},
            {"name": "body", "type": scalar("String")},
            {"name": "tagIds", "type": list_of(non_null(scalar("ID")))},
        ],
    },
    {
        "kind": "ENUM",
        "name": "Role",
        "enumValues": [{"name": "EDITOR"}, {"name": "guest_user"}, {"name": "ADMIN"}],
    },
    {"kind": "SCALAR", "name": "DateTime"},
    {"kind": "SCALAR", "name": "ID"},
    {"kind": "SCALAR", "name": "String"},
    {
        "kind": "OBJECT",
        "name": "__Type",
        "fields": [field("ofType", named("OBJECT", "__Type"))],
    },
    {
        "kind": "ENUM",
        "name": "__TypeKind",
        "enumValues": [{"name": "SCALAR"}],
    },
]


@pytest.fixture
def blog_document():
    """The blog schema as a full introspection response."""
    return {
        "data": {
            "__schema": {
                "queryType": {"name": "Query"},
                "mutationType": {"name": "Mutation"},
                "types": BLOG_TYPES,
            }
        }
    }


@pytest.fixture
def blog_schema(blog_document):
    return IntrospectionSchema.from_dict(blog_document)
