#!/usr/bin/env python3
"""Demonstration of the generated TypeScript client.

This script shows how to:
1. Load a GraphQL schema from SDL
2. Inspect the resolution tree built from it
3. Generate the TypeScript client module

Note: This demo doesn't make real API calls - it works from an inline SDL
schema instead of introspecting an endpoint.
"""

import tempfile
from pathlib import Path

from gql_tsgen.core import (
    ClientGenerator,
    GeneratorConfig,
    ResolutionTreeBuilder,
    load_introspection,
)

SDL = """
type Query {
  user(id: ID!): User
  users(first: Int): [User!]!
}

type Mutation {
  createPost(input: PostInput!): Post!
}

type User {
  id: ID!
  name: String
  posts: [Post!]
  friends: [User!]
}

type Post {
  id: ID!
  title: String!
  author: User!
}

input PostInput {
  title: String!
  body: String
}
"""


def main():
    print("=== TypeScript Client Demo ===\n")

    with tempfile.TemporaryDirectory() as tmpdir:
        schema_path = Path(tmpdir) / "schema.graphql"
        schema_path.write_text(SDL)

        print("1. Loading schema...")
        schema = load_introspection(schema_path)
        print(f"   Queries: {[f.name for f in schema.queries]}")
        print(f"   Mutations: {[f.name for f in schema.mutations]}")

        print("\n2. Resolution tree:")
        tree = ResolutionTreeBuilder().build(schema.object_types)
        for type_name, field_name, target in tree.references():
            print(f"   {type_name}.{field_name} -> {target}")

        print("\n3. Generating client...")
        config = GeneratorConfig(
            endpoint="https://api.example.com/graphql",
            output=Path(tmpdir) / "client.ts",
        )
        code = ClientGenerator(schema, config).generate_client_code()
        print(code)


if __name__ == "__main__":
    main()
