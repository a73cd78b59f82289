"""Tests for generator configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gql_tsgen.core.config import GeneratorConfig, parse_header


class TestParseHeader:

    def test_key_value(self):
        assert parse_header("Authorization: Bearer abc") == ("Authorization", "Bearer abc")

    def test_value_with_colon(self):
        assert parse_header("X-Url: https://example.com") == ("X-Url", "https://example.com")

    @pytest.mark.parametrize("header", ["no-separator", ": value"])
    def test_invalid(self, header):
        with pytest.raises(ValueError):
            parse_header(header)


class TestGeneratorConfig:

    def test_defaults(self):
        config = GeneratorConfig(endpoint="https://api.example.com/graphql", output="client.ts")
        assert config.output == Path("client.ts")
        assert config.headers == {}
        assert config.timeout == 30.0
        assert not config.pretty_graphql

    def test_headers_from_strings(self):
        config = GeneratorConfig(
            endpoint="https://api.example.com/graphql",
            output="client.ts",
            headers=["Authorization: Bearer abc", "X-Tenant: 42"],
        )
        assert config.headers == {"Authorization": "Bearer abc", "X-Tenant": "42"}

    def test_invalid_header_string(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(endpoint="https://x", output="client.ts", headers=["broken"])

    def test_requires_a_source(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(output="client.ts")

    def test_schema_path_without_endpoint(self):
        config = GeneratorConfig(schema_path="schema.json", output="client.ts")
        assert config.endpoint == ""
        assert config.schema_path == Path("schema.json")

    @pytest.mark.parametrize("verbose, format_graphql", [(True, False), (False, True), (True, True)])
    def test_pretty_graphql(self, verbose, format_graphql):
        config = GeneratorConfig(
            endpoint="https://x", output="client.ts", verbose=verbose, format_graphql=format_graphql,
        )
        assert config.pretty_graphql
