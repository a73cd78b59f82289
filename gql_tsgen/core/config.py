"""Generator configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


def parse_header(header: str) -> tuple[str, str]:
    """Split a ``"Key: Value"`` header string."""
    key, sep, value = header.partition(":")
    if not sep or not key.strip():
        raise ValueError(f"Invalid header {header!r}, expected 'Key: Value'")
    return key.strip(), value.strip()


class GeneratorConfig(BaseModel):
    """Options for one generator run.

    Attributes:
        endpoint: GraphQL endpoint to introspect; also the default client URL
            baked into the generated module
        output: Path of the generated TypeScript file
        schema_path: Local introspection JSON or SDL file used instead of
            fetching from ``endpoint``
        headers: Extra HTTP headers for the introspection request
        verbose: Emit a verbose client (logs formatted requests)
        format_graphql: Pretty-print request text in the generated client
        timeout: Introspection request timeout in seconds
    """

    endpoint: str = ""
    output: Path
    schema_path: Path | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    verbose: bool = False
    format_graphql: bool = False
    timeout: float = 30.0

    @field_validator("headers", mode="before")
    @classmethod
    def _parse_headers(cls, value):
        if isinstance(value, (list, tuple)):
            return dict(parse_header(h) for h in value)
        return value

    @model_validator(mode="after")
    def _require_source(self):
        if not self.endpoint and self.schema_path is None:
            raise ValueError("Either 'endpoint' or 'schema_path' must be provided")
        return self

    @property
    def pretty_graphql(self) -> bool:
        """Whether the generated client wires in the GraphQL pretty-printer."""
        return self.format_graphql or self.verbose
