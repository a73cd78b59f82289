"""Generate typed TypeScript GraphQL clients from schema introspection."""

__version__ = "0.1.0"
