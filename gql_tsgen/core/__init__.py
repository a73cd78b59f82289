"""Core modules for TypeScript client generation."""

from .config import GeneratorConfig, parse_header
from .emitter import camel_case, emit_type
from .endpoints import EndpointDescriptor, translate_endpoint
from .errors import GenerationError, IntrospectionError
from .fetcher import IntrospectionFetcher, load_introspection
from .generator import ClientGenerator, generate_typescript_client, write_client
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
    PrettierHook,
    TidyWhitespaceHook,
)
from .introspection import (
    Argument,
    EnumValue,
    Field,
    IntrospectionSchema,
    SchemaType,
    TypeRef,
)
from .resolver import resolve_type, translate_field
from .scalars import ScalarKind, classify_scalar
from .tree import ResolutionNode, ResolutionTree, ResolutionTreeBuilder, render_tree

__all__ = [
    # Config
    "GeneratorConfig",
    "parse_header",
    # Errors
    "GenerationError",
    "IntrospectionError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "TidyWhitespaceHook",
    "PrettierHook",
    "HookRunner",
    # Introspection model
    "Argument",
    "EnumValue",
    "Field",
    "IntrospectionSchema",
    "SchemaType",
    "TypeRef",
    # Translation
    "ScalarKind",
    "classify_scalar",
    "resolve_type",
    "translate_field",
    "camel_case",
    "emit_type",
    "EndpointDescriptor",
    "translate_endpoint",
    "ResolutionNode",
    "ResolutionTree",
    "ResolutionTreeBuilder",
    "render_tree",
    # Sources and output
    "IntrospectionFetcher",
    "load_introspection",
    "ClientGenerator",
    "generate_typescript_client",
    "write_client",
]
