"""Declaration emitter for named schema types."""

import re

from .introspection import ENUM, INPUT_OBJECT, OBJECT, SchemaType
from .resolver import SELECTION_SUFFIX, translate_field

_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def camel_case(name: str) -> str:
    """Convert SCREAMING_SNAKE, snake_case, PascalCase or kebab-case to camelCase."""
    words = _WORD_RE.findall(name)
    if not words:
        return name
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def emit_enum(schema_type: SchemaType) -> str:
    """Emit a TypeScript enum, members sorted by their source name."""
    members = [
        f"  {camel_case(value.name)} = '{value.name}',"
        for value in sorted(schema_type.enum_values, key=lambda v: v.name)
    ]
    return "\n".join([f"export enum {schema_type.name} {{", *members, "}"])


def emit_interface(schema_type: SchemaType, selection: bool = False) -> str:
    """Emit an interface for an object or input object type."""
    name = f"{schema_type.name}{SELECTION_SUFFIX if selection else ''}"
    is_input = schema_type.kind == INPUT_OBJECT
    members = [
        f"  {translate_field(f, is_input=is_input, selection=selection)}"
        for f in schema_type.members
    ]
    return "\n".join([f"export interface {name} {{", *members, "}"])


def emit_type(schema_type: SchemaType, selection: bool = False) -> str:
    """Emit the declaration of a named type in declaration or selection mode.

    Enums have no selection variant; selecting an enum field is a boolean flag.
    """
    if schema_type.kind == ENUM:
        return "" if selection else emit_enum(schema_type)
    if schema_type.kind in (OBJECT, INPUT_OBJECT):
        return emit_interface(schema_type, selection=selection)
    return ""
