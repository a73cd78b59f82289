"""Type-reference resolution and field translation.

``resolve_type`` turns an introspection type reference into a TypeScript
type expression. It runs in one of two modes:

- declaration mode renders the static type of a value
  (``Maybe<User>``, ``string[]``, ``Color``);
- selection mode renders the request shape a caller may pass for the field
  (``UserSelection``), where enums and scalars contribute nothing because
  selecting them is a plain ``boolean`` flag.

``translate_field`` builds one interface member from a field using the
resolver.
"""

import logging

from .introspection import (
    ENUM,
    INPUT_OBJECT,
    LIST,
    NON_NULL,
    OBJECT,
    SCALAR,
    Argument,
    Field,
    TypeRef,
)
from .scalars import classify_scalar, is_scalar_kind

logger = logging.getLogger(__name__)

SELECTION_SUFFIX = "Selection"
MAYBE_PREFIX = "Maybe<"
# Declared type of a member whose reference cannot be resolved
UNKNOWN_TYPE = "unknown"


def maybe(type_expression: str) -> str:
    """Wrap a type expression in the nullable marker."""
    return f"{MAYBE_PREFIX}{type_expression}>"


def unwrap_maybe(type_expression: str) -> str:
    """Strip one outer nullable marker, if present."""
    if type_expression.startswith(MAYBE_PREFIX) and type_expression.endswith(">"):
        return type_expression[len(MAYBE_PREFIX):-1]
    return type_expression


def resolve_type(ref: TypeRef | None, required: bool = False, selection: bool = False) -> str:
    """Resolve a type reference to a TypeScript type expression.

    Args:
        ref: The type reference to resolve
        required: True when an enclosing NON_NULL or LIST already decided
            nullability; suppresses the ``Maybe<...>`` wrapper
        selection: Resolve the request shape instead of the value type

    Returns:
        The type expression, or an empty string when nothing is contributed
    """
    if ref is None:
        return ""

    def wrapped(text: str) -> str:
        return text if required or selection else maybe(text)

    if ref.kind == NON_NULL:
        return resolve_type(ref.of_type, required=True, selection=selection)

    if ref.kind == LIST:
        inner = resolve_type(ref.of_type, required=True, selection=selection)
        return wrapped(inner if selection else f"{inner}[]")

    if ref.kind in (OBJECT, INPUT_OBJECT):
        return wrapped(f"{ref.name}{SELECTION_SUFFIX if selection else ''}")

    if selection:
        return ""

    if ref.kind == ENUM and ref.name:
        return wrapped(ref.name)

    if ref.kind == SCALAR:
        return wrapped(classify_scalar(ref.name).value)

    logger.debug("Unsupported type reference %s(%s), emitting nothing", ref.kind, ref.name)
    return ""


def render_arguments(args: list[Argument]) -> str:
    """Render the ``{ __args: {...} }`` object for a field's arguments."""
    members = ", ".join(
        translate_field(Field(name=arg.name, type=arg.type), is_input=True) for arg in args
    )
    return f"{{ __args: {{ {members} }} }}"


def with_arguments(type_expression: str, args: list[Argument]) -> str:
    """Intersect a selection type with its arguments object, if any."""
    if not args:
        return type_expression
    args_expression = render_arguments(args)
    if type_expression:
        return f"{args_expression} & {type_expression}"
    return args_expression


def translate_field(field: Field, is_input: bool = False, selection: bool = False) -> str:
    """Translate a field into an interface member (``name: T`` / ``name?: T``).

    ``is_input`` marks members of input objects and arguments. It does not
    change the rendering; input and output references resolve alike.
    """
    type_expression = resolve_type(field.type, selection=selection)

    # Selecting a scalar field needs no sub-shape
    if selection and is_scalar_kind(type_expression):
        type_expression = ""

    if selection:
        type_expression = with_arguments(type_expression, field.args)

    is_optional = selection or type_expression.startswith(MAYBE_PREFIX)
    if is_optional:
        type_expression = unwrap_maybe(type_expression)

    if not type_expression:
        type_expression = "boolean" if selection else UNKNOWN_TYPE

    return f"{field.name}{'?:' if is_optional else ':'} {type_expression}"
