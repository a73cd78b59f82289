"""Endpoint bindings for root query and mutation fields."""

from dataclasses import dataclass

from .introspection import Field
from .resolver import UNKNOWN_TYPE, resolve_type, with_arguments
from .scalars import is_scalar_kind

NO_INPUT = "undefined"


@dataclass
class EndpointDescriptor:
    """Input selection type and output type bound to one root field."""
    kind: str  # 'query' or 'mutation'
    name: str
    input_type: str | None  # None when the field takes no input
    output_type: str

    def render(self, factory: str = "this.apiEndpoint") -> str:
        """Render as a member of the generated ``queries``/``mutations`` map."""
        input_type = self.input_type or NO_INPUT
        return f"{self.name}: {factory}<{input_type}, {self.output_type}>('{self.kind}', '{self.name}')"


def translate_endpoint(kind: str, field: Field) -> EndpointDescriptor:
    """Translate a root field into an EndpointDescriptor.

    The input is the field's selection shape intersected with its arguments
    object. Non-scalar outputs are wrapped in ``DeepRequired`` because a
    concrete response carries every selected field. Unresolvable outputs
    (interfaces, unions) are typed ``unknown``.
    """
    input_type = with_arguments(resolve_type(field.type, selection=True), field.args)

    output_type = resolve_type(field.type)
    if not output_type:
        output_type = UNKNOWN_TYPE
    elif not is_scalar_kind(output_type):
        output_type = f"DeepRequired<{output_type}>"

    return EndpointDescriptor(
        kind=kind,
        name=field.name,
        input_type=input_type or None,
        output_type=output_type,
    )
