"""Data model for GraphQL introspection documents.

This module defines dataclasses mirroring the parts of an introspection
result the generator reads: named types, their fields, arguments and enum
values, and the nested type references (``LIST``/``NON_NULL`` wrappers).

Parsing is tolerant: missing keys become empty values so that partial
documents degrade to empty output instead of failing.
"""

from dataclasses import dataclass, field
from typing import Any

SCALAR = "SCALAR"
ENUM = "ENUM"
OBJECT = "OBJECT"
INPUT_OBJECT = "INPUT_OBJECT"
INTERFACE = "INTERFACE"
UNION = "UNION"
LIST = "LIST"
NON_NULL = "NON_NULL"

# Kinds that carry a schema-wide unique name and get their own declaration
NAMED_KINDS = (ENUM, OBJECT, INPUT_OBJECT)


@dataclass
class TypeRef:
    """A reference to a type, possibly wrapped in LIST/NON_NULL."""
    kind: str
    name: str | None = None
    of_type: "TypeRef | None" = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "TypeRef | None":
        if not data:
            return None
        return cls(
            kind=data.get("kind") or "",
            name=data.get("name"),
            of_type=cls.from_dict(data.get("ofType")),
        )

    @property
    def named_type(self) -> "TypeRef":
        """The innermost reference once LIST/NON_NULL wrappers are peeled."""
        ref = self
        while ref.kind in (LIST, NON_NULL) and ref.of_type is not None:
            ref = ref.of_type
        return ref


@dataclass
class Argument:
    """An argument of a field, or an input field of an input object."""
    name: str
    type: TypeRef | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Argument":
        return cls(name=data["name"], type=TypeRef.from_dict(data.get("type")))


@dataclass
class Field:
    """A field of an object or input object type."""
    name: str
    type: TypeRef | None = None
    args: list[Argument] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Field":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data.get("type")),
            args=[Argument.from_dict(a) for a in data.get("args") or []],
        )


@dataclass
class EnumValue:
    """A single member of an enum type."""
    name: str


@dataclass
class SchemaType:
    """A named type from the introspection ``types`` list."""
    kind: str
    name: str
    fields: list[Field] = field(default_factory=list)
    input_fields: list[Field] = field(default_factory=list)
    enum_values: list[EnumValue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SchemaType":
        return cls(
            kind=data.get("kind") or "",
            name=data.get("name") or "",
            fields=[Field.from_dict(f) for f in data.get("fields") or []],
            # Input fields have no arguments; reuse Field so the translator
            # can treat both member lists alike.
            input_fields=[Field.from_dict(f) for f in data.get("inputFields") or []],
            enum_values=[EnumValue(name=v["name"]) for v in data.get("enumValues") or []],
        )

    @property
    def is_meta(self) -> bool:
        """Introspection meta types (``__Type``, ``__Schema``...)."""
        return self.name.startswith("__")

    @property
    def members(self) -> list[Field]:
        return self.fields or self.input_fields or []


@dataclass
class IntrospectionSchema:
    """A complete introspection document."""
    types: list[SchemaType] = field(default_factory=list)
    query_type_name: str = "Query"
    mutation_type_name: str = "Mutation"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IntrospectionSchema":
        """Build from a raw introspection result.

        Accepts a full response (``{"data": {"__schema": ...}}``), the
        ``{"__schema": ...}`` payload, or the bare schema mapping.
        """
        if "data" in data and isinstance(data["data"], dict):
            data = data["data"]
        schema = data.get("__schema", data)

        query_type = schema.get("queryType") or {}
        mutation_type = schema.get("mutationType") or {}
        return cls(
            types=[SchemaType.from_dict(t) for t in schema.get("types") or []],
            query_type_name=query_type.get("name") or "Query",
            mutation_type_name=mutation_type.get("name") or "Mutation",
        )

    def get_type(self, name: str) -> SchemaType | None:
        """Look up a named type."""
        for schema_type in self.types:
            if schema_type.name == name:
                return schema_type
        return None

    @property
    def enums(self) -> list[SchemaType]:
        return [t for t in self.types if t.kind == ENUM and not t.is_meta]

    @property
    def declared_types(self) -> list[SchemaType]:
        """Object and input object types that get interface declarations."""
        return [t for t in self.types if t.kind in (OBJECT, INPUT_OBJECT) and not t.is_meta]

    @property
    def object_types(self) -> list[SchemaType]:
        """Object types only, input for the resolution tree."""
        return [t for t in self.types if t.kind == OBJECT and not t.is_meta]

    @property
    def queries(self) -> list[Field]:
        root = self.get_type(self.query_type_name)
        return root.fields if root else []

    @property
    def mutations(self) -> list[Field]:
        root = self.get_type(self.mutation_type_name)
        return root.fields if root else []
