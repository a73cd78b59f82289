"""Schema resolution tree.

The resolution tree tells the runtime client, for every object type and
field, which arguments the field accepts (with their raw GraphQL wire types)
and which object type's fields can be selected underneath it.

Object types reference each other freely, including themselves, so nested
node-sets are never copied. The builder works in two passes:

1. allocate one node-set per object type (the arena) and record each
   field's arguments and the name of the object type it outputs;
2. wire every recorded name to the arena entry by reference.

Pass 2 only performs dictionary lookups, so cyclic schemas terminate and
``tree["User"]["friends"].fields is tree["User"]``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from .introspection import ENUM, INPUT_OBJECT, LIST, NON_NULL, OBJECT, SCALAR, SchemaType, TypeRef

logger = logging.getLogger(__name__)

NodeSet = dict[str, "ResolutionNode"]


@dataclass
class ResolutionNode:
    """Argument wire types and nested shape of one (type, field) pair."""
    args: dict[str, str] | None = None
    shape_ref: str | None = None
    # Wired in pass 2; a reference into the arena, never a copy
    fields: NodeSet | None = field(default=None, repr=False, compare=False)


def raw_input_type(ref: TypeRef | None) -> str:
    """Render an argument type in GraphQL wire syntax, e.g. ``[ID!]!``."""
    if ref is None:
        return ""
    if ref.kind == NON_NULL:
        return f"{raw_input_type(ref.of_type)}!"
    if ref.kind == LIST:
        return f"[{raw_input_type(ref.of_type)}]"
    if ref.kind in (SCALAR, INPUT_OBJECT, ENUM):
        return ref.name or ""
    return ""


def peel_object_name(ref: TypeRef | None) -> str | None:
    """Strip NON_NULL/LIST wrappers; return the name if an OBJECT remains."""
    if ref is None:
        return None
    named = ref.named_type
    return named.name if named.kind == OBJECT else None


class ResolutionTree:
    """Node-sets keyed by type name, then field name."""

    def __init__(self, node_sets: dict[str, NodeSet]):
        self.node_sets = node_sets

    def __getitem__(self, type_name: str) -> NodeSet:
        return self.node_sets[type_name]

    def __contains__(self, type_name: str) -> bool:
        return type_name in self.node_sets

    def __iter__(self) -> Iterator[str]:
        return iter(self.node_sets)

    def __len__(self) -> int:
        return len(self.node_sets)

    def references(self) -> Iterator[tuple[str, str, str]]:
        """Yield ``(type_name, field_name, target_type_name)`` for each wired node."""
        for type_name, node_set in self.node_sets.items():
            for field_name, node in node_set.items():
                if node.fields is not None:
                    yield type_name, field_name, node.shape_ref

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view; nested node-sets appear by name."""
        result: dict[str, Any] = {}
        for type_name, node_set in self.node_sets.items():
            entries: dict[str, Any] = {}
            for field_name, node in node_set.items():
                entry: dict[str, Any] = {}
                if node.args:
                    entry["__args"] = dict(node.args)
                if node.fields is not None:
                    entry["__fields"] = node.shape_ref
                entries[field_name] = entry
            result[type_name] = entries
        return result


class ResolutionTreeBuilder:
    """Builds a ResolutionTree from the schema's object types."""

    def build(self, object_types: list[SchemaType]) -> ResolutionTree:
        arena = self._collect(object_types)
        self._wire(arena)
        return ResolutionTree(arena)

    def _collect(self, object_types: list[SchemaType]) -> dict[str, NodeSet]:
        """Pass 1: one node-set per object type, references kept by name."""
        arena: dict[str, NodeSet] = {}
        for schema_type in object_types:
            if schema_type.kind != OBJECT or schema_type.is_meta:
                continue
            node_set = arena.setdefault(schema_type.name, {})
            for f in schema_type.fields:
                args = {}
                for arg in f.args:
                    wire_type = raw_input_type(arg.type)
                    if wire_type:
                        args[arg.name] = wire_type
                shape_ref = peel_object_name(f.type)
                if args or shape_ref:
                    node_set[f.name] = ResolutionNode(args=args or None, shape_ref=shape_ref)
        return arena

    def _wire(self, arena: dict[str, NodeSet]):
        """Pass 2: resolve shape names against the arena, drop empty nodes."""
        for type_name, node_set in arena.items():
            for field_name in list(node_set):
                node = node_set[field_name]
                if node.shape_ref is not None:
                    node.fields = arena.get(node.shape_ref)
                    if node.fields is None:
                        logger.debug(
                            "No node-set for %s (from %s.%s), leaving it unwired",
                            node.shape_ref, type_name, field_name,
                        )
                if not node.args and node.fields is None:
                    del node_set[field_name]


def render_tree(tree: ResolutionTree, name: str = "typesTree") -> str:
    """Render the tree as a TypeScript value plus reference assignments.

    The object literal carries every node-set and its ``__args``; nested
    ``__fields`` are assigned afterwards so node-sets are shared, not copied.
    """
    lines = [f"const {name}: {{ [typeName: string]: TypesTreeNodeSet }} = {{"]
    for type_name, node_set in tree.node_sets.items():
        if not node_set:
            lines.append(f"  {type_name}: {{}},")
            continue
        lines.append(f"  {type_name}: {{")
        for field_name, node in node_set.items():
            if not node.args:
                lines.append(f"    {field_name}: {{}},")
                continue
            lines.append(f"    {field_name}: {{")
            lines.append("      __args: {")
            for arg_name, wire_type in node.args.items():
                lines.append(f"        {arg_name}: '{wire_type}',")
            lines.append("      },")
            lines.append("    },")
        lines.append("  },")
    lines.append("}")

    wiring = [
        f"{name}.{type_name}.{field_name}.__fields = {name}.{target}"
        for type_name, field_name, target in tree.references()
    ]
    if wiring:
        lines.append("")
        lines.extend(wiring)
    return "\n".join(lines)
