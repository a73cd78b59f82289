"""Generation hooks for customizing code generation.

Pre-generation hooks can modify the introspection schema before any code is
emitted; post-generation hooks transform the emitted text before it is
written. Formatting lives here: the generator itself only assembles text.

Example usage:
    from gql_tsgen.core.hooks import HookRunner, AddHeaderHook, PrettierHook

    hooks = HookRunner(post_hooks=[AddHeaderHook("// Auto-generated - do not edit")])
    hooks.add_post_hook(PrettierHook())
"""

import re
import subprocess
from typing import Iterable, Protocol, runtime_checkable

from .introspection import NAMED_KINDS, NON_NULL, Field, IntrospectionSchema, TypeRef


@runtime_checkable
class PreGenerateHook(Protocol):
    """Rewrites the schema before anything is emitted."""

    def pre_generate(self, schema: IntrospectionSchema) -> IntrospectionSchema:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Rewrites the emitted module; ``filename`` is the output's base name."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Built-in hook to add a banner to the generated file.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        header = self.header if self.header.endswith("\n") else self.header + "\n"
        return header + "\n" + content


def _refers_to(ref: TypeRef | None, names: set[str]) -> bool:
    return ref is not None and ref.named_type.name in names


class FilterTypesHook:
    """Built-in hook to filter declared types by name prefix/suffix.

    Root query/mutation types and meta types are always kept. Whatever still
    points at a removed enum, object or input object goes with it: fields and
    input fields typed by it, fields with a required argument typed by it,
    and optional arguments typed by it. The emitted module therefore never
    names a type it does not declare.

    Example:
        # Drop every type starting with "Internal"
        hook = FilterTypesHook(exclude_prefix="Internal")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def matches(self, name: str) -> bool:
        """True when ``name`` passes the include and exclude patterns."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        return name.startswith(self.include_prefix or "") and name.endswith(self.include_suffix or "")

    def pre_generate(self, schema: IntrospectionSchema) -> IntrospectionSchema:
        roots = {schema.query_type_name, schema.mutation_type_name}
        kept, removed = [], set()
        for schema_type in schema.types:
            if schema_type.name in roots or schema_type.is_meta or self.matches(schema_type.name):
                kept.append(schema_type)
            elif schema_type.kind in NAMED_KINDS:
                removed.add(schema_type.name)

        schema.types = kept
        if removed:
            for schema_type in kept:
                schema_type.fields = self._prune(schema_type.fields, removed)
                schema_type.input_fields = self._prune(schema_type.input_fields, removed)
        return schema

    @staticmethod
    def _prune(fields: list[Field], removed: set[str]) -> list[Field]:
        pruned = []
        for f in fields:
            if _refers_to(f.type, removed):
                continue
            dangling = [a for a in f.args if _refers_to(a.type, removed)]
            if any(a.type.kind == NON_NULL for a in dangling):
                continue
            if dangling:
                f.args = [a for a in f.args if not _refers_to(a.type, removed)]
            pruned.append(f)
        return pruned


class TidyWhitespaceHook:
    """Strip trailing whitespace and collapse runs of blank lines."""

    def post_generate(self, _filename: str, content: str) -> str:
        lines = [line.rstrip() for line in content.splitlines()]
        text = re.sub(r"\n{3,}", "\n\n", "\n".join(lines))
        return text.strip("\n") + "\n"


class PrettierHook:
    """Format the generated module with an external prettier binary.

    Args:
        command: The prettier command line; the source is piped on stdin
    """

    def __init__(self, command: list[str] | None = None):
        self.command = command or ["npx", "--yes", "prettier", "--no-semi"]

    def post_generate(self, filename: str, content: str) -> str:
        result = subprocess.run(
            [*self.command, "--stdin-filepath", filename],
            input=content,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout


class HookRunner:
    """Runs pre hooks over the schema and post hooks over the text, in order."""

    def __init__(
        self,
        pre_hooks: Iterable[PreGenerateHook] = (),
        post_hooks: Iterable[PostGenerateHook] = (),
    ):
        self.pre_hooks: list[PreGenerateHook] = list(pre_hooks)
        self.post_hooks: list[PostGenerateHook] = list(post_hooks)

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, schema: IntrospectionSchema) -> IntrospectionSchema:
        for hook in self.pre_hooks:
            schema = hook.pre_generate(schema)
        return schema

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
