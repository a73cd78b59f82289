"""TypeScript client generator.

Renders the ``client.ts.j2`` Jinja2 template with the declarations, the
resolution tree and the endpoint bindings built from an introspection
schema.

Supports custom templates via the template_dir parameter:
    generator = ClientGenerator(schema, config, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import GeneratorConfig
from .emitter import emit_type
from .endpoints import translate_endpoint
from .fetcher import IntrospectionFetcher, load_introspection
from .hooks import HookRunner, TidyWhitespaceHook
from .introspection import IntrospectionSchema
from .tree import ResolutionTreeBuilder, render_tree

logger = logging.getLogger(__name__)

CLIENT_TEMPLATE = "client.ts.j2"


def ts_string(value: str) -> str:
    """Render a value as a single-quoted TypeScript string literal."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def default_hooks() -> HookRunner:
    """Hooks used when the caller brings none: whitespace tidying only."""
    return HookRunner(post_hooks=[TidyWhitespaceHook()])


class ClientGenerator:
    """Generates a TypeScript client module from an introspection schema.

    Example:
        generator = ClientGenerator(schema, GeneratorConfig(endpoint=url, output="client.ts"))
        code = generator.generate_client_code()
    """

    def __init__(
        self,
        schema: IntrospectionSchema,
        config: GeneratorConfig,
        template_dir: Optional[str] = None,
        hooks: Optional[HookRunner] = None,
    ):
        """Initialize the generator.

        Args:
            schema: The parsed introspection document
            config: Generator options; only the endpoint, ``verbose`` and
                ``format_graphql`` affect the emitted text
            template_dir: Optional directory with a custom ``client.ts.j2``
            hooks: Pre/post generation hooks, defaults to ``default_hooks()``
        """
        self.schema = schema
        self.config = config
        self.hooks = hooks if hooks is not None else default_hooks()

        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["ts_string"] = ts_string

    def build_context(self, schema: IntrospectionSchema) -> dict:
        """Translate the schema into template context, in emission order."""
        declared = schema.declared_types
        tree = ResolutionTreeBuilder().build(schema.object_types)
        return {
            "enums": [emit_type(t) for t in schema.enums],
            "declarations": [emit_type(t) for t in declared],
            "selections": [emit_type(t, selection=True) for t in declared],
            "types_tree": render_tree(tree),
            "queries": [translate_endpoint("query", f) for f in schema.queries],
            "mutations": [translate_endpoint("mutation", f) for f in schema.mutations],
            "endpoint": self.config.endpoint,
            "verbose": self.config.verbose,
            "pretty_graphql": self.config.pretty_graphql,
        }

    def generate_client_code(self) -> str:
        """Generate the complete client module code."""
        schema = self.hooks.run_pre_hooks(self.schema)
        context = self.build_context(schema)
        logger.info(
            "Emitting %d enums, %d types, %d queries, %d mutations",
            len(context["enums"]), len(context["declarations"]),
            len(context["queries"]), len(context["mutations"]),
        )
        code = self.env.get_template(CLIENT_TEMPLATE).render(context)
        return self.hooks.run_post_hooks(self.config.output.name, code)


def write_client(path: str | Path, code: str):
    """Write the generated module, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")


async def load_schema(config: GeneratorConfig) -> IntrospectionSchema:
    """Load the schema from ``config.schema_path`` or fetch it from the endpoint."""
    if config.schema_path is not None:
        return load_introspection(config.schema_path)
    fetcher = IntrospectionFetcher(config.endpoint, config.headers, timeout=config.timeout)
    return await fetcher.fetch()


async def generate_typescript_client(
    config: GeneratorConfig,
    hooks: Optional[HookRunner] = None,
    template_dir: Optional[str] = None,
) -> str:
    """Introspect, generate and write the client. Returns the generated code.

    A failed introspection request is logged and re-raised unchanged.
    """
    try:
        schema = await load_schema(config)
    except Exception as e:
        logger.exception("The GraphQL introspection request failed: %s", getattr(e, "response", None) or e)
        raise

    if not schema.types:
        logger.warning("Introspection document contains no types")

    code = ClientGenerator(schema, config, template_dir=template_dir, hooks=hooks).generate_client_code()
    write_client(config.output, code)
    return code
