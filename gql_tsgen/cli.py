"""Command-line interface for gql-tsgen."""

import asyncio
import logging

import click
from pydantic import ValidationError

from .core.config import GeneratorConfig
from .core.generator import generate_typescript_client
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner, PrettierHook, TidyWhitespaceHook


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL client generator for TypeScript.

    Generate a typed TypeScript client from a GraphQL schema.
    """
    pass


@main.command()
@click.option(
    "--endpoint",
    "-e",
    envvar="GQL_TSGEN_ENDPOINT",
    default="",
    help="GraphQL endpoint to introspect; also the default URL of the generated client.",
)
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Local introspection JSON or SDL file used instead of fetching.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the generated client (e.g., client.ts).",
)
@click.option(
    "--header",
    "-H",
    multiple=True,
    help="Extra header for the introspection request, as 'Key: Value'. Repeatable.",
)
@click.option("--format-graphql", is_flag=True, help="Pretty-print request text in the generated client.")
@click.option("--prettier", is_flag=True, help="Format the generated module with prettier.")
@click.option("--banner", default=None, help="Comment line to put at the top of the generated file.")
@click.option("--exclude-prefix", default=None, help="Skip declared types whose name starts with this prefix.")
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with a custom client.ts.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and a verbose generated client.",
)
def generate(
    endpoint: str,
    schema: str | None,
    output: str,
    header: tuple[str, ...],
    format_graphql: bool,
    prettier: bool,
    banner: str | None,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate a TypeScript client from a GraphQL schema.

    Examples:

        gql-tsgen generate --endpoint https://api.example.com/graphql --output ./src/api.ts

        gql-tsgen generate -s ./schema.json -e https://api.example.com/graphql -o ./api.ts

        gql-tsgen generate -s ./schema.graphqls -o ./api.ts --prettier
    """
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)

    try:
        config = GeneratorConfig(
            endpoint=endpoint,
            output=output,
            schema_path=schema,
            headers=list(header),
            verbose=verbose,
            format_graphql=format_graphql,
        )
    except ValidationError as e:
        raise click.UsageError(str(e))

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    hooks.add_post_hook(TidyWhitespaceHook())
    if banner:
        hooks.add_post_hook(AddHeaderHook(banner))
    if prettier:
        hooks.add_post_hook(PrettierHook())

    if verbose:
        click.echo(f"Source: {config.schema_path or config.endpoint}")
        click.echo(f"Output: {config.output}")

    click.echo("Generating client...")
    code = asyncio.run(generate_typescript_client(config, hooks=hooks, template_dir=template_dir))

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}")
        click.echo(f"  Interfaces: {code.count('export interface ')}")
        click.echo(f"  Enums: {code.count('export enum ')}")

    click.echo(f"Done! Generated client in {config.output}")


if __name__ == "__main__":
    main()
