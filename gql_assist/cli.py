"""Command-line interface for gql-assist."""

import logging
import re
from dataclasses import dataclass, field

import click
from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import ValidationError

from .core.keywords import reserved_words
from .core.projector import JavaProjector
from .core.schema import Schema
from .core.settings import AssistSettings
from .core.suggestions import OPERATION_TYPES, SuggestionProvider
from .core.workspace import DirectoryLocator


def one_line(text: str) -> str:
    """Collapse a description onto a single line."""
    return re.sub(r"\s+", " ", text or "").strip()


@dataclass
class CliState:
    schema: Schema
    projector: JavaProjector
    diagnostics: list[str] = field(default_factory=list)

    def report(self, message: str):
        self.diagnostics.append(message)
        click.echo(message, err=True)


def _finish(ctx: click.Context, state: CliState):
    if state.diagnostics:
        ctx.exit(1)


@click.group()
@click.version_option(package_name="gql-assist")
@click.option(
    "--root",
    "-r",
    default=".",
    type=click.Path(exists=True, file_okay=False),
    help="Workspace root directory containing the schema.",
)
@click.option(
    "--schema-file",
    "-s",
    default=None,
    help="Schema path relative to the root (default: schema.graphql).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
@click.pass_context
def main(ctx: click.Context, root: str, schema_file: str | None, verbose: bool):
    """Suggest Java declarations for a GraphQL schema.

    Reads the schema from the workspace root and prints the declarations an
    editor would offer as completions.
    """
    try:
        settings = AssistSettings.from_env(schema_file=schema_file)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)

    projector = JavaProjector(reserved=reserved_words(settings.target))
    state = CliState(schema=Schema(DirectoryLocator(root), settings), projector=projector)
    state.schema.with_diagnostic_sink(state.report)
    ctx.obj = state


@main.command()
@click.pass_context
def types(ctx: click.Context):
    """List the types declared in the schema."""
    state: CliState = ctx.obj
    for name in sorted(state.schema.type_names()):
        click.echo(name)
    _finish(ctx, state)


@main.command()
@click.argument("type_name")
@click.option(
    "--form",
    "-f",
    type=click.Choice(["method", "field"]),
    default=None,
    help="Declaration form (default: method for Query/Mutation, field otherwise).",
)
@click.pass_context
def fields(ctx: click.Context, type_name: str, form: str | None):
    """Print one declaration per member of TYPE_NAME.

    Examples:

        gql-assist fields Query

        gql-assist -r ./project fields Person --form method
    """
    state: CliState = ctx.obj
    if form is None:
        form = "method" if type_name in OPERATION_TYPES else "field"
    render = (
        state.projector.method_declaration
        if form == "method"
        else state.projector.field_declaration
    )
    for member in state.schema.fields_in(type_name):
        click.echo(render(member))
    _finish(ctx, state)


@main.command()
@click.option(
    "--type",
    "-t",
    "type_name",
    default=None,
    help="Suggest fields for a class named after this type instead of API methods.",
)
@click.option(
    "--existing",
    "-e",
    multiple=True,
    help="Member already declared in the class (repeatable).",
)
@click.pass_context
def suggest(ctx: click.Context, type_name: str | None, existing: tuple[str, ...]):
    """Show the completions offered for a client API or a type class."""
    state: CliState = ctx.obj
    provider = SuggestionProvider(state.schema, state.projector)
    if type_name:
        suggestions = provider.type_suggestions(type_name, existing)
    else:
        suggestions = provider.api_suggestions(existing)

    env = Environment(
        loader=PackageLoader("gql_assist", "templates"),
        autoescape=select_autoescape(),
        keep_trailing_newline=True,
    )
    env.filters["one_line"] = one_line
    click.echo(env.get_template("suggestions.txt.j2").render(suggestions=suggestions), nl=False)
    _finish(ctx, state)


if __name__ == "__main__":
    main()
