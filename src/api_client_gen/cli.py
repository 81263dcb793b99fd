"""CLI entry point for api-client-gen."""

from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from api_client_gen.parser.base import Operation, SwaggerDocument
from api_client_gen.parser.swagger import DocumentError, iter_operations, load_document, unresolved_parameter_refs
from api_client_gen.generator.client import DEFAULT_RUNTIME, ClientGenerator, filter_by_tag
from api_client_gen.generator.method import gen_method
from api_client_gen.generator.schema import render_schema
from api_client_gen.generator.validator import validate_bundles


def _load(doc_path: Path) -> SwaggerDocument:
    """Load a document, reporting bad input as a CLI error."""
    try:
        return load_document(doc_path)
    except (DocumentError, ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(f"{doc_path}: {e}") from e


def _warn_unsupported(doc: SwaggerDocument) -> None:
    """Report input the generator skips or cannot type."""
    if doc.openapi is not None:
        click.echo(
            f"  Warning: OpenAPI {doc.openapi} document; requestBody and response content schemas are not read",
            err=True,
        )
    for ref in unresolved_parameter_refs(doc):
        click.echo(f"  Warning: skipping unresolved parameter {ref}", err=True)


def _operations(doc: SwaggerDocument) -> list[tuple[str, str, Operation]]:
    try:
        return list(iter_operations(doc))
    except ValidationError as e:
        raise click.ClickException(f"invalid operation: {e}") from e


@click.group()
def main():
    """Generate typed TypeScript clients from Swagger documents."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the generated client.")
@click.option("--runtime", default=DEFAULT_RUNTIME, envvar="API_CLIENT_GEN_RUNTIME", show_default=True, help="Module the client imports fetchApi and response types from.")
@click.option("--tag", "tags", multiple=True, help="Only generate operations with this tag (repeatable).")
@click.option("--strict", is_flag=True, help="Fail when generated names collide.")
def gen_client(doc_path: Path, output: Path, runtime: str, tags: tuple[str, ...], strict: bool):
    """Generate a TypeScript client from a Swagger document."""
    click.echo(f"Parsing {doc_path}...")
    doc = _load(doc_path)
    _warn_unsupported(doc)
    operations = filter_by_tag(_operations(doc), tags)
    click.echo(f"Found {len(operations)} operations.")

    gen = ClientGenerator(runtime=runtime)
    bundles = gen.generate_operations(operations)

    errors = validate_bundles(bundles)
    for message in errors.values():
        click.echo(f"  Warning: {message}", err=True)
    if errors and strict:
        raise click.ClickException(f"{len(errors)} name collisions, aborting (--strict)")

    for bundle in bundles:
        for line in bundle.definitions:
            if "// TODO" in line:
                click.echo(f"  Warning: unsupported response schema: {line}", err=True)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(gen.render(bundles, doc.definitions), encoding="utf-8")
    click.echo(f"Client saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def list_ops(doc_path: Path):
    """List the operations of a Swagger document."""
    doc = _load(doc_path)
    for path, method, operation in _operations(doc):
        tags = ", ".join(operation.tags)
        click.echo(f"{method.upper()} {path} {operation.operation_id or '-'} [{tags}]")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.argument("operation_id")
def show_op(doc_path: Path, operation_id: str):
    """Print the generated definitions and method for one operation."""
    doc = _load(doc_path)
    matches = [entry for entry in _operations(doc) if entry[2].operation_id == operation_id]
    if not matches:
        raise click.ClickException(f"operation {operation_id!r} not found")

    path, method, operation = matches[0]
    bundle = gen_method(path, method, operation)
    for line in bundle.definitions:
        click.echo(line)
    for schema in bundle.definition_schemas:
        click.echo(render_schema(schema))
    click.echo("")
    for line in bundle.method:
        click.echo(line)
    click.echo(f"// tags: {', '.join(bundle.tags)}")
