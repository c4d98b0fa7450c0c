"""CLI entry point for oas-view."""

import asyncio
import json
import logging
from pathlib import Path

import click
import yaml

from oas_view.errors import ResolutionFailure
from oas_view.parse import parse
from oas_view.parser.base import Spec


def _load_spec(doc_path: Path) -> Spec:
    """Resolve and normalize a document, turning resolution failures into usage errors."""
    try:
        return asyncio.run(parse(doc_path))
    except ResolutionFailure as e:
        raise click.BadParameter(str(e), param_hint="DOC_PATH") from e


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="OAS_VIEW_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
def main(log_level: str):
    """oas-view: group OpenAPI operations by tag for rendering."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path. Defaults to stdout.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def normalize(doc_path: Path, output: Path | None, fmt: str):
    """Write the normalized view of an OpenAPI document."""
    data = _load_spec(doc_path).to_dict()

    if fmt == "yaml":
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False)

    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Normalized view saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def tags(doc_path: Path):
    """List tags and the operations grouped under each."""
    spec = _load_spec(doc_path)

    for tag in spec.tags:
        click.echo(f"{tag.name} ({len(tag.operations)})")
        for operation in tag.operations:
            click.echo(f"  {operation.http_verb.upper()} {operation.path}")

    if spec.webhooks:
        click.echo(f"Webhooks: {', '.join(spec.webhooks)}")
