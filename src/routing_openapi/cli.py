"""CLI entry point for routing-openapi."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from routing_openapi.generator.spec import get_spec
from routing_openapi.generator.writer import detect_output_format, dump_spec
from routing_openapi.metadata.base import Route
from routing_openapi.metadata.loader import RouteFileError, load_routes


def _load(routes_path: Path) -> list[Route]:
    try:
        return load_routes(routes_path)
    except (RouteFileError, ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(f"Cannot load routes from {routes_path}: {e}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """routing-openapi: build OpenAPI documents from route metadata."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
@click.option("--title", default=None, help="Document title (info.title).")
@click.option("--version", "doc_version", default=None, help="Document version (info.version).")
def generate(routes_path: Path, output: Path, fmt: str, title: str | None, doc_version: str | None):
    """Generate an OpenAPI document from a route metadata file."""
    click.echo(f"Loading routes from {routes_path}...")
    routes = _load(routes_path)
    click.echo(f"Found {len(routes)} routes.")

    spec = get_spec(routes)
    if title is not None:
        spec["info"]["title"] = title
    if doc_version is not None:
        spec["info"]["version"] = doc_version

    if fmt == "auto":
        fmt = detect_output_format(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_spec(spec, fmt), encoding="utf-8")
    click.echo(f"Wrote {len(spec['paths'])} paths to {output}")
