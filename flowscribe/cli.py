"""Command line interface for rendering documented flows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
import yaml
from pydantic import ValidationError

from flowscribe.analysis import (
    completeness,
    flow_stats,
    text_flow,
    unresolved_references,
    validate_flow,
)
from flowscribe.config import FlowscribeConfig, load_config
from flowscribe.engine import FileSink, StdoutSink, render_all
from flowscribe.exceptions import FlowscribeError
from flowscribe.generators import FORMATS
from flowscribe.loader import load_catalog, load_flow
from flowscribe.models import Catalog, Flow
from flowscribe.templates import get_template

logger = logging.getLogger(__name__)

app = typer.Typer(help="Render microservice flows into prompts, diagrams and documents")

FlowArgument = typer.Argument(..., help="Flow document (JSON or YAML)")
CatalogOption = typer.Option(None, "--catalog", "-c", help="Catalog or project document")
TemplateOption = typer.Option(None, "--template", "-t", help="Built-in catalog template")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Path to flowscribe.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Flowscribe CLI entry point."""
    try:
        settings = load_config(str(config) if config else None)
    except (yaml.YAMLError, ValidationError, TypeError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


def _settings(ctx: typer.Context) -> FlowscribeConfig:
    return ctx.obj if isinstance(ctx.obj, FlowscribeConfig) else load_config()


def _fail(exc: FlowscribeError) -> None:
    typer.secho(str(exc), fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _load_inputs(
    flow_path: Path, catalog_path: Optional[Path], template: Optional[str]
) -> Tuple[Flow, Catalog]:
    flow = load_flow(flow_path)
    if catalog_path is not None:
        catalog = load_catalog(catalog_path)
    elif template:
        catalog = get_template(template)
    else:
        logger.warning("No catalog given; every reference will render as unknown")
        catalog = Catalog()
    return flow, catalog


@app.command("render")
def render_command(
    ctx: typer.Context,
    flow_path: Path = FlowArgument,
    catalog_path: Optional[Path] = CatalogOption,
    template: Optional[str] = TemplateOption,
    formats: Optional[List[str]] = typer.Option(
        None, "--format", "-f", help="Output format; repeat for several"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory to write files into (default: stdout)"
    ),
) -> None:
    """
    Render a flow in one or more output formats.

    Example:
        flowscribe render checkout.json --template ecommerce -f sequence -f matrix
        flowscribe render enroll.yaml -c project.json -f prompt -o ./out
    """
    settings = _settings(ctx)
    try:
        flow, catalog = _load_inputs(flow_path, catalog_path, template)
        outputs = render_all(flow, catalog, formats or None, config=settings)
    except FlowscribeError as exc:
        _fail(exc)
        return

    directory = output or (Path(settings.output.directory) if settings.output.directory else None)
    if directory is None:
        sink = StdoutSink()
        for item in outputs:
            sink.write(item)
        return

    sink = FileSink(directory)
    for item in outputs:
        path = sink.write(item)
        typer.echo(f"{item.format}: {path}")


@app.command("formats")
def formats_command() -> None:
    """List available output formats and the filenames they suggest."""
    for name, generator_cls in FORMATS.items():
        typer.echo(f"{name}\t<flow name>{generator_cls.filename_suffix}")


@app.command("inspect")
def inspect_command(
    flow_path: Path = FlowArgument,
    catalog_path: Optional[Path] = CatalogOption,
    template: Optional[str] = TemplateOption,
) -> None:
    """Show statistics, completeness and problems for a flow."""
    try:
        flow, catalog = _load_inputs(flow_path, catalog_path, template)
    except FlowscribeError as exc:
        _fail(exc)
        return

    stats = flow_stats(flow)
    typer.echo(f"Flow: {flow.name} ({flow.status}, {flow.priority})")
    for field, value in stats.model_dump().items():
        typer.echo(f"  {field.replace('_', ' ').capitalize()}: {value}")
    typer.echo(f"Completeness: {completeness(flow)}%")
    typer.echo(f"Sequence: {text_flow(flow, catalog)}")

    problems = validate_flow(flow)
    for problem in problems:
        typer.secho(f"- {problem}", fg=typer.colors.YELLOW)
    for missing in unresolved_references(flow, catalog):
        typer.secho(f"- Unresolved {missing.kind.value}: {missing.id}", fg=typer.colors.YELLOW)


@app.command("validate")
def validate_command(
    flow_path: Path = FlowArgument,
    catalog_path: Optional[Path] = CatalogOption,
    template: Optional[str] = TemplateOption,
) -> None:
    """Exit with status 1 when the flow has structural problems or unknown references."""
    try:
        flow, catalog = _load_inputs(flow_path, catalog_path, template)
    except FlowscribeError as exc:
        _fail(exc)
        return

    problems = validate_flow(flow)
    problems += [
        f"Unresolved {missing.kind.value}: {missing.id}"
        for missing in unresolved_references(flow, catalog)
    ]
    if problems:
        for problem in problems:
            typer.secho(f"- {problem}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(f"Flow {flow.name!r} is valid")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
