"""Command-line interface for preferredimage."""

import asyncio
import json
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from preferredimage import __version__
from preferredimage.api.models import DetectRequest, ImagePayload, SelectRequest
from preferredimage.config import load_config
from preferredimage.core.detector import LanguageDetector
from preferredimage.core.orchestrator import SelectionOrchestrator
from preferredimage.models.image import ImageType
from preferredimage.providers.aggregator import ImageAggregator
from preferredimage.utils.language import language_name
from preferredimage.utils.logger import setup_logging


def load_request(path: Path, model):
    """Load a YAML or JSON request file into a request model.

    Args:
        path: Request file path
        model: Pydantic model class to validate against

    Returns:
        Validated model instance

    Raises:
        click.ClickException: If the file is unreadable or invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise click.ClickException(f"Could not read request file {path}: {e}")

    try:
        return model.model_validate(raw or {})
    except ValidationError as e:
        raise click.ClickException(f"Invalid request file {path}:\n{e}")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (defaults to built-in defaults)",
)
@click.pass_context
def cli(ctx, config):
    """preferredimage - Language-aware artwork selection."""
    try:
        cfg = load_config(config)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

        setup_logging(cfg.logging)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("request", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def detect(ctx, request):
    """Detect the original language of the item in REQUEST."""
    payload = load_request(request, DetectRequest)

    item = payload.item.to_item()
    language = LanguageDetector().detect_original_language(item)

    click.echo(f"{item.name}: {language} ({language_name(language)})")


@cli.command()
@click.argument("request", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--type",
    "-t",
    "types",
    multiple=True,
    type=click.Choice(["primary", "logo", "thumb", "backdrop"]),
    help="Image type to select (repeatable; defaults to configured types)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the selection as JSON")
@click.pass_context
def select(ctx, request, types, as_json):
    """Select the best image per type for the item and candidates in REQUEST."""
    payload = load_request(request, SelectRequest)
    config = ctx.obj["config"]

    orchestrator = SelectionOrchestrator(
        supported_types=config.image_types,
        default_metadata_language=config.metadata_language,
    )
    item = payload.item.to_item()
    requested_types = [ImageType(value) for value in types] if types else payload.types

    aggregator = ImageAggregator(
        payload.image_sources(),
        timeout_seconds=config.providers.source_timeout_seconds,
    )
    images = asyncio.run(aggregator.collect(item))
    result = orchestrator.select(item, images, requested_types)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "item": item.name,
                    "originalLanguage": result.original_language,
                    "metadataLanguage": result.metadata_language,
                    "candidates": result.candidates,
                    "selected": [
                        ImagePayload.from_image(image).model_dump(mode="json", exclude_none=True)
                        for image in result.images
                    ],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    click.echo(f"Item: {item.name}")
    click.echo(
        f"Original language: {result.original_language} "
        f"({language_name(result.original_language)})"
    )
    click.echo(f"Metadata language: {result.metadata_language}")
    click.echo(f"Candidates: {result.candidates}")
    click.echo("")

    if not result.images:
        click.secho("⊘ No images selected", fg="yellow")
        return

    for image in result.images:
        click.secho(f"✓ {image}", fg="green")
        if image.url:
            click.echo(f"  {image.url}")


@cli.command()
@click.pass_context
def daemon(ctx):
    """Start the HTTP API server."""
    config = ctx.obj["config"]

    click.echo("Starting preferredimage daemon...")
    click.echo(f"Listening on {config.api.host}:{config.api.port}")
    click.echo("")
    click.echo("Endpoints:")
    click.echo(f"  - Detect language: http://{config.api.host}:{config.api.port}/detect")
    click.echo(f"  - Select images:   http://{config.api.host}:{config.api.port}/select")
    click.echo(f"  - Health check:    http://{config.api.host}:{config.api.port}/health")
    click.echo(f"  - API docs:        http://{config.api.host}:{config.api.port}/docs")
    click.echo("")
    click.echo("Press Ctrl+C to stop")
    click.echo("")

    from preferredimage.daemon import start_daemon

    try:
        start_daemon(config)
    except KeyboardInterrupt:
        click.echo("\n\nDaemon stopped")
        sys.exit(0)


@cli.command()
def version():
    """Show version information."""
    click.echo(f"preferredimage v{__version__}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
