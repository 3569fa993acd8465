"""CLI entry point for sdk-docs."""

import asyncio
import json
import logging
from pathlib import Path

import click
import yaml

from sdk_docs.assets import StaticAssets
from sdk_docs.config import get_settings
from sdk_docs.errors import SdkDocsError
from sdk_docs.platforms import Platform
from sdk_docs.specs import get_service, list_services


def _load_assets(specs_dir: Path | None, examples_dir: Path | None, with_examples: bool = True) -> StaticAssets:
    """Build the asset tables, falling back to configured directories."""
    settings = get_settings()
    return StaticAssets.from_directories(
        specs_dir or settings.specs_dir,
        (examples_dir or settings.examples_dir) if with_examples else None,
    )


def _render(data: dict, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """SDK Docs: extract SDK method documentation from OpenAPI specs."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("version")
@click.argument("platform")
@click.argument("service_name", metavar="SERVICE")
@click.option("--specs-dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Directory holding open-api3-*.json files.")
@click.option("--examples-dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Root directory of example snippets.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the result to this file instead of stdout.")
def service(version: str, platform: str, service_name: str, specs_dir: Path | None, examples_dir: Path | None, fmt: str, output: Path | None):
    """Extract the documented methods of one service."""
    assets = _load_assets(specs_dir, examples_dir)
    try:
        result = asyncio.run(get_service(version, platform, service_name, assets))
    except SdkDocsError as e:
        raise click.ClickException(str(e)) from e

    text = _render(result.model_dump(mode="json", by_alias=True), fmt)
    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Wrote {len(result.methods)} methods to {output}", err=True)


@main.command()
@click.argument("version")
@click.argument("platform")
@click.option("--specs-dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Directory holding open-api3-*.json files.")
def services(version: str, platform: str, specs_dir: Path | None):
    """List the services (tags) declared by a spec."""
    assets = _load_assets(specs_dir, None, with_examples=False)
    try:
        infos = asyncio.run(list_services(version, platform, assets))
    except SdkDocsError as e:
        raise click.ClickException(str(e)) from e

    for info in infos:
        click.echo(f"{info.name}: {info.description}" if info.description else info.name)


@main.command()
def platforms():
    """List the known platform identifiers."""
    for platform in Platform:
        click.echo(platform.value)
