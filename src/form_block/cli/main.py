"""
form-block CLI
===============
Command-line interface for the form-block library.

Commands:
    render      Decorate the form block of an HTML page (or a JSON definition)
    inspect     Show the normalized form model
    version     Show version information

Usage::

    form-block render page.html --base-path /base -o rendered.html
    form-block inspect form.json --format json
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from bs4 import BeautifulSoup, Tag
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import RuntimeConfig, get_config, reload_config
from ..decorator import FormDecorator
from ..dom.block import find_form_block, new_document
from ..errors import FormBlockError
from ..transform.form_model import decode_payload

console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_input(input_path: Path) -> tuple[BeautifulSoup, Tag | dict]:
    """Return the document and the block (or JSON definition) to decorate."""
    text = input_path.read_text(encoding="utf-8")
    if input_path.suffix.lower() == ".json":
        try:
            definition = decode_payload(text)
        except FormBlockError as e:
            raise click.BadParameter(str(e), param_hint="INPUT") from e
        return new_document(), definition

    document = new_document(text)
    block = find_form_block(document)
    if block is None:
        raise click.BadParameter("no form block found", param_hint="INPUT")
    return document, block


@click.group()
@click.version_option(version=__version__, prog_name="form-block")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="YAML runtime configuration file")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """
    form-block – render Adaptive Form and document-based form blocks.
    """
    config = reload_config(config_path) if config_path else get_config()
    _configure_logging(config.log_level)
    ctx.obj = config


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--base-path", default=None, help="Code base path (overrides configuration)")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Output file (default: stdout)")
@click.pass_obj
def render(
    config: RuntimeConfig,
    input_path: Path,
    base_path: str | None,
    output: Path | None,
) -> None:
    """Render the form block of INPUT (HTML page or JSON definition)."""
    if base_path is not None:
        config = config.model_copy(update={"code_base_path": base_path})

    document, block = _load_input(input_path)
    decorator = FormDecorator(block, document=document, config_provider=lambda: config)
    try:
        asyncio.run(decorator.decorate())
    except FormBlockError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    if isinstance(block, dict):
        document.body.append(decorator.block)

    html = str(document)
    if output:
        output.write_text(html, encoding="utf-8")
        console.print(f"[green]✓[/green] Rendered form written to [bold]{output}[/bold]")
    else:
        click.echo(html)


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "output_format", type=click.Choice(["rich", "json"]), default="rich")
def inspect(input_path: Path, output_format: str) -> None:
    """Show the normalized form model of INPUT."""
    document, block = _load_input(input_path)
    try:
        model = FormDecorator(block, document=document).normalize()
    except FormBlockError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(model.model_dump(mode="json"), indent=2))
        return

    out = Console()
    out.print(Panel(
        f"[bold]{input_path.name}[/bold]\n"
        f"Source: [cyan]{model.source_kind.value}[/cyan]  |  "
        f"Fields: [cyan]{len(model.fields)}[/cyan]  |  "
        f"Style: {model.style_path or '-'}",
        title="Form Model",
        border_style="cyan",
    ))

    if model.fields:
        t = Table(title="Fields", box=box.ROUNDED)
        t.add_column("#", style="dim")
        t.add_column("Name")
        t.add_column("Kind")
        t.add_column("Label")
        t.add_column("Required")
        t.add_column("Default")
        t.add_column("Group")

        for i, field in enumerate(model.fields, 1):
            t.add_row(
                str(i),
                f"[cyan]{field.id}[/cyan]",
                field.kind,
                field.label or "-",
                "✓" if field.required else "-",
                field.default or "-",
                field.group or "-",
            )
        out.print(t)


# ---------------------------------------------------------------------------
# version info
# ---------------------------------------------------------------------------


@cli.command("version")
def show_version() -> None:
    """Show version information."""
    Console().print(Panel(
        f"[bold cyan]form-block[/bold cyan] v{__version__}\n\n"
        "Renders Adaptive Form and document-based form blocks to HTML\n"
        "Inputs:  Adaptive Form JSON, sheet payloads in <pre><code>\n"
        "Styles:  style:/css: rows and properties.style",
        title="form-block",
        border_style="cyan",
    ))


if __name__ == "__main__":
    cli()
