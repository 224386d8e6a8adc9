"""cssedit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging

import click

from cssedit import __version__
from cssedit.model.rule import rules_to_dicts
from cssedit.transcoder import (
    escape_for_transport,
    format_css,
    parse_css,
    unescape_from_transport,
)


@click.group()
@click.version_option(version=__version__, prog_name="cssedit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssedit - parse, format and edit CSS as structured rules."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("format")
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
def format_command(cssfile) -> None:
    """Reformat CSSFILE (or - for stdin), one declaration per line.

    Comments and anything the rule scanner does not understand are dropped.
    """
    click.echo(format_css(cssfile.read()))


@cli.command()
@click.argument("cssfile", type=click.File("r", encoding="utf-8"))
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation")
def parse(cssfile, indent: int) -> None:
    """Print the rules found in CSSFILE as JSON."""
    rules = parse_css(cssfile.read())
    click.echo(json.dumps(rules_to_dicts(rules), indent=indent))


@cli.command()
@click.argument("cssfile", type=click.File("rb"))
def escape(cssfile) -> None:
    """Escape CSSFILE for embedding in a JSON string."""
    # binary read keeps line endings exactly as written
    click.echo(escape_for_transport(cssfile.read().decode("utf-8")))


@cli.command()
@click.argument("textfile", type=click.File("r", encoding="utf-8"))
def unescape(textfile) -> None:
    """Turn escaped text from TEXTFILE back into CSS."""
    click.echo(unescape_from_transport(textfile.read().removesuffix("\n")))


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--db", default=None, help="Database path for autosave")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, db: str | None, debug: bool) -> None:
    """Start the editor HTTP API."""
    from dataclasses import replace

    from cssedit.config import EditorConfig
    from cssedit.web.app import create_app

    config = EditorConfig.from_env()
    overrides = {k: v for k, v in {"host": host, "port": port, "db_path": db}.items() if v is not None}
    config = replace(config, **overrides)

    app = create_app(config=config)
    click.echo(f"Starting cssedit on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
