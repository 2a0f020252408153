"""Typer CLI entrypoint for searchurl."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from core.orchestrator.pipeline import SearchUrlParser
from core.templates.config_loader import load_config
from core.utils.errors import ArgumentCountError, ConfigError, PlaceholderError
from core.utils.log_events import log_event

app = typer.Typer(
    help="Replace {search\\D} placeholders in URLs with search queries.",
    rich_markup_mode=None,
    add_completion=False,
)
logger = logging.getLogger("searchurl.cli")


@app.command(
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)
def parse_command(
    urls: Annotated[
        str | None,
        typer.Argument(help='URLs delimited by "<|>", each optionally followed by "<>" data.'),
    ] = None,
    queries: Annotated[
        list[str] | None,
        typer.Argument(help='Search queries delimited by "%%"; all fragments are joined.'),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            dir_okay=False,
            help="YAML file overriding engine constants; defaults to $SEARCHURL_CONFIG.",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log substitution events to stderr.")
    ] = False,
) -> None:
    """Print the URLs with every placeholder replaced, joined by "<|>"."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s %(levelname)s %(message)s",
        )

    args = [] if urls is None else [urls, *(queries or [])]

    try:
        engine_config = load_config(config)
        result = SearchUrlParser(engine_config).run(args)
    except ArgumentCountError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except ConfigError as exc:
        typer.echo(f"error_: {exc}")
        raise typer.Exit(code=1) from exc
    except PlaceholderError as exc:
        log_event(logger, logging.DEBUG, "failed", error_type=type(exc).__name__)
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    if result is None:
        raise typer.Exit(code=0)

    log_event(logger, logging.DEBUG, "done", length=len(result))
    typer.echo(result)


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
