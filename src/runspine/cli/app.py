"""
Root Typer application for the run-spine CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from runspine.cli.spec import check, show
from runspine.core.logging import configure_logging
from runspine.core.settings import get_settings

app = Typer(
    name="runspine",
    help="run-spine: validate container run specifications.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from runspine import __version__

        typer.echo(f"run-spine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (defaults to RUNSPINE_LOG_LEVEL)."
    ),
) -> None:
    """run-spine CLI: check and show container run specifications."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_format=settings.log_json,
        service=settings.service_name,
    )


app.command("check")(check)
app.command("show")(show)


if __name__ == "__main__":
    app()
