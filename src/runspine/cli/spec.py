"""
CLI: ``runspine check`` and ``runspine show``.

Both commands read one run configuration (JSON, or TOML by ``.toml``
suffix). A top-level ``run`` table is used when present, so the run section
of a larger project file can be pointed at directly.

Usage::

    runspine check run.toml                    # validate, report API need
    runspine check run.json --api-version 1.20 # exit 1 if runtime too old
    runspine show run.toml                     # defaulted spec as JSON

Exit codes: 0 ok, 1 runtime API too old, 2 invalid configuration.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from runspine.core.errors import ConfigurationError, UnsupportedApiVersionError
from runspine.core.logging import LogContext, get_logger
from runspine.core.settings import get_settings
from runspine.run.binding import run_spec_from_mapping
from runspine.run.capability import ensure_api_version
from runspine.run.spec import RunSpec

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

EXIT_TOO_OLD = 1
EXIT_INVALID = 2


def load_document(path: Path) -> dict[str, Any]:
    """Read a JSON or TOML run configuration."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".toml":
        data: Any = tomllib.loads(text)
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a table/object", param_hint="FILE")
    run_section = data.get("run")
    return run_section if isinstance(run_section, dict) else data


def _load_spec(path: Path) -> RunSpec:
    try:
        data = load_document(path)
    except (OSError, ValueError) as exc:
        err_console.print(f"[red]Cannot read {path}:[/] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID) from exc
    with LogContext(source=str(path)):
        try:
            return run_spec_from_mapping(data)
        except ConfigurationError as exc:
            logger.warning("run_spec.invalid", **exc.to_dict())
            err_console.print(f"[red]Invalid run configuration:[/] {escape(exc.message)}")
            raise typer.Exit(code=EXIT_INVALID) from exc


def check(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Run configuration file."),
    api_version: str | None = typer.Option(
        None,
        "--api-version",
        help="Runtime API version to check against (defaults to RUNSPINE_API_VERSION).",
    ),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Validate a run configuration and report the runtime API it needs."""
    spec = _load_spec(file)
    try:
        required = spec.init_and_validate()
    except ConfigurationError as exc:
        err_console.print(f"[red]Invalid run configuration:[/] {escape(exc.message)}")
        raise typer.Exit(code=EXIT_INVALID) from exc

    available = api_version or get_settings().api_version
    satisfied = True
    problem: UnsupportedApiVersionError | None = None
    if available is not None:
        try:
            ensure_api_version(required, available)
        except UnsupportedApiVersionError as exc:
            satisfied = False
            problem = exc
        except ConfigurationError as exc:
            err_console.print(f"[red]{escape(exc.message)}[/]")
            raise typer.Exit(code=EXIT_INVALID) from exc

    if json_out:
        typer.echo(json.dumps({
            "required_api_version": required,
            "available_api_version": available,
            "satisfied": satisfied,
        }))
    else:
        table = Table(title=f"Run configuration: {file.name}")
        table.add_column("Check", style="bold")
        table.add_column("Result")
        table.add_row("argument lists", "[green]ok[/]")
        table.add_row("network", str(spec.networking_mode))
        table.add_row("required API", required or "no elevated requirement")
        if available is not None:
            verdict = "[green]ok[/]" if satisfied else "[red]too old[/]"
            table.add_row("runtime API", f"{available} ({verdict})")
        console.print(table)

    if problem is not None:
        err_console.print(f"[red]{escape(problem.message)}[/]")
        raise typer.Exit(code=EXIT_TOO_OLD)


def show(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Run configuration file."),
) -> None:
    """Print the fully-defaulted run specification as JSON."""
    spec = _load_spec(file)
    typer.echo(json.dumps(spec.to_dict(), indent=2))
