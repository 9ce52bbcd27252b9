"""Typer-based command line interface for abbs-l10n-sync."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .errors import SyncError
from .runner import RunReport, SyncRunner
from .utils.config import load_config
from .utils.logging import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _summary(report: RunReport) -> str:
    return (
        f"Scanned {len(report.scanned)} package(s): {len(report.failures)} failed, "
        f"{report.inserted} inserted, {report.updated} updated, {report.unchanged} unchanged"
    )


@app.command()
def main(
    packages: Optional[List[str]] = typer.Argument(None, help="Package directory names to process; all when omitted."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Regenerate package metadata and merge it into l10n/en.json."""

    configure_logging("DEBUG" if verbose else "INFO")
    if config_path is not None and not config_path.exists():
        raise typer.BadParameter(f"Config {config_path} not found")
    config = load_config(config_path)
    try:
        report = SyncRunner(config).run(packages or None)
    except (SyncError, OSError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    console.print(_summary(report), highlight=False)
    if not report.succeeded:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
