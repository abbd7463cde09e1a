"""
Command-line interface for the README index generator.

Uses Typer to expose a single command. Run with no arguments from the
repository root to regenerate README.md from ``ru/`` and ``articles/``.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .runner import ReadmeWriteError, generate_readme
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def generate(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="Optional YAML config file overriding the built-in defaults.",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Regenerate README.md from the markdown articles in the working directory.

    Args:
        config: Optional path to YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level

    setup_logging(cfg.logging, console=console)

    try:
        result = generate_readme(cfg)
    except ReadmeWriteError as exc:
        console.print(f"[bold red]❌ Error writing {escape(str(exc.path))}:[/bold red] {escape(str(exc.error))}")
        raise typer.Exit(code=1)

    console.print(f"✅ {escape(str(result.output_path))} generated successfully!")
    for section in result.sections:
        console.print(f"  {escape(section.heading)}: {section.count}")
    console.print(f"📊 Total articles: {result.total}")


if __name__ == "__main__":
    app()
