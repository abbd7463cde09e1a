"""
Pipeline orchestration for the README index generator.

This module coordinates the whole run:
1. Scan the translated and original article directories
2. Render the index document
3. Overwrite the output file

Scan failures degrade to empty sections. Only a failure to write the output
file is fatal, and it is raised as ReadmeWriteError for the CLI to report.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import AppConfig
from .core.types import GenerationResult, SectionResult
from .input.scanner import scan_directory
from .output.renderer import render_readme
from .utils.logging import log_event

logger = logging.getLogger("readme_index.runner")


class ReadmeIndexError(Exception):
    """Base class for errors that stop a generation run."""


class ReadmeWriteError(ReadmeIndexError):
    """The output file could not be written."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"Failed to write {path}: {error}")
        self.path = path
        self.error = error


def _scan_section(directory: str, heading: str) -> SectionResult:
    articles = scan_directory(directory)
    log_event(
        logger,
        f"Found {len(articles)} articles in {directory}/",
        event="section_scanned",
        directory=directory,
        count=len(articles),
    )
    return SectionResult(heading=heading, directory=Path(directory), articles=articles)


def generate_readme(cfg: AppConfig | None = None) -> GenerationResult:
    """Scan the article directories and rewrite the index file.

    Args:
        cfg: Configuration; defaults scan ``ru`` and ``articles`` and write
            ``README.md`` in the current working directory.

    Returns:
        The written path together with the per-section scan results.

    Raises:
        ReadmeWriteError: If the output file cannot be written.
    """
    cfg = cfg or AppConfig()
    log_event(logger, f"Generating {cfg.output.filename}...", event="generation_started")

    sections = [
        _scan_section(cfg.scan.translated_dir, cfg.scan.translated_heading),
        _scan_section(cfg.scan.original_dir, cfg.scan.original_heading),
    ]

    content = render_readme(sections, title=cfg.output.title, description=cfg.output.description)

    output_path = Path(cfg.output.filename)
    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReadmeWriteError(output_path, exc) from exc

    result = GenerationResult(output_path=output_path, sections=sections)
    log_event(
        logger,
        f"Wrote {output_path} with {result.total} articles",
        event="generation_finished",
        output=str(output_path),
        total=result.total,
    )
    return result
