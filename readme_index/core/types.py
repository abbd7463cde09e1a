"""
Core data types for the README index generator.

This module defines the records passed between pipeline stages:
- ArticleRecord: One markdown file discovered during a directory scan
- SectionResult: All articles found for one section of the index
- GenerationResult: Outcome of a full generation run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ArticleRecord:
    """Represents a markdown article found in a scanned directory.

    Attributes:
        title: Display title extracted from the file (or its base name)
        filename: Base name of the file, e.g. "intro.md"
        relative_path: Path relative to the working directory, "/"-separated
    """
    title: str
    filename: str
    relative_path: str


@dataclass
class SectionResult:
    """Articles collected for one section of the generated index.

    Attributes:
        heading: Section heading rendered as a level-2 markdown heading
        directory: Directory the articles were scanned from
        articles: Records in directory listing order (unsorted)
    """
    heading: str
    directory: Path
    articles: list[ArticleRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.articles)


@dataclass
class GenerationResult:
    """Outcome of a successful generation run."""
    output_path: Path
    sections: list[SectionResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(section.count for section in self.sections)
