"""
README Index - markdown article index generator.

This package scans the ``ru/`` (translated) and ``articles/`` (original)
directories for markdown files, extracts a title from each, and rewrites
README.md with links grouped by section and sorted with Russian collation.

Main entry point is the CLI via the `readme-index` command.

Example:
    $ readme-index
"""

__all__ = [
    "__version__",
    "ArticleRecord",
    "encode_markdown_path",
    "extract_title",
    "generate_readme",
    "render_section",
    "scan_directory",
]
__version__ = "0.1.0"

from .core.types import ArticleRecord
from .input.scanner import extract_title, scan_directory
from .output.renderer import encode_markdown_path, render_section
from .runner import generate_readme
