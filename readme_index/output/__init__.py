"""Output rendering helpers."""

from .renderer import encode_markdown_path, render_readme, render_section

__all__ = [
    "encode_markdown_path",
    "render_readme",
    "render_section",
]
