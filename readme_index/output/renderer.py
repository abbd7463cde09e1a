"""Markdown rendering of the article index."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from readme_index.core.collation import russian_sort_key
from readme_index.core.types import ArticleRecord, SectionResult

EMPTY_SECTION_PLACEHOLDER = "*Статьи не найдены*"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults.
_SEGMENT_SAFE = "!*'()"


def encode_markdown_path(path: str) -> str:
    """Percent-encode each ``/``-separated segment of a link target."""
    return "/".join(quote(part, safe=_SEGMENT_SAFE) for part in path.split("/"))


def render_section(articles: Iterable[ArticleRecord], heading: str) -> str:
    """Render one level-2 section of links sorted by Russian collation."""
    items = sorted(articles, key=lambda article: russian_sort_key(article.title))
    if not items:
        return f"## {heading}\n\n{EMPTY_SECTION_PLACEHOLDER}\n\n"

    lines = [f"## {heading}", ""]
    for article in items:
        lines.append(f"- [{article.title}]({encode_markdown_path(article.relative_path)})")
    lines.append("")
    lines.append("")
    return "\n".join(lines)


def render_readme(sections: Iterable[SectionResult], title: str, description: str) -> str:
    """Render the full index document: preamble followed by every section."""
    parts = [f"# {title}\n\n{description}\n\n---\n\n"]
    for section in sections:
        parts.append(render_section(section.articles, section.heading))
    return "".join(parts)
