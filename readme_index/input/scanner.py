"""
Markdown article discovery.

Scans a directory (non-recursively) for ``.md`` files and pulls a display
title out of each one. Unreadable files and missing directories are logged
and skipped; a scan never raises.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from readme_index.core.types import ArticleRecord
from readme_index.utils.logging import log_event

logger = logging.getLogger("readme_index.scanner")

MARKDOWN_SUFFIX = ".md"
TITLE_MARKERS = ("# ", "### ")

_LEADING_HASHES = re.compile(r"^#+[\s\ufeff]*")
# str.strip() keeps U+FEFF, so a BOM would hide a heading on the first line.
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trim(text: str) -> str:
    return _EDGE_SPACE.sub("", text)


def _fallback_title(path: Path) -> str:
    name = path.name
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def extract_title(path: Path | str) -> str:
    """Return the display title of a markdown file.

    The first line starting with ``# `` or ``### `` (after stripping
    whitespace) is the title; both markers rank the same and ``##`` is never
    considered. Files without such a line, or that cannot be read, fall back
    to the file name without its ``.md`` extension.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log_event(
            logger,
            f"Could not read {path}: {exc}",
            level=logging.WARNING,
            event="title_read_failed",
            path=str(path),
        )
        return _fallback_title(path)

    for line in content.split("\n"):
        stripped = _trim(line)
        if stripped.startswith(TITLE_MARKERS):
            return _trim(_LEADING_HASHES.sub("", stripped))

    return _fallback_title(path)


def _relative_posix(path: Path) -> str:
    return Path(os.path.relpath(path, Path.cwd())).as_posix()


def scan_directory(directory: Path | str) -> list[ArticleRecord]:
    """Collect an ArticleRecord for every ``.md`` file directly in ``directory``.

    Subdirectories are not descended into. Records keep the order the
    filesystem lists them in.
    """
    directory = Path(directory)
    articles: list[ArticleRecord] = []

    try:
        for entry in directory.iterdir():
            if not entry.is_file() or entry.suffix != MARKDOWN_SUFFIX:
                continue
            record = ArticleRecord(
                title=extract_title(entry),
                filename=entry.name,
                relative_path=_relative_posix(entry),
            )
            log_event(
                logger,
                f"Found article: {record.title}",
                level=logging.DEBUG,
                event="article_found",
                path=record.relative_path,
            )
            articles.append(record)
    except OSError as exc:
        log_event(
            logger,
            f"Could not scan directory {directory}: {exc}",
            level=logging.WARNING,
            event="scan_failed",
            directory=str(directory),
        )

    return articles
