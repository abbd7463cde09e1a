"""End-to-end tests for the generation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from readme_index.config import AppConfig
from readme_index.runner import ReadmeWriteError, generate_readme


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_generate_readme_links_both_sections(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "ru" / "intro.md", "# Введение\n\nТекст.\n")
    _write(tmp_path / "articles" / "setup.md", "Plain text without headings.\n")

    result = generate_readme()

    text = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert "- [Введение](ru/intro.md)" in text
    assert "- [setup](articles/setup.md)" in text
    assert text.index("## 📖 Переведенные статьи") < text.index("## 📖 Статьи")
    assert text.startswith("# Коллекция статей\n\n")
    assert result.output_path == Path("README.md")
    assert [section.count for section in result.sections] == [1, 1]
    assert result.total == 2


def test_generate_readme_missing_directories_render_placeholders(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = generate_readme()

    text = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert text.count("*Статьи не найдены*") == 2
    assert result.total == 0


def test_generate_readme_overwrites_existing_output(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "README.md", "stale content that must disappear")
    _write(tmp_path / "ru" / "a.md", "### Заметка\n")

    generate_readme()

    text = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert "stale content" not in text
    assert "- [Заметка](ru/a.md)" in text


def test_generate_readme_respects_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "translated" / "x.md", "# X\n")
    cfg = AppConfig()
    cfg.scan.translated_dir = "translated"
    cfg.output.filename = "INDEX.md"

    generate_readme(cfg)

    assert "- [X](translated/x.md)" in (tmp_path / "INDEX.md").read_text(encoding="utf-8")
    assert not (tmp_path / "README.md").exists()


def test_generate_readme_write_failure_raises(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "README.md").mkdir()

    with pytest.raises(ReadmeWriteError) as excinfo:
        generate_readme()

    assert excinfo.value.path == Path("README.md")
    assert isinstance(excinfo.value.error, OSError)
