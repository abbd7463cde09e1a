"""
Configuration management using YAML files and dataclasses.

The defaults reproduce the tool's fixed behaviour: scan ``ru`` and
``articles`` in the working directory and write ``README.md``. A YAML file
can override any field. Configuration sections:
- ScanConfig: Which directories to scan and how their sections are titled
- OutputConfig: Output file and document preamble
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class ScanConfig:
    """Configuration for the scanned article directories.

    Attributes:
        translated_dir: Directory holding translated articles
        translated_heading: Section heading for translated articles
        original_dir: Directory holding original articles
        original_heading: Section heading for original articles
    """

    translated_dir: str = "ru"
    translated_heading: str = "📖 Переведенные статьи"
    original_dir: str = "articles"
    original_heading: str = "📖 Статьи"


@dataclass
class OutputConfig:
    """Configuration for the generated document.

    Attributes:
        filename: Output file, relative to the working directory
        title: Level-1 heading at the top of the document
        description: Sentence printed under the title
    """

    filename: str = "README.md"
    title: str = "Коллекция статей"
    description: str = (
        "Этот репозиторий содержит коллекцию статей по программированию, "
        "разработке и технологиям."
    )


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
    """

    level: str = "INFO"
    console: bool = True


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return _fromdict(asdict(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise TypeError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")

    return _merge_config(DEFAULT_CONFIG, raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        scan=ScanConfig(**data["scan"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
