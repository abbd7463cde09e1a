"""Core data types and collation helpers."""

from .collation import russian_sort_key
from .types import ArticleRecord, GenerationResult, SectionResult

__all__ = [
    "ArticleRecord",
    "GenerationResult",
    "SectionResult",
    "russian_sort_key",
]
