"""Russian collation sort keys built on the Unicode Collation Algorithm.

The CLDR ``ru`` tailoring is the root collation with the Cyrillic script
reordered ahead of every other script. pyuca gives us the root (DUCET)
weights; the reorder is applied by remapping primary weights.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from pyuca import Collator

_CYRILLIC_BLOCKS = (range(0x0400, 0x0530), range(0x1C80, 0x1C90), range(0x2DE0, 0x2E00), range(0xA640, 0xA6A0))


class RussianCollator:
    """Produce sort keys that order strings the way the ``ru`` locale does."""

    def __init__(self, collator: Collator | None = None) -> None:
        self._collator = collator or Collator()
        self._letters_start = self._primary("a")
        self._cyrillic_start, self._cyrillic_end = self._cyrillic_range()

    def sort_key(self, text: str) -> tuple[int, ...]:
        key = self._collator.sort_key(text)
        # Primary weights run up to the first level separator.
        try:
            split = key.index(0)
        except ValueError:
            split = len(key)
        primaries = tuple(self._reorder(weight) for weight in key[:split])
        return primaries + tuple(key[split:])

    def _reorder(self, weight: int) -> int:
        if self._cyrillic_start <= weight <= self._cyrillic_end:
            return weight - self._cyrillic_start + self._letters_start
        if self._letters_start <= weight < self._cyrillic_start:
            return weight + (self._cyrillic_end - self._cyrillic_start + 1)
        return weight

    def _primary(self, char: str) -> int:
        return self._collator.sort_key(char)[0]

    def _cyrillic_range(self) -> tuple[int, int]:
        weights = []
        for block in _CYRILLIC_BLOCKS:
            for codepoint in block:
                char = chr(codepoint)
                if not unicodedata.category(char).startswith("L"):
                    continue
                key = self._collator.sort_key(char)
                if key and key[0]:
                    weights.append(key[0])
        return min(weights), max(weights)


@lru_cache(maxsize=1)
def get_collator() -> RussianCollator:
    """Return the process-wide collator (DUCET loading is slow)."""
    return RussianCollator()


def russian_sort_key(text: str) -> tuple[int, ...]:
    """Sort key for ``sorted(..., key=...)`` using Russian collation rules."""
    return get_collator().sort_key(text)
