"""
Word and letter statistics over ayah text.
"""

from typing import Iterable

from .arabic import normalize_for_search, strip_diacritics
from .models import Ayah


def count_words(text: str) -> int:
    if not text or not text.strip():
        return 0
    return len(text.split())


def count_letters(text: str) -> int:
    """Count non-whitespace characters, ignoring tashkeel."""
    if not text or not text.strip():
        return 0
    return sum(1 for c in strip_diacritics(text) if not c.isspace())


def unique_words(ayahs: Iterable[Ayah]) -> set[str]:
    """Distinct words after tashkeel removal and Alef unification."""
    words = set()
    for ayah in ayahs:
        words.update((normalize_for_search(ayah.text) or "").split())
    return words
