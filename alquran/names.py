"""
names.py — Resolve free-text surah names to surah numbers.

Exact lookups go through the metadata maps; anything else is fuzzy
matched against every known spelling of every surah name:
  - Arabic name as written     "الفاتحة"
  - Arabic name, normalized    alef forms unified, tashkeel removed
  - English name               "Al-Fatiha"
  - English name, bare         "al fatiha" (no hyphens or apostrophes)
"""
import re
from functools import lru_cache

from rapidfuzz import fuzz, process, utils

from .arabic import normalize_for_search
from .metadata import SURAH_BY_ARABIC_NAME, SURAH_BY_ENGLISH_NAME, SURAHS
from .models import Surah

# Minimum WRatio score for a fuzzy match to count
MATCH_THRESHOLD = 80

_PREFIX_RE = re.compile(r"^(surah|sura|سورة)\s+", flags=re.IGNORECASE)


def _bare(name: str) -> str:
    return re.sub(r"[-'\s]+", " ", name).strip().lower()


@lru_cache(maxsize=1)
def _surah_names() -> tuple[tuple[str, int], ...]:
    """Return (spelling, surah number) pairs for all surah names."""
    names = []
    for surah in SURAHS:
        names.append((surah.arabic_name, surah.number))
        names.append((normalize_for_search(surah.arabic_name), surah.number))
        names.append((surah.english_name, surah.number))
        names.append((_bare(surah.english_name), surah.number))
    return tuple(names)


def find_by_english_name(name: str) -> Surah | None:
    """Case-insensitive exact lookup by English (transliterated) name."""
    return SURAH_BY_ENGLISH_NAME.get(name.strip().lower())


def find_by_arabic_name(name: str) -> Surah | None:
    """Exact lookup by Arabic name."""
    return SURAH_BY_ARABIC_NAME.get(name.strip())


def match_surah_name(text: str | None) -> int | None:
    """
    Match *text* against known surah names.

    Returns:
        The surah number on an exact or confident fuzzy match
        (score >= MATCH_THRESHOLD), else None.
    """
    if not text or not text.strip():
        return None

    query = _PREFIX_RE.sub("", text.strip())
    exact = find_by_english_name(query) or find_by_arabic_name(query)
    if exact:
        return exact.number

    query = normalize_for_search(query)
    if not query:
        return None

    names = _surah_names()
    best = process.extractOne(
        query,
        [spelling for spelling, _ in names],
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=MATCH_THRESHOLD,
    )
    if best is None:
        return None
    return names[best[2]][1]
