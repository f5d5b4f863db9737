"""
alquran: Quran text, metadata, diacritics-insensitive search and highlighting.
"""

from .arabic import (
    is_mark_character,
    normalize_for_search,
    strip_diacritics,
    strip_diacritics_with_map,
    unify_alef_forms,
)
from .enums import RevelationType, SajdaType, ScriptType, SurahName, TranslationEdition
from .exceptions import (
    AyahNotFoundError,
    JuzNotFoundError,
    ManzilNotFoundError,
    QuranError,
    SurahNotFoundError,
    TranslationNotFoundError,
    VerseReferenceError,
)
from .highlight import highlight_match
from .metadata import (
    TOTAL_AYAHS,
    TOTAL_HIZB_QUARTERS,
    TOTAL_JUZ,
    TOTAL_MANZILS,
    TOTAL_PAGES,
    TOTAL_SAJDAS,
    TOTAL_SURAHS,
)
from .models import (
    Ayah,
    Juz,
    Manzil,
    MuqattaatSurah,
    SajdaVerse,
    SearchResult,
    Surah,
    TranslatedAyah,
    TranslationInfo,
    TranslationSearchResult,
    VerseReference,
)
from .quran import Quran

__all__ = [
    # Main entry point
    "Quran",
    # Normalization
    "strip_diacritics",
    "strip_diacritics_with_map",
    "unify_alef_forms",
    "normalize_for_search",
    "is_mark_character",
    # Highlighting
    "highlight_match",
    # Enums
    "ScriptType",
    "RevelationType",
    "SajdaType",
    "SurahName",
    "TranslationEdition",
    # Models
    "Surah",
    "Ayah",
    "Juz",
    "Manzil",
    "SajdaVerse",
    "MuqattaatSurah",
    "SearchResult",
    "TranslationInfo",
    "TranslatedAyah",
    "TranslationSearchResult",
    "VerseReference",
    # Errors
    "QuranError",
    "SurahNotFoundError",
    "AyahNotFoundError",
    "JuzNotFoundError",
    "ManzilNotFoundError",
    "TranslationNotFoundError",
    "VerseReferenceError",
    # Constants
    "TOTAL_SURAHS",
    "TOTAL_AYAHS",
    "TOTAL_JUZ",
    "TOTAL_SAJDAS",
    "TOTAL_PAGES",
    "TOTAL_HIZB_QUARTERS",
    "TOTAL_MANZILS",
]
