"""
Search module: diacritics-insensitive search over the verse text, and
plain substring search over translations.
"""

from .arabic import normalize_for_search
from .enums import ScriptType, SurahName, TranslationEdition
from .exceptions import TranslationNotFoundError
from .metadata import SURAH_BY_NUMBER, TOTAL_SURAHS, resolve_surah_number
from .models import SearchResult, TranslationSearchResult
from .provider import TextProvider


def _surah_scope(surah: int | SurahName | None) -> list[int]:
    """Surah numbers to scan, in corpus order. Raises for an unknown surah."""
    if surah is None:
        return list(range(1, TOTAL_SURAHS + 1))
    return [resolve_surah_number(surah)]


def search(provider: TextProvider, term: str | None,
           surah: int | SurahName | None = None,
           script_type: ScriptType = ScriptType.UTHMANI) -> list[SearchResult]:
    """
    Find ayahs containing *term*, ignoring tashkeel, Alef form and case.

    Args:
        provider: Source of the verse text
        term: Search term as typed by the user
        surah: Restrict to one surah, or None for the whole Quran
        script_type: Text variant to search

    Returns:
        One SearchResult per matching ayah, ordered by surah then ayah.
        The result text is the original verse, not the normalized form.
        A blank term gives an empty list without reading any text.

    Raises:
        SurahNotFoundError: If *surah* is not 1-114
    """
    if not term or not term.strip():
        return []

    surah_numbers = _surah_scope(surah)

    needle = normalize_for_search(term)
    if not needle:
        return []
    needle = needle.lower()

    results = []
    for number in surah_numbers:
        surah_name = SURAH_BY_NUMBER[number].english_name
        for ayah in provider.ayahs_for_surah(number, script_type):
            if needle in normalize_for_search(ayah.text).lower():
                results.append(SearchResult(
                    surah_number=ayah.surah_number,
                    ayah_number=ayah.ayah_number,
                    text=ayah.text,
                    surah_name=surah_name,
                    matched_text=term,
                ))

    return results


def search_translation(provider: TextProvider, term: str | None,
                       edition: TranslationEdition,
                       surah: int | SurahName | None = None) -> list[TranslationSearchResult]:
    """
    Case-insensitive substring search within one translation.

    Raises:
        SurahNotFoundError: If *surah* is not 1-114
        TranslationNotFoundError: If the edition has no data
    """
    if not term or not term.strip():
        return []

    surah_numbers = _surah_scope(surah)

    if not provider.is_translation_available(edition):
        raise TranslationNotFoundError(f"Translation '{edition.name}' is not available.")

    needle = term.lower()
    results = []
    for number in surah_numbers:
        surah_name = SURAH_BY_NUMBER[number].english_name
        for ayah in provider.translations_for_surah(number, edition):
            if needle in ayah.text.lower():
                results.append(TranslationSearchResult(
                    surah_number=ayah.surah_number,
                    ayah_number=ayah.ayah_number,
                    text=ayah.text,
                    surah_name=surah_name,
                    matched_text=term,
                    edition=edition,
                ))

    return results
