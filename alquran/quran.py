"""
quran.py — Main entry point for Quran text, metadata and search.

Usage:
    quran = Quran()
    quran.get_surah(2).english_name          # "Al-Baqarah"
    quran.get_ayah("2:255").text
    quran.search("الرحمن", surah=1)
"""
import datetime
import logging
import random
import threading
from pathlib import Path
from typing import Callable

from . import config, metadata, search as _search, stats
from .enums import RevelationType, SajdaType, ScriptType, SurahName, TranslationEdition
from .exceptions import (
    AyahNotFoundError,
    JuzNotFoundError,
    ManzilNotFoundError,
    SurahNotFoundError,
    TranslationNotFoundError,
)
from .highlight import highlight_match
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
from .names import find_by_arabic_name, find_by_english_name, match_surah_name
from .provider import TextProvider

logger = logging.getLogger(__name__)

SurahRef = int | SurahName


def _default_script() -> ScriptType:
    try:
        return ScriptType(config.DEFAULT_SCRIPT)
    except ValueError:
        logger.warning(f"Unknown script '{config.DEFAULT_SCRIPT}', using uthmani")
        return ScriptType.UTHMANI


class Quran:
    """
    Read-only access to the Quran.

    Metadata is always available. Verse text and translations are read
    from *data_dir* on first use; if the files are missing those
    lookups behave as if the text were empty.
    """

    def __init__(self, data_dir: Path | str | None = None,
                 script_type: ScriptType | None = None):
        """
        Args:
            data_dir: Directory holding the text files (default: config.DATA_DIR)
            script_type: Default script for text lookups (default: config.DEFAULT_SCRIPT)
        """
        self.provider = TextProvider(data_dir)
        self.script_type = script_type or _default_script()
        self._random = random.Random()
        self._random_lock = threading.Lock()

    def _script(self, script_type: ScriptType | None) -> ScriptType:
        return script_type or self.script_type

    def _require_surah(self, surah: SurahRef) -> int:
        return metadata.resolve_surah_number(surah)

    # ---------------------------------------------------------------------
    # Surahs
    # ---------------------------------------------------------------------

    def get_surah(self, surah: SurahRef | str) -> Surah:
        """
        Get a surah by number, SurahName or English name.

        Raises:
            SurahNotFoundError: If no such surah exists
            ValueError: If a blank name is given
        """
        if isinstance(surah, str):
            return self.get_surah_by_name(surah)
        return metadata.SURAH_BY_NUMBER[self._require_surah(surah)]

    def get_surah_by_name(self, english_name: str) -> Surah:
        """Case-insensitive lookup by English name, e.g. "al-fatiha"."""
        if not english_name or not english_name.strip():
            raise ValueError("Surah name cannot be empty.")
        found = find_by_english_name(english_name)
        if found is None:
            raise SurahNotFoundError(
                f"Surah with name '{english_name}' was not found.", name=english_name
            )
        return found

    def get_surah_by_arabic_name(self, arabic_name: str) -> Surah:
        if not arabic_name or not arabic_name.strip():
            raise ValueError("Surah name cannot be empty.")
        found = find_by_arabic_name(arabic_name)
        if found is None:
            raise SurahNotFoundError(
                f"Surah with Arabic name '{arabic_name}' was not found.", name=arabic_name
            )
        return found

    def get_surah_or_none(self, surah: SurahRef | str | None) -> Surah | None:
        if surah is None:
            return None
        if isinstance(surah, str):
            return find_by_english_name(surah) if surah.strip() else None
        return metadata.SURAH_BY_NUMBER.get(int(surah))

    def match_surah_name(self, text: str) -> Surah | None:
        """Resolve loosely spelled input ("baqara", "سورة الكهف") to a surah."""
        number = match_surah_name(text)
        return metadata.SURAH_BY_NUMBER[number] if number else None

    def get_all_surahs(self) -> list[Surah]:
        return list(metadata.SURAHS)

    def get_meccan_surahs(self) -> list[Surah]:
        return [s for s in metadata.SURAHS if s.revelation_type == RevelationType.MECCAN]

    def get_medinan_surahs(self) -> list[Surah]:
        return [s for s in metadata.SURAHS if s.revelation_type == RevelationType.MEDINAN]

    def get_surahs_by_revelation_order(self) -> list[Surah]:
        return sorted(metadata.SURAHS, key=lambda s: s.revelation_order)

    def get_surahs_by_juz(self, juz_number: int) -> list[Surah]:
        """All surahs that have at least one ayah in the given juz."""
        if not self.is_valid_juz(juz_number):
            raise JuzNotFoundError(f"Juz number {juz_number} is invalid. Valid range is 1-30.")
        return [s for s in metadata.SURAHS if s.juz_start <= juz_number <= s.juz_end]

    def is_valid_surah(self, surah: SurahRef | str | None) -> bool:
        return self.get_surah_or_none(surah) is not None

    def get_surah_names(self, start: int = 1, end: int = metadata.TOTAL_SURAHS) -> list[tuple[int, str, str]]:
        """Return (number, english_name, arabic_name) for surahs start..end."""
        return [(s.number, s.english_name, s.arabic_name)
                for s in metadata.SURAHS if start <= s.number <= end]

    def get_ayah_count(self, surah: SurahRef) -> int:
        return self.get_surah(surah).ayah_count

    def get_bismillah(self, script_type: ScriptType | None = None) -> str:
        if self._script(script_type) == ScriptType.UTHMANI:
            return metadata.BISMILLAH_UTHMANI
        return metadata.BISMILLAH_SIMPLE

    # ---------------------------------------------------------------------
    # Ayahs
    # ---------------------------------------------------------------------

    def get_ayah(self, surah: SurahRef | str, ayah: int | None = None,
                 script_type: ScriptType | None = None) -> Ayah:
        """
        Get one ayah, either as get_ayah(2, 255) or get_ayah("2:255").

        Raises:
            VerseReferenceError: If a reference string is malformed
            SurahNotFoundError: If the surah does not exist
            AyahNotFoundError: If the ayah does not exist in that surah
        """
        if isinstance(surah, str):
            reference = VerseReference.parse(surah)
            surah, ayah = reference.surah_number, reference.ayah_number

        number = self._require_surah(surah)
        found = None if ayah is None else self.provider.ayah(number, ayah, self._script(script_type))
        if found is None:
            raise AyahNotFoundError(
                f"Ayah {ayah} was not found in Surah {number}.",
                surah_number=number, ayah_number=ayah,
            )
        return found

    def get_ayahs(self, surah: SurahRef, start: int | None = None, end: int | None = None,
                  script_type: ScriptType | None = None) -> list[Ayah]:
        """All ayahs of a surah, optionally limited to start..end (inclusive)."""
        number = self._require_surah(surah)
        ayahs = self.provider.ayahs_for_surah(number, self._script(script_type))
        if start is None and end is None:
            return ayahs
        low = start if start is not None else 1
        high = end if end is not None else metadata.SURAH_BY_NUMBER[number].ayah_count
        return [a for a in ayahs if low <= a.ayah_number <= high]

    def get_ayah_range(self, reference: str, script_type: ScriptType | None = None) -> list[Ayah]:
        """Ayahs for "2:1-5" style references; "2:255" gives a one-element list."""
        parsed = VerseReference.parse(reference)
        if parsed.is_range:
            return self.get_ayahs(parsed.surah_number, parsed.ayah_number,
                                  parsed.end_ayah_number, script_type)
        return [self.get_ayah(parsed.surah_number, parsed.ayah_number, script_type)]

    def is_text_data_available(self, script_type: ScriptType | None = None) -> bool:
        return self.provider.is_available(self._script(script_type))

    # ---------------------------------------------------------------------
    # Juz
    # ---------------------------------------------------------------------

    def get_juz(self, number: int) -> Juz:
        juz = metadata.JUZ_BY_NUMBER.get(number)
        if juz is None:
            raise JuzNotFoundError(f"Juz with number {number} was not found. Valid range is 1-30.")
        return juz

    def get_juz_or_none(self, number: int) -> Juz | None:
        return metadata.JUZ_BY_NUMBER.get(number)

    def get_all_juz(self) -> list[Juz]:
        return list(metadata.JUZ)

    def get_juz_number(self, surah: SurahRef, ayah: int) -> int:
        """Juz containing surah:ayah, or 0 if out of range."""
        for juz in metadata.JUZ:
            if juz.contains(int(surah), ayah):
                return juz.number
        return 0

    def is_valid_juz(self, number: int) -> bool:
        return 1 <= number <= metadata.TOTAL_JUZ

    # ---------------------------------------------------------------------
    # Sajda
    # ---------------------------------------------------------------------

    def get_all_sajdas(self) -> list[SajdaVerse]:
        return list(metadata.SAJDAS)

    def get_obligatory_sajdas(self) -> list[SajdaVerse]:
        return [s for s in metadata.SAJDAS if s.type == SajdaType.OBLIGATORY]

    def get_recommended_sajdas(self) -> list[SajdaVerse]:
        return [s for s in metadata.SAJDAS if s.type == SajdaType.RECOMMENDED]

    def is_sajda_ayah(self, surah: SurahRef, ayah: int) -> bool:
        return (int(surah), ayah) in metadata.SAJDA_BY_VERSE

    def get_sajda(self, surah: SurahRef, ayah: int) -> SajdaVerse | None:
        return metadata.SAJDA_BY_VERSE.get((int(surah), ayah))

    # ---------------------------------------------------------------------
    # Pages, hizb quarters and manzils
    # ---------------------------------------------------------------------

    def get_ayahs_by_page(self, page: int, script_type: ScriptType | None = None) -> list[Ayah]:
        if not 1 <= page <= metadata.TOTAL_PAGES:
            raise ValueError(f"Page number must be between 1 and {metadata.TOTAL_PAGES}.")
        return [a for a in self.provider.all_ayahs(self._script(script_type)) if a.page == page]

    def get_page_number(self, surah: SurahRef, ayah: int,
                        script_type: ScriptType | None = None) -> int:
        """Page of surah:ayah, or 0 if unknown."""
        found = self.provider.ayah(int(surah), ayah, self._script(script_type))
        return found.page if found else 0

    def get_ayahs_by_hizb_quarter(self, hizb_quarter: int,
                                  script_type: ScriptType | None = None) -> list[Ayah]:
        if not 1 <= hizb_quarter <= metadata.TOTAL_HIZB_QUARTERS:
            raise ValueError(
                f"Hizb quarter must be between 1 and {metadata.TOTAL_HIZB_QUARTERS}."
            )
        return [a for a in self.provider.all_ayahs(self._script(script_type))
                if a.hizb_quarter == hizb_quarter]

    def get_hizb_quarter(self, surah: SurahRef, ayah: int,
                         script_type: ScriptType | None = None) -> int:
        found = self.provider.ayah(int(surah), ayah, self._script(script_type))
        return found.hizb_quarter if found else 0

    def get_manzil(self, number: int) -> Manzil:
        manzil = metadata.MANZIL_BY_NUMBER.get(number)
        if manzil is None:
            raise ManzilNotFoundError(
                f"Manzil number must be between 1 and {metadata.TOTAL_MANZILS}."
            )
        return manzil

    def get_manzil_or_none(self, number: int) -> Manzil | None:
        return metadata.MANZIL_BY_NUMBER.get(number)

    def get_all_manzils(self) -> list[Manzil]:
        return list(metadata.MANZILS)

    def get_manzil_number(self, surah: SurahRef, ayah: int) -> int:
        for manzil in metadata.MANZILS:
            if manzil.contains(int(surah), ayah):
                return manzil.number
        return 0

    def get_ayahs_by_manzil(self, number: int, script_type: ScriptType | None = None) -> list[Ayah]:
        manzil = self.get_manzil(number)
        script = self._script(script_type)
        result = []
        for surah in range(manzil.start_surah, manzil.end_surah + 1):
            result.extend(a for a in self.provider.ayahs_for_surah(surah, script)
                          if manzil.contains(surah, a.ayah_number))
        return result

    def is_valid_manzil(self, number: int) -> bool:
        return 1 <= number <= metadata.TOTAL_MANZILS

    # ---------------------------------------------------------------------
    # Search
    # ---------------------------------------------------------------------

    def search(self, term: str | None, surah: SurahRef | None = None,
               script_type: ScriptType | None = None) -> list[SearchResult]:
        """
        Diacritics-insensitive search over the whole Quran or one surah.

        Raises:
            SurahNotFoundError: If *surah* is given and is not 1-114
        """
        return _search.search(self.provider, term, surah, self._script(script_type))

    @staticmethod
    def highlight(text: str, term: str, wrapper: Callable[[str], str]) -> str:
        """Wrap the first match of *term* in *text*; see highlight.highlight_match."""
        return highlight_match(text, term, wrapper)

    # ---------------------------------------------------------------------
    # Translations
    # ---------------------------------------------------------------------

    def _require_translation(self, edition: TranslationEdition) -> None:
        if not self.provider.is_translation_available(edition):
            raise TranslationNotFoundError(
                f"Translation '{edition.name}' is not available. "
                f"Ensure the translation data is present in {self.provider.data_dir}."
            )

    def get_translation(self, surah: SurahRef, ayah: int,
                        edition: TranslationEdition) -> TranslatedAyah:
        number = self._require_surah(surah)
        self._require_translation(edition)
        found = self.provider.translation(number, ayah, edition)
        if found is None:
            raise AyahNotFoundError(
                f"Ayah {ayah} was not found in Surah {number} for edition '{edition.name}'.",
                surah_number=number, ayah_number=ayah,
            )
        return found

    def get_translations(self, surah: SurahRef, edition: TranslationEdition,
                         start: int | None = None, end: int | None = None) -> list[TranslatedAyah]:
        number = self._require_surah(surah)
        self._require_translation(edition)
        ayahs = self.provider.translations_for_surah(number, edition)
        if start is None and end is None:
            return ayahs
        low = start if start is not None else 1
        high = end if end is not None else metadata.SURAH_BY_NUMBER[number].ayah_count
        return [a for a in ayahs if low <= a.ayah_number <= high]

    def get_available_translations(self, language: str | None = None) -> list[TranslationInfo]:
        """
        The translation catalogue, optionally filtered by language name.

        A blank language gives an empty list.
        """
        if language is None:
            return list(metadata.TRANSLATIONS)
        if not language.strip():
            return []
        wanted = language.strip().lower()
        return [t for t in metadata.TRANSLATIONS if wanted in t.language.lower()]

    def is_translation_available(self, edition: TranslationEdition) -> bool:
        return self.provider.is_translation_available(edition)

    def search_translation(self, term: str | None, edition: TranslationEdition,
                           surah: SurahRef | None = None) -> list[TranslationSearchResult]:
        return _search.search_translation(self.provider, term, edition, surah)

    # ---------------------------------------------------------------------
    # References, random and daily ayahs
    # ---------------------------------------------------------------------

    @staticmethod
    def parse_verse_reference(reference: str) -> VerseReference:
        return VerseReference.parse(reference)

    def get_random_ayah(self, surah: SurahRef | None = None,
                        script_type: ScriptType | None = None) -> Ayah:
        """A random ayah from the whole Quran, or from one surah."""
        script = self._script(script_type)
        if surah is None:
            ayahs = self.provider.all_ayahs(script)
        else:
            ayahs = self.provider.ayahs_for_surah(self._require_surah(surah), script)
        if not ayahs:
            raise AyahNotFoundError("No ayah text is available.")
        with self._random_lock:
            return self._random.choice(ayahs)

    def get_ayah_of_the_day(self, date: datetime.date | None = None,
                            script_type: ScriptType | None = None) -> Ayah:
        """
        A deterministic ayah for a calendar date (today, UTC, by default).

        The same date always gives the same ayah.
        """
        if date is None:
            date = datetime.datetime.now(datetime.timezone.utc).date()
        ayahs = self.provider.all_ayahs(self._script(script_type))
        if not ayahs:
            raise AyahNotFoundError("No ayah text is available.")
        seed = date.year * 10000 + date.month * 100 + date.day
        return ayahs[random.Random(seed).randrange(len(ayahs))]

    # ---------------------------------------------------------------------
    # Muqatta'at
    # ---------------------------------------------------------------------

    def get_muqattaat(self) -> list[MuqattaatSurah]:
        return list(metadata.MUQATTAAT)

    def has_muqattaat(self, surah: SurahRef) -> bool:
        return int(surah) in metadata.MUQATTAAT_BY_SURAH

    def get_muqattaat_for_surah(self, surah: SurahRef) -> MuqattaatSurah | None:
        return metadata.MUQATTAAT_BY_SURAH.get(int(surah))

    # ---------------------------------------------------------------------
    # Statistics
    # ---------------------------------------------------------------------

    def get_word_count(self, surah: SurahRef, script_type: ScriptType | None = None) -> int:
        return sum(stats.count_words(a.text) for a in self.get_ayahs(surah, script_type=script_type))

    def get_letter_count(self, surah: SurahRef, script_type: ScriptType | None = None) -> int:
        """Letters in a surah, excluding tashkeel and whitespace."""
        return sum(stats.count_letters(a.text) for a in self.get_ayahs(surah, script_type=script_type))

    def get_total_word_count(self, script_type: ScriptType | None = None) -> int:
        return sum(stats.count_words(a.text)
                   for a in self.provider.all_ayahs(self._script(script_type)))

    def get_total_letter_count(self, script_type: ScriptType | None = None) -> int:
        return sum(stats.count_letters(a.text)
                   for a in self.provider.all_ayahs(self._script(script_type)))

    def get_unique_word_count(self, surah: SurahRef | None = None,
                              script_type: ScriptType | None = None) -> int:
        """Distinct normalized words in the Quran, or in one surah."""
        if surah is None:
            ayahs = self.provider.all_ayahs(self._script(script_type))
        else:
            ayahs = self.get_ayahs(surah, script_type=script_type)
        return len(stats.unique_words(ayahs))
