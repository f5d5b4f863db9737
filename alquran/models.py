"""
Value objects for surahs, ayahs, reading divisions, search results and
verse references. All records are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import RevelationType, SajdaType, SurahName, TranslationEdition
from .exceptions import VerseReferenceError
from .utils import safe_int


def _preview(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


@dataclass(frozen=True)
class Surah:
    """Static metadata for one surah."""
    number: int
    arabic_name: str
    english_name: str
    english_meaning: str
    ayah_count: int
    revelation_type: RevelationType
    revelation_order: int
    ruku_count: int
    juz_start: int
    juz_end: int
    page_start: int
    has_bismillah: bool

    @property
    def name(self) -> SurahName:
        return SurahName(self.number)

    def __str__(self) -> str:
        return f"{self.number}. {self.english_name} ({self.arabic_name}) - {self.ayah_count} Ayahs"


@dataclass(frozen=True)
class Ayah:
    """A single verse of Arabic text with its position in the mushaf."""
    surah_number: int
    ayah_number: int
    text: str
    juz: int = 0
    page: int = 0
    hizb_quarter: int = 0
    has_sajda: bool = False

    @property
    def key(self) -> str:
        return f"{self.surah_number}:{self.ayah_number}"

    def __str__(self) -> str:
        return f"[{self.key}] {_preview(self.text, 50)}"


@dataclass(frozen=True)
class Juz:
    number: int
    start_surah: int
    start_ayah: int
    end_surah: int
    end_ayah: int
    arabic_name: str

    def contains(self, surah: int, ayah: int) -> bool:
        return _within(surah, ayah, self.start_surah, self.start_ayah,
                       self.end_surah, self.end_ayah)

    def __str__(self) -> str:
        return (f"Juz {self.number}: {self.arabic_name} "
                f"({self.start_surah}:{self.start_ayah} - {self.end_surah}:{self.end_ayah})")


@dataclass(frozen=True)
class Manzil:
    """One of the seven weekly reading divisions."""
    number: int
    start_surah: int
    start_ayah: int
    end_surah: int
    end_ayah: int

    def contains(self, surah: int, ayah: int) -> bool:
        return _within(surah, ayah, self.start_surah, self.start_ayah,
                       self.end_surah, self.end_ayah)

    def __str__(self) -> str:
        return (f"Manzil {self.number}: "
                f"({self.start_surah}:{self.start_ayah} - {self.end_surah}:{self.end_ayah})")


@dataclass(frozen=True)
class SajdaVerse:
    number: int
    surah_number: int
    ayah_number: int
    type: SajdaType

    def __str__(self) -> str:
        return f"Sajda {self.number}: [{self.surah_number}:{self.ayah_number}] ({self.type.value})"


@dataclass(frozen=True)
class MuqattaatSurah:
    """A surah opening with disconnected letters."""
    surah_number: int
    letters: str
    arabic_letters: str

    def __str__(self) -> str:
        return f"Surah {self.surah_number}: {self.arabic_letters} ({self.letters})"


@dataclass(frozen=True)
class SearchResult:
    """An ayah matching a search; `text` is always the original verse text."""
    surah_number: int
    ayah_number: int
    text: str
    surah_name: str
    matched_text: str

    def __str__(self) -> str:
        return f"[{self.surah_number}:{self.ayah_number}] ({self.surah_name}) - {self.matched_text}"


@dataclass(frozen=True)
class TranslationInfo:
    edition: TranslationEdition
    api_identifier: str
    resource_name: str
    name: str
    author_name: str
    language: str
    direction: str
    type: str = "translation"

    def __str__(self) -> str:
        return f"{self.name} ({self.language}) - {self.author_name}"


@dataclass(frozen=True)
class TranslatedAyah:
    surah_number: int
    ayah_number: int
    text: str
    edition: TranslationEdition

    def __str__(self) -> str:
        return f"[{self.surah_number}:{self.ayah_number}] {_preview(self.text, 80)}"


@dataclass(frozen=True)
class TranslationSearchResult:
    surah_number: int
    ayah_number: int
    text: str
    surah_name: str
    matched_text: str
    edition: TranslationEdition

    def __str__(self) -> str:
        return (f"[{self.surah_number}:{self.ayah_number}] ({self.surah_name}) - "
                f"{self.matched_text} [{self.edition.name}]")


@dataclass(frozen=True)
class VerseReference:
    """
    A parsed verse reference such as "2:255" or "2:1-5".

    Arabic-Indic digits are accepted, so "٢:٢٥٥" parses the same as "2:255".
    """
    surah_number: int
    ayah_number: int
    end_ayah_number: int | None = field(default=None)

    @property
    def is_range(self) -> bool:
        return self.end_ayah_number is not None

    @classmethod
    def parse(cls, reference: str) -> VerseReference:
        """
        Parse a reference string.

        Args:
            reference: "surah:ayah" or "surah:start-end"

        Returns:
            VerseReference

        Raises:
            VerseReferenceError: If the reference is malformed
        """
        if not isinstance(reference, str) or not reference.strip():
            raise VerseReferenceError("Verse reference cannot be empty.")

        parts = reference.strip().split(":")
        if len(parts) != 2:
            raise VerseReferenceError(
                f"Invalid verse reference format: '{reference}'. "
                "Expected format: 'surah:ayah' or 'surah:start-end'."
            )

        surah = safe_int(parts[0])
        if surah is None or not 1 <= surah <= 114:
            raise VerseReferenceError(
                f"Invalid Surah number in reference: '{parts[0]}'. Valid range is 1-114."
            )

        ayah_part = parts[1]
        if "-" in ayah_part:
            bounds = ayah_part.split("-")
            if len(bounds) != 2:
                raise VerseReferenceError(
                    f"Invalid Ayah range: '{ayah_part}'. Expected format: 'start-end'."
                )
            start = safe_int(bounds[0])
            if start is None or start < 1:
                raise VerseReferenceError(f"Invalid start Ayah number: '{bounds[0]}'.")
            end = safe_int(bounds[1])
            if end is None or end < start:
                raise VerseReferenceError(
                    f"Invalid end Ayah number: '{bounds[1]}'. Must be >= start Ayah."
                )
            return cls(surah, start, end)

        ayah = safe_int(ayah_part)
        if ayah is None or ayah < 1:
            raise VerseReferenceError(f"Invalid Ayah number: '{ayah_part}'.")
        return cls(surah, ayah)

    @classmethod
    def try_parse(cls, reference: str) -> VerseReference | None:
        try:
            return cls.parse(reference)
        except VerseReferenceError:
            return None

    def __str__(self) -> str:
        if self.is_range:
            return f"{self.surah_number}:{self.ayah_number}-{self.end_ayah_number}"
        return f"{self.surah_number}:{self.ayah_number}"


def _within(surah: int, ayah: int, start_surah: int, start_ayah: int,
            end_surah: int, end_ayah: int) -> bool:
    after_start = surah > start_surah or (surah == start_surah and ayah >= start_ayah)
    before_end = surah < end_surah or (surah == end_surah and ayah <= end_ayah)
    return after_start and before_end
