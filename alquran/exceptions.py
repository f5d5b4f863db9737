"""
Exceptions raised by lookups.

Not-found errors are also LookupErrors; malformed references are also
ValueErrors. An existing surah with nothing matched gives an empty list,
never an exception.
"""


class QuranError(Exception):
    """Base class for all library errors."""
    pass


class SurahNotFoundError(QuranError, LookupError):
    """Raised when a surah number or name does not exist."""

    def __init__(self, message: str, number: int | None = None, name: str | None = None):
        super().__init__(message)
        self.number = number
        self.name = name


class AyahNotFoundError(QuranError, LookupError):
    """Raised when an ayah number does not exist within its surah."""

    def __init__(self, message: str, surah_number: int | None = None,
                 ayah_number: int | None = None):
        super().__init__(message)
        self.surah_number = surah_number
        self.ayah_number = ayah_number


class JuzNotFoundError(QuranError, LookupError):
    """Raised when a juz number is outside 1-30."""
    pass


class ManzilNotFoundError(QuranError, LookupError):
    """Raised when a manzil number is outside 1-7."""
    pass


class TranslationNotFoundError(QuranError, LookupError):
    """Raised when a translation edition has no loaded data."""
    pass


class VerseReferenceError(QuranError, ValueError):
    """Raised when a verse reference string cannot be parsed."""
    pass


def surah_not_found(number: int) -> SurahNotFoundError:
    return SurahNotFoundError(
        f"Surah with number {number} was not found. Valid range is 1-114.",
        number=number,
    )
