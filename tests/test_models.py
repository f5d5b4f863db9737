"""
Tests for verse references and model helpers.
"""

import pytest

from alquran import Quran, VerseReference, VerseReferenceError
from alquran.utils import convert_arabic_digits, safe_int


class TestVerseReference:

    def test_single(self):
        ref = VerseReference.parse("2:255")
        assert (ref.surah_number, ref.ayah_number) == (2, 255)
        assert not ref.is_range
        assert str(ref) == "2:255"

    def test_range(self):
        ref = VerseReference.parse(" 2:1-5 ")
        assert ref == VerseReference(2, 1, 5)
        assert ref.is_range
        assert str(ref) == "2:1-5"

    def test_arabic_digits(self):
        assert VerseReference.parse("٢:٢٥٥") == VerseReference(2, 255)

    @pytest.mark.parametrize("reference, message", [
        ("", "cannot be empty"),
        ("2", "Invalid verse reference format"),
        ("2:3:4", "Invalid verse reference format"),
        ("0:1", "Invalid Surah number"),
        ("115:1", "Invalid Surah number"),
        ("x:1", "Invalid Surah number"),
        ("2:0", "Invalid Ayah number"),
        ("2:-1", "Invalid start Ayah number"),
        ("2:1-2-3", "Invalid Ayah range"),
        ("2:5-1", "Invalid end Ayah number"),
    ])
    def test_invalid(self, reference, message):
        with pytest.raises(VerseReferenceError, match=message):
            VerseReference.parse(reference)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            VerseReference.parse("nope")

    def test_try_parse(self):
        assert VerseReference.try_parse("1:7") == VerseReference(1, 7)
        assert VerseReference.try_parse("bad") is None

    def test_quran_parse(self):
        assert Quran.parse_verse_reference("114:1-6").end_ayah_number == 6


def test_digit_helpers():
    assert convert_arabic_digits("٣٤ ۵") == "34 5"
    assert safe_int("١٢") == 12
    assert safe_int("+3") is None
    assert safe_int(None, 0) == 0


def test_ayah_str_preview(quran):
    ayah = quran.get_ayah(1, 7)
    assert str(ayah).startswith("[1:7] ")
    assert str(ayah).endswith("...")
