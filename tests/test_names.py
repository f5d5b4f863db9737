"""
Tests for free-text surah name matching.
"""

import pytest

from alquran.names import match_surah_name


@pytest.mark.parametrize("text, expected", [
    ("Al-Fatiha", 1),
    ("al-baqarah", 2),
    ("Al Baqarah", 2),
    ("Baqarah", 2),
    ("surah al kahf", 18),
    ("الكهف", 18),
    ("سورة الكهف", 18),
    ("الاخلاص", 112),
])
def test_match(text, expected):
    assert match_surah_name(text) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "1234567"])
def test_no_match(text):
    assert match_surah_name(text) is None


def test_quran_match_surah_name(quran):
    assert quran.match_surah_name("an nas").number == 114
    assert quran.match_surah_name("1234567") is None
