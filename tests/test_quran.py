"""
Tests for the Quran facade over loaded verse text.
"""

import datetime

import pytest

from alquran import (
    AyahNotFoundError,
    ManzilNotFoundError,
    Quran,
    ScriptType,
    SurahName,
    SurahNotFoundError,
    TranslationEdition,
    TranslationNotFoundError,
    VerseReferenceError,
)
from alquran import config

SIMPLE = ScriptType.SIMPLE
SAHEEH = TranslationEdition.ENGLISH_SAHEEH_INTERNATIONAL


class TestAyahs:

    def test_get_ayah(self, quran):
        ayah = quran.get_ayah(1, 1)
        assert ayah.text == "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"
        assert ayah.key == "1:1"
        assert (ayah.juz, ayah.page, ayah.hizb_quarter) == (1, 1, 1)

    def test_get_ayah_simple(self, quran):
        assert quran.get_ayah(1, 1, SIMPLE).text == "بسم الله الرحمن الرحيم"

    def test_get_ayah_by_reference(self, quran):
        assert quran.get_ayah("112:1") == quran.get_ayah(SurahName.AL_IKHLAS, 1)

    def test_sajda_flag(self, quran):
        assert quran.get_ayah(96, 19).has_sajda
        assert not quran.get_ayah(1, 1).has_sajda

    def test_missing_ayah(self, quran):
        with pytest.raises(AyahNotFoundError) as exc:
            quran.get_ayah(1, 8)
        assert (exc.value.surah_number, exc.value.ayah_number) == (1, 8)

    def test_missing_surah(self, quran):
        with pytest.raises(SurahNotFoundError):
            quran.get_ayah(115, 1)

    def test_bad_reference(self, quran):
        with pytest.raises(VerseReferenceError):
            quran.get_ayah("1-1")

    def test_get_ayahs_sorted(self, quran):
        ayahs = quran.get_ayahs(1)
        assert [a.ayah_number for a in ayahs] == list(range(1, 8))

    def test_get_ayahs_range(self, quran):
        assert [a.ayah_number for a in quran.get_ayahs(1, 2, 4)] == [2, 3, 4]
        assert [a.ayah_number for a in quran.get_ayahs(1, start=6)] == [6, 7]

    def test_get_ayahs_is_a_copy(self, quran):
        quran.get_ayahs(1).clear()
        assert len(quran.get_ayahs(1)) == 7

    def test_get_ayahs_not_in_data(self, quran):
        assert quran.get_ayahs(2) == []

    def test_get_ayah_range(self, quran):
        assert [a.key for a in quran.get_ayah_range("114:2-4")] == ["114:2", "114:3", "114:4"]
        assert [a.key for a in quran.get_ayah_range("112:3")] == ["112:3"]

    def test_text_available(self, quran):
        assert quran.is_text_data_available()
        assert quran.is_text_data_available(SIMPLE)


class TestPositions:

    def test_page(self, quran):
        assert len(quran.get_ayahs_by_page(1)) == 7
        assert quran.get_page_number(1, 1) == 1
        assert quran.get_page_number(2, 1) == 0

    @pytest.mark.parametrize("page", [0, 605])
    def test_page_out_of_range(self, quran, page):
        with pytest.raises(ValueError):
            quran.get_ayahs_by_page(page)

    def test_hizb_quarter(self, quran):
        ayahs = quran.get_ayahs_by_hizb_quarter(240)
        assert [a.surah_number for a in ayahs] == [96] + [112] * 4 + [114] * 6
        assert quran.get_hizb_quarter(1, 7) == 1
        with pytest.raises(ValueError):
            quran.get_ayahs_by_hizb_quarter(241)

    def test_ayahs_by_manzil(self, quran):
        assert len(quran.get_ayahs_by_manzil(7)) == 11
        assert len(quran.get_ayahs_by_manzil(1)) == 7
        assert quran.get_ayahs_by_manzil(4) == []
        with pytest.raises(ManzilNotFoundError):
            quran.get_ayahs_by_manzil(0)


class TestTranslations:

    def test_get_translation(self, quran):
        translated = quran.get_translation(1, 6, SAHEEH)
        assert translated.text == "Guide us to the straight path -"
        assert translated.edition == SAHEEH

    def test_get_translations(self, quran):
        assert len(quran.get_translations(1, SAHEEH)) == 7
        assert [t.ayah_number for t in quran.get_translations(1, SAHEEH, 2, 3)] == [2, 3]

    def test_missing_translated_ayah(self, quran):
        with pytest.raises(AyahNotFoundError):
            quran.get_translation(112, 2, SAHEEH)

    def test_unavailable_edition(self, quran):
        assert not quran.is_translation_available(TranslationEdition.URDU_JALANDHRY)
        with pytest.raises(TranslationNotFoundError):
            quran.get_translation(1, 1, TranslationEdition.URDU_JALANDHRY)
        assert quran.is_translation_available(SAHEEH)


class TestRandom:

    def test_random_ayah_in_surah(self, quran):
        for _ in range(10):
            assert quran.get_random_ayah(112).surah_number == 112

    def test_random_ayah_anywhere(self, quran):
        assert quran.get_random_ayah().surah_number in (1, 96, 112, 114)

    def test_ayah_of_the_day_is_stable(self, quran):
        day = datetime.date(2024, 3, 11)
        assert quran.get_ayah_of_the_day(day) == quran.get_ayah_of_the_day(day)

    def test_ayah_of_the_day_default_date(self, quran):
        assert quran.get_ayah_of_the_day().surah_number in (1, 96, 112, 114)


class TestStatistics:

    def test_word_count(self, quran):
        assert quran.get_word_count(112, SIMPLE) == 15
        assert quran.get_word_count(112) == 15

    def test_letter_count_ignores_tashkeel(self, quran):
        assert quran.get_letter_count(112, SIMPLE) == 47
        assert quran.get_letter_count(112) == 47

    def test_unique_words(self, quran):
        assert quran.get_unique_word_count(112, SIMPLE) == 12

    def test_totals(self, quran):
        assert quran.get_total_word_count(SIMPLE) > quran.get_word_count(1, SIMPLE)
        assert quran.get_total_letter_count(SIMPLE) > quran.get_letter_count(1, SIMPLE)
        assert quran.get_unique_word_count(script_type=SIMPLE) > 12


class TestMissingData:

    def test_metadata_still_works(self, empty_quran):
        assert empty_quran.get_surah(1).ayah_count == 7
        assert not empty_quran.is_text_data_available()

    def test_text_lookups_degrade(self, empty_quran):
        assert empty_quran.get_ayahs(1) == []
        assert empty_quran.get_page_number(1, 1) == 0
        assert empty_quran.get_total_word_count() == 0
        with pytest.raises(AyahNotFoundError):
            empty_quran.get_ayah(1, 1)

    def test_random_without_text(self, empty_quran):
        with pytest.raises(AyahNotFoundError):
            empty_quran.get_random_ayah()
        with pytest.raises(AyahNotFoundError):
            empty_quran.get_ayah_of_the_day(datetime.date(2024, 1, 1))

    def test_translations_unavailable(self, empty_quran):
        with pytest.raises(TranslationNotFoundError):
            empty_quran.get_translations(1, SAHEEH)


def test_unknown_default_script_falls_back(data_dir, monkeypatch, caplog):
    monkeypatch.setattr(config, "DEFAULT_SCRIPT", "cursive")
    with caplog.at_level("WARNING"):
        quran = Quran(data_dir=data_dir)
    assert quran.script_type == ScriptType.UTHMANI
    assert "Unknown script 'cursive'" in caplog.text


def test_configured_default_script(data_dir, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_SCRIPT", "simple")
    quran = Quran(data_dir=data_dir)
    assert quran.get_ayah(1, 1).text == "بسم الله الرحمن الرحيم"
