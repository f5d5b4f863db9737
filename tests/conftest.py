"""
Shared fixtures: a small on-disk corpus covering Al-Fatiha, one sajda
ayah (96:19), Al-Ikhlas and An-Nas, plus one translation edition.
"""

import gzip
import json

import pytest

from alquran import Quran, ScriptType

SIMPLE = {
    (1, 1): "بسم الله الرحمن الرحيم",
    (1, 2): "الحمد لله رب العالمين",
    (1, 3): "الرحمن الرحيم",
    (1, 4): "مالك يوم الدين",
    (1, 5): "إياك نعبد وإياك نستعين",
    (1, 6): "اهدنا الصراط المستقيم",
    (1, 7): "صراط الذين أنعمت عليهم غير المغضوب عليهم ولا الضالين",
    (96, 19): "كلا لا تطعه واسجد واقترب",
    (112, 1): "قل هو الله أحد",
    (112, 2): "الله الصمد",
    (112, 3): "لم يلد ولم يولد",
    (112, 4): "ولم يكن له كفوا أحد",
    (114, 1): "قل أعوذ برب الناس",
    (114, 2): "ملك الناس",
    (114, 3): "إله الناس",
    (114, 4): "من شر الوسواس الخناس",
    (114, 5): "الذي يوسوس في صدور الناس",
    (114, 6): "من الجنة والناس",
}

UTHMANI = dict(SIMPLE)
UTHMANI.update({
    (1, 1): "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    (1, 2): "ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَٰلَمِينَ",
    (1, 3): "ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    (1, 4): "مَٰلِكِ يَوْمِ ٱلدِّينِ",
    (1, 5): "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ",
    (1, 6): "ٱهْدِنَا ٱلصِّرَٰطَ ٱلْمُسْتَقِيمَ",
    (1, 7): "صِرَٰطَ ٱلَّذِينَ أَنْعَمْتَ عَلَيْهِمْ غَيْرِ ٱلْمَغْضُوبِ عَلَيْهِمْ وَلَا ٱلضَّآلِّينَ",
    (112, 1): "قُلْ هُوَ ٱللَّهُ أَحَدٌ",
    (112, 2): "ٱللَّهُ ٱلصَّمَدُ",
    (112, 3): "لَمْ يَلِدْ وَلَمْ يُولَدْ",
    (112, 4): "وَلَمْ يَكُن لَّهُۥ كُفُوًا أَحَدٌۢ",
})

SAHEEH = {
    (1, 1): "In the name of Allah, the Entirely Merciful, the Especially Merciful.",
    (1, 2): "[All] praise is [due] to Allah, Lord of the worlds -",
    (1, 3): "The Entirely Merciful, the Especially Merciful,",
    (1, 4): "Sovereign of the Day of Recompense.",
    (1, 5): "It is You we worship and You we ask for help.",
    (1, 6): "Guide us to the straight path -",
    (1, 7): "The path of those upon whom You have bestowed favor, not of those "
            "who have evoked [Your] anger or of those who are astray.",
    (112, 1): "Say, \"He is Allah, [who is] One,",
}


def _position(surah: int) -> dict:
    if surah == 1:
        return {"juz": 1, "page": 1, "hizbQuarter": 1}
    if surah == 96:
        return {"juz": 30, "page": 598, "hizbQuarter": 240}
    return {"juz": 30, "page": 604, "hizbQuarter": 240}


def _verse_entries(texts: dict) -> list[dict]:
    # Written out of order on purpose; the store sorts by ayah number
    return [
        {"surah": s, "ayah": a, "text": t, **_position(s)}
        for (s, a), t in sorted(texts.items(), reverse=True)
    ]


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    path = tmp_path_factory.mktemp("quran-data")

    with gzip.open(path / "quran_uthmani.json.gz", "wt", encoding="utf-8") as f:
        json.dump(_verse_entries(UTHMANI), f, ensure_ascii=False)

    # Plain JSON for the simple script, to cover both file forms
    (path / "quran_simple.json").write_text(
        json.dumps(_verse_entries(SIMPLE), ensure_ascii=False), encoding="utf-8"
    )

    with gzip.open(path / "en_sahih.json.gz", "wt", encoding="utf-8") as f:
        json.dump(
            [{"surah": s, "ayah": a, "text": t} for (s, a), t in SAHEEH.items()],
            f, ensure_ascii=False,
        )

    return path


@pytest.fixture
def quran(data_dir):
    return Quran(data_dir=data_dir, script_type=ScriptType.UTHMANI)


@pytest.fixture
def empty_quran(tmp_path):
    return Quran(data_dir=tmp_path / "missing")


@pytest.fixture
def bold():
    return lambda s: f"<b>{s}</b>"
