"""
Enumerations used across the library: script variants, revelation
period, sajda classification, surah names and translation editions.
"""

from enum import Enum, IntEnum


class ScriptType(Enum):
    """Arabic script variant of the verse text."""
    SIMPLE = "simple"     # plain letters, no tashkeel
    UTHMANI = "uthmani"   # full tashkeel and Quranic annotation marks


class RevelationType(Enum):
    MECCAN = "meccan"
    MEDINAN = "medinan"


class SajdaType(Enum):
    OBLIGATORY = "obligatory"
    RECOMMENDED = "recommended"


class TranslationEdition(IntEnum):
    ENGLISH_SAHEEH_INTERNATIONAL = 1
    ENGLISH_YUSUF_ALI = 2
    ENGLISH_PICKTHALL = 3
    ENGLISH_CLEAR_QURAN = 4
    ENGLISH_MAUDUDI = 5
    ENGLISH_TRANSLITERATION = 10
    URDU_JALANDHRY = 101
    URDU_JUNAGARHI = 102
    URDU_MAUDUDI = 103


class SurahName(IntEnum):
    """All 114 surahs; the value is the surah number."""
    AL_FATIHA = 1
    AL_BAQARAH = 2
    ALI_IMRAN = 3
    AN_NISA = 4
    AL_MAIDAH = 5
    AL_ANAM = 6
    AL_ARAF = 7
    AL_ANFAL = 8
    AT_TAWBAH = 9
    YUNUS = 10
    HUD = 11
    YUSUF = 12
    AR_RAD = 13
    IBRAHIM = 14
    AL_HIJR = 15
    AN_NAHL = 16
    AL_ISRA = 17
    AL_KAHF = 18
    MARYAM = 19
    TAHA = 20
    AL_ANBIYA = 21
    AL_HAJJ = 22
    AL_MUMINUN = 23
    AN_NUR = 24
    AL_FURQAN = 25
    ASH_SHUARA = 26
    AN_NAML = 27
    AL_QASAS = 28
    AL_ANKABUT = 29
    AR_RUM = 30
    LUQMAN = 31
    AS_SAJDAH = 32
    AL_AHZAB = 33
    SABA = 34
    FATIR = 35
    YA_SIN = 36
    AS_SAFFAT = 37
    SAD = 38
    AZ_ZUMAR = 39
    GHAFIR = 40
    FUSSILAT = 41
    ASH_SHURA = 42
    AZ_ZUKHRUF = 43
    AD_DUKHAN = 44
    AL_JATHIYAH = 45
    AL_AHQAF = 46
    MUHAMMAD = 47
    AL_FATH = 48
    AL_HUJURAT = 49
    QAF = 50
    ADH_DHARIYAT = 51
    AT_TUR = 52
    AN_NAJM = 53
    AL_QAMAR = 54
    AR_RAHMAN = 55
    AL_WAQIAH = 56
    AL_HADID = 57
    AL_MUJADILA = 58
    AL_HASHR = 59
    AL_MUMTAHANAH = 60
    AS_SAFF = 61
    AL_JUMUAH = 62
    AL_MUNAFIQUN = 63
    AT_TAGHABUN = 64
    AT_TALAQ = 65
    AT_TAHRIM = 66
    AL_MULK = 67
    AL_QALAM = 68
    AL_HAQQAH = 69
    AL_MAARIJ = 70
    NUH = 71
    AL_JINN = 72
    AL_MUZZAMMIL = 73
    AL_MUDDATHTHIR = 74
    AL_QIYAMAH = 75
    AL_INSAN = 76
    AL_MURSALAT = 77
    AN_NABA = 78
    AN_NAZIAT = 79
    ABASA = 80
    AT_TAKWIR = 81
    AL_INFITAR = 82
    AL_MUTAFFIFIN = 83
    AL_INSHIQAQ = 84
    AL_BURUJ = 85
    AT_TARIQ = 86
    AL_ALA = 87
    AL_GHASHIYAH = 88
    AL_FAJR = 89
    AL_BALAD = 90
    ASH_SHAMS = 91
    AL_LAYL = 92
    AD_DUHA = 93
    ASH_SHARH = 94
    AT_TIN = 95
    AL_ALAQ = 96
    AL_QADR = 97
    AL_BAYYINAH = 98
    AZ_ZALZALAH = 99
    AL_ADIYAT = 100
    AL_QARIAH = 101
    AT_TAKATHUR = 102
    AL_ASR = 103
    AL_HUMAZAH = 104
    AL_FIL = 105
    QURAYSH = 106
    AL_MAUN = 107
    AL_KAWTHAR = 108
    AL_KAFIRUN = 109
    AN_NASR = 110
    AL_MASAD = 111
    AL_IKHLAS = 112
    AL_FALAQ = 113
    AN_NAS = 114
