"""
Static metadata for the Quran: surahs, juz, sajda positions, manzils,
muqatta'at openings and the translation catalogue.

Boundaries follow the standard Madani mushaf.
"""

from .enums import RevelationType, SajdaType, TranslationEdition
from .exceptions import SurahNotFoundError, surah_not_found
from .models import Juz, Manzil, MuqattaatSurah, SajdaVerse, Surah, TranslationInfo

TOTAL_SURAHS = 114
TOTAL_AYAHS = 6236
TOTAL_JUZ = 30
TOTAL_SAJDAS = 15
TOTAL_PAGES = 604
TOTAL_HIZB_QUARTERS = 240
TOTAL_MANZILS = 7

BISMILLAH_UTHMANI = "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"
BISMILLAH_SIMPLE = "بسم الله الرحمن الرحيم"

MECCAN = RevelationType.MECCAN
MEDINAN = RevelationType.MEDINAN
OBLIGATORY = SajdaType.OBLIGATORY
RECOMMENDED = SajdaType.RECOMMENDED

# number, arabic_name, english_name, english_meaning, ayah_count, revelation_type,
# revelation_order, ruku_count, juz_start, juz_end, page_start, has_bismillah
SURAHS: tuple[Surah, ...] = (
    Surah(1,   "الفاتحة",     "Al-Fatiha",       "The Opening",                     7,   MECCAN,   5,   1,  1,  1,  1,   True),
    Surah(2,   "البقرة",       "Al-Baqarah",      "The Cow",                         286, MEDINAN, 87,  40, 1,  3,  2,   True),
    Surah(3,   "آل عمران",     "Ali 'Imran",      "Family of Imran",                 200, MEDINAN, 89,  20, 3,  4,  50,  True),
    Surah(4,   "النساء",       "An-Nisa",         "The Women",                       176, MEDINAN, 92,  24, 4,  6,  77,  True),
    Surah(5,   "المائدة",      "Al-Ma'idah",      "The Table Spread",                120, MEDINAN, 112, 16, 6,  7,  106, True),
    Surah(6,   "الأنعام",      "Al-An'am",        "The Cattle",                      165, MECCAN,   55,  20, 7,  8,  128, True),
    Surah(7,   "الأعراف",      "Al-A'raf",        "The Heights",                     206, MECCAN,   39,  24, 8,  9,  151, True),
    Surah(8,   "الأنفال",      "Al-Anfal",        "The Spoils of War",               75,  MEDINAN, 88,  10, 9,  10, 177, True),
    Surah(9,   "التوبة",       "At-Tawbah",       "The Repentance",                  129, MEDINAN, 113, 16, 10, 11, 187, False),
    Surah(10,  "يونس",         "Yunus",           "Jonah",                           109, MECCAN,   51,  11, 11, 11, 208, True),
    Surah(11,  "هود",          "Hud",             "Hud",                             123, MECCAN,   52,  10, 11, 12, 221, True),
    Surah(12,  "يوسف",         "Yusuf",           "Joseph",                          111, MECCAN,   53,  12, 12, 13, 235, True),
    Surah(13,  "الرعد",        "Ar-Ra'd",         "The Thunder",                     43,  MEDINAN, 96,  6,  13, 13, 249, True),
    Surah(14,  "إبراهيم",      "Ibrahim",         "Abraham",                         52,  MECCAN,   72,  7,  13, 13, 255, True),
    Surah(15,  "الحجر",        "Al-Hijr",         "The Rocky Tract",                 99,  MECCAN,   54,  6,  14, 14, 262, True),
    Surah(16,  "النحل",        "An-Nahl",         "The Bee",                         128, MECCAN,   70,  16, 14, 14, 267, True),
    Surah(17,  "الإسراء",      "Al-Isra",         "The Night Journey",               111, MECCAN,   50,  12, 15, 15, 282, True),
    Surah(18,  "الكهف",        "Al-Kahf",         "The Cave",                        110, MECCAN,   69,  12, 15, 16, 293, True),
    Surah(19,  "مريم",         "Maryam",          "Mary",                            98,  MECCAN,   44,  6,  16, 16, 305, True),
    Surah(20,  "طه",           "Taha",            "Ta-Ha",                           135, MECCAN,   45,  8,  16, 16, 312, True),
    Surah(21,  "الأنبياء",     "Al-Anbiya",       "The Prophets",                    112, MECCAN,   73,  7,  17, 17, 322, True),
    Surah(22,  "الحج",         "Al-Hajj",         "The Pilgrimage",                  78,  MEDINAN, 103, 10, 17, 17, 332, True),
    Surah(23,  "المؤمنون",     "Al-Mu'minun",     "The Believers",                   118, MECCAN,   74,  6,  18, 18, 342, True),
    Surah(24,  "النور",        "An-Nur",          "The Light",                       64,  MEDINAN, 102, 9,  18, 18, 350, True),
    Surah(25,  "الفرقان",      "Al-Furqan",       "The Criterion",                   77,  MECCAN,   42,  6,  18, 19, 359, True),
    Surah(26,  "الشعراء",      "Ash-Shu'ara",     "The Poets",                       227, MECCAN,   47,  11, 19, 19, 367, True),
    Surah(27,  "النمل",        "An-Naml",         "The Ant",                         93,  MECCAN,   48,  7,  19, 20, 377, True),
    Surah(28,  "القصص",        "Al-Qasas",        "The Stories",                     88,  MECCAN,   49,  9,  20, 20, 385, True),
    Surah(29,  "العنكبوت",     "Al-'Ankabut",     "The Spider",                      69,  MECCAN,   85,  7,  20, 21, 396, True),
    Surah(30,  "الروم",        "Ar-Rum",          "The Romans",                      60,  MECCAN,   84,  6,  21, 21, 404, True),
    Surah(31,  "لقمان",        "Luqman",          "Luqman",                          34,  MECCAN,   57,  4,  21, 21, 411, True),
    Surah(32,  "السجدة",       "As-Sajdah",       "The Prostration",                 30,  MECCAN,   75,  3,  21, 21, 415, True),
    Surah(33,  "الأحزاب",      "Al-Ahzab",        "The Combined Forces",             73,  MEDINAN, 90,  9,  21, 22, 418, True),
    Surah(34,  "سبأ",          "Saba",            "Sheba",                           54,  MECCAN,   58,  6,  22, 22, 428, True),
    Surah(35,  "فاطر",         "Fatir",           "Originator",                      45,  MECCAN,   43,  5,  22, 22, 434, True),
    Surah(36,  "يس",           "Ya-Sin",          "Ya-Sin",                          83,  MECCAN,   41,  5,  22, 23, 440, True),
    Surah(37,  "الصافات",      "As-Saffat",       "Those Who Set the Ranks",         182, MECCAN,   56,  5,  23, 23, 446, True),
    Surah(38,  "ص",            "Sad",             "The Letter Sad",                  88,  MECCAN,   38,  5,  23, 23, 453, True),
    Surah(39,  "الزمر",        "Az-Zumar",        "The Troops",                      75,  MECCAN,   59,  8,  23, 24, 458, True),
    Surah(40,  "غافر",         "Ghafir",          "The Forgiver",                    85,  MECCAN,   60,  9,  24, 24, 467, True),
    Surah(41,  "فصلت",         "Fussilat",        "Explained in Detail",             54,  MECCAN,   61,  6,  24, 25, 477, True),
    Surah(42,  "الشورى",       "Ash-Shura",       "The Consultation",                53,  MECCAN,   62,  5,  25, 25, 483, True),
    Surah(43,  "الزخرف",       "Az-Zukhruf",      "The Ornaments of Gold",           89,  MECCAN,   63,  7,  25, 25, 489, True),
    Surah(44,  "الدخان",       "Ad-Dukhan",       "The Smoke",                       59,  MECCAN,   64,  3,  25, 25, 496, True),
    Surah(45,  "الجاثية",      "Al-Jathiyah",     "The Crouching",                   37,  MECCAN,   65,  4,  25, 25, 499, True),
    Surah(46,  "الأحقاف",      "Al-Ahqaf",        "The Wind-Curved Sandhills",       35,  MECCAN,   66,  4,  26, 26, 502, True),
    Surah(47,  "محمد",          "Muhammad",        "Muhammad",                        38,  MEDINAN, 95,  4,  26, 26, 507, True),
    Surah(48,  "الفتح",        "Al-Fath",         "The Victory",                     29,  MEDINAN, 111, 4,  26, 26, 511, True),
    Surah(49,  "الحجرات",      "Al-Hujurat",      "The Rooms",                       18,  MEDINAN, 106, 2,  26, 26, 515, True),
    Surah(50,  "ق",            "Qaf",             "The Letter Qaf",                  45,  MECCAN,   34,  3,  26, 26, 518, True),
    Surah(51,  "الذاريات",     "Adh-Dhariyat",    "The Winnowing Winds",             60,  MECCAN,   67,  3,  26, 27, 520, True),
    Surah(52,  "الطور",        "At-Tur",          "The Mount",                       49,  MECCAN,   76,  2,  27, 27, 523, True),
    Surah(53,  "النجم",        "An-Najm",         "The Star",                        62,  MECCAN,   23,  3,  27, 27, 526, True),
    Surah(54,  "القمر",        "Al-Qamar",        "The Moon",                        55,  MECCAN,   37,  3,  27, 27, 528, True),
    Surah(55,  "الرحمن",       "Ar-Rahman",       "The Beneficent",                  78,  MEDINAN, 97,  3,  27, 27, 531, True),
    Surah(56,  "الواقعة",      "Al-Waqi'ah",      "The Inevitable",                  96,  MECCAN,   46,  3,  27, 27, 534, True),
    Surah(57,  "الحديد",       "Al-Hadid",        "The Iron",                        29,  MEDINAN, 94,  4,  27, 27, 537, True),
    Surah(58,  "المجادلة",     "Al-Mujadila",     "The Pleading Woman",              22,  MEDINAN, 105, 3,  28, 28, 542, True),
    Surah(59,  "الحشر",        "Al-Hashr",        "The Exile",                       24,  MEDINAN, 101, 3,  28, 28, 545, True),
    Surah(60,  "الممتحنة",     "Al-Mumtahanah",   "She That Is to Be Examined",      13,  MEDINAN, 91,  2,  28, 28, 549, True),
    Surah(61,  "الصف",         "As-Saff",         "The Ranks",                       14,  MEDINAN, 109, 2,  28, 28, 551, True),
    Surah(62,  "الجمعة",       "Al-Jumu'ah",      "The Congregation, Friday",        11,  MEDINAN, 110, 2,  28, 28, 553, True),
    Surah(63,  "المنافقون",    "Al-Munafiqun",    "The Hypocrites",                  11,  MEDINAN, 104, 2,  28, 28, 554, True),
    Surah(64,  "التغابن",      "At-Taghabun",     "The Mutual Disillusion",          18,  MEDINAN, 108, 2,  28, 28, 556, True),
    Surah(65,  "الطلاق",       "At-Talaq",        "The Divorce",                     12,  MEDINAN, 99,  2,  28, 28, 558, True),
    Surah(66,  "التحريم",      "At-Tahrim",       "The Prohibition",                 12,  MEDINAN, 107, 2,  28, 28, 560, True),
    Surah(67,  "الملك",        "Al-Mulk",         "The Sovereignty",                 30,  MECCAN,   77,  2,  29, 29, 562, True),
    Surah(68,  "القلم",        "Al-Qalam",        "The Pen",                         52,  MECCAN,   2,   2,  29, 29, 564, True),
    Surah(69,  "الحاقة",       "Al-Haqqah",       "The Reality",                     52,  MECCAN,   78,  2,  29, 29, 566, True),
    Surah(70,  "المعارج",      "Al-Ma'arij",      "The Ascending Stairways",         44,  MECCAN,   79,  2,  29, 29, 568, True),
    Surah(71,  "نوح",          "Nuh",             "Noah",                            28,  MECCAN,   71,  2,  29, 29, 570, True),
    Surah(72,  "الجن",         "Al-Jinn",         "The Jinn",                        28,  MECCAN,   40,  2,  29, 29, 572, True),
    Surah(73,  "المزمل",       "Al-Muzzammil",    "The Enshrouded One",              20,  MECCAN,   3,   2,  29, 29, 574, True),
    Surah(74,  "المدثر",       "Al-Muddaththir",  "The Cloaked One",                 56,  MECCAN,   4,   2,  29, 29, 575, True),
    Surah(75,  "القيامة",      "Al-Qiyamah",      "The Resurrection",                40,  MECCAN,   31,  2,  29, 29, 577, True),
    Surah(76,  "الإنسان",      "Al-Insan",        "The Human",                       31,  MEDINAN, 98,  2,  29, 29, 578, True),
    Surah(77,  "المرسلات",     "Al-Mursalat",     "The Emissaries",                  50,  MECCAN,   33,  2,  29, 29, 580, True),
    Surah(78,  "النبأ",        "An-Naba",         "The Tidings",                     40,  MECCAN,   80,  2,  30, 30, 582, True),
    Surah(79,  "النازعات",     "An-Nazi'at",      "Those Who Drag Forth",            46,  MECCAN,   81,  2,  30, 30, 583, True),
    Surah(80,  "عبس",          "Abasa",           "He Frowned",                      42,  MECCAN,   24,  1,  30, 30, 585, True),
    Surah(81,  "التكوير",      "At-Takwir",       "The Overthrowing",                29,  MECCAN,   7,   1,  30, 30, 586, True),
    Surah(82,  "الانفطار",     "Al-Infitar",      "The Cleaving",                    19,  MECCAN,   82,  1,  30, 30, 587, True),
    Surah(83,  "المطففين",     "Al-Mutaffifin",   "The Defrauding",                  36,  MECCAN,   86,  1,  30, 30, 587, True),
    Surah(84,  "الانشقاق",     "Al-Inshiqaq",     "The Sundering",                   25,  MECCAN,   83,  1,  30, 30, 589, True),
    Surah(85,  "البروج",       "Al-Buruj",        "The Mansions of the Stars",       22,  MECCAN,   27,  1,  30, 30, 590, True),
    Surah(86,  "الطارق",       "At-Tariq",        "The Morning Star",                17,  MECCAN,   36,  1,  30, 30, 591, True),
    Surah(87,  "الأعلى",       "Al-A'la",         "The Most High",                   19,  MECCAN,   8,   1,  30, 30, 591, True),
    Surah(88,  "الغاشية",      "Al-Ghashiyah",    "The Overwhelming",                26,  MECCAN,   68,  1,  30, 30, 592, True),
    Surah(89,  "الفجر",        "Al-Fajr",         "The Dawn",                        30,  MECCAN,   10,  1,  30, 30, 593, True),
    Surah(90,  "البلد",        "Al-Balad",        "The City",                        20,  MECCAN,   35,  1,  30, 30, 594, True),
    Surah(91,  "الشمس",        "Ash-Shams",       "The Sun",                         15,  MECCAN,   26,  1,  30, 30, 595, True),
    Surah(92,  "الليل",        "Al-Layl",         "The Night",                       21,  MECCAN,   9,   1,  30, 30, 595, True),
    Surah(93,  "الضحى",        "Ad-Duha",         "The Morning Hours",               11,  MECCAN,   11,  1,  30, 30, 596, True),
    Surah(94,  "الشرح",        "Ash-Sharh",       "The Relief",                      8,   MECCAN,   12,  1,  30, 30, 596, True),
    Surah(95,  "التين",        "At-Tin",          "The Fig",                         8,   MECCAN,   28,  1,  30, 30, 597, True),
    Surah(96,  "العلق",        "Al-'Alaq",        "The Clot",                        19,  MECCAN,   1,   1,  30, 30, 597, True),
    Surah(97,  "القدر",        "Al-Qadr",         "The Power",                       5,   MECCAN,   25,  1,  30, 30, 598, True),
    Surah(98,  "البينة",       "Al-Bayyinah",     "The Clear Proof",                 8,   MEDINAN, 100, 1,  30, 30, 598, True),
    Surah(99,  "الزلزلة",      "Az-Zalzalah",     "The Earthquake",                  8,   MEDINAN, 93,  1,  30, 30, 599, True),
    Surah(100, "العاديات",     "Al-'Adiyat",      "The Coursers",                    11,  MECCAN,   14,  1,  30, 30, 599, True),
    Surah(101, "القارعة",      "Al-Qari'ah",      "The Calamity",                    11,  MECCAN,   30,  1,  30, 30, 600, True),
    Surah(102, "التكاثر",      "At-Takathur",     "The Rivalry in World Increase",   8,   MECCAN,   16,  1,  30, 30, 600, True),
    Surah(103, "العصر",        "Al-'Asr",         "The Declining Day",               3,   MECCAN,   13,  1,  30, 30, 601, True),
    Surah(104, "الهمزة",       "Al-Humazah",      "The Traducer",                    9,   MECCAN,   32,  1,  30, 30, 601, True),
    Surah(105, "الفيل",        "Al-Fil",          "The Elephant",                    5,   MECCAN,   19,  1,  30, 30, 601, True),
    Surah(106, "قريش",         "Quraysh",         "Quraysh",                         4,   MECCAN,   29,  1,  30, 30, 602, True),
    Surah(107, "الماعون",      "Al-Ma'un",        "The Small Kindnesses",            7,   MECCAN,   17,  1,  30, 30, 602, True),
    Surah(108, "الكوثر",       "Al-Kawthar",      "The Abundance",                   3,   MECCAN,   15,  1,  30, 30, 602, True),
    Surah(109, "الكافرون",     "Al-Kafirun",      "The Disbelievers",                6,   MECCAN,   18,  1,  30, 30, 603, True),
    Surah(110, "النصر",        "An-Nasr",         "The Divine Support",              3,   MEDINAN, 114, 1,  30, 30, 603, True),
    Surah(111, "المسد",        "Al-Masad",        "The Palm Fiber",                  5,   MECCAN,   6,   1,  30, 30, 603, True),
    Surah(112, "الإخلاص",      "Al-Ikhlas",       "The Sincerity",                   4,   MECCAN,   22,  1,  30, 30, 604, True),
    Surah(113, "الفلق",        "Al-Falaq",        "The Daybreak",                    5,   MECCAN,   20,  1,  30, 30, 604, True),
    Surah(114, "الناس",        "An-Nas",          "Mankind",                         6,   MECCAN,   21,  1,  30, 30, 604, True),
)

# number, start_surah, start_ayah, end_surah, end_ayah, arabic_name
JUZ: tuple[Juz, ...] = (
    Juz(1,  1,  1,   2,  141, "الم"),
    Juz(2,  2,  142, 2,  252, "سيقول"),
    Juz(3,  2,  253, 3,  92,  "تلك الرسل"),
    Juz(4,  3,  93,  4,  23,  "لن تنالوا"),
    Juz(5,  4,  24,  4,  147, "والمحصنات"),
    Juz(6,  4,  148, 5,  81,  "لا يحب الله"),
    Juz(7,  5,  82,  6,  110, "وإذا سمعوا"),
    Juz(8,  6,  111, 7,  87,  "ولو أننا"),
    Juz(9,  7,  88,  8,  40,  "قال الملأ"),
    Juz(10, 8,  41,  9,  92,  "واعلموا"),
    Juz(11, 9,  93,  11, 5,   "يعتذرون"),
    Juz(12, 11, 6,   12, 52,  "وما من دابة"),
    Juz(13, 12, 53,  14, 52,  "وما أبرئ"),
    Juz(14, 15, 1,   16, 128, "ربما"),
    Juz(15, 17, 1,   18, 74,  "سبحان الذي"),
    Juz(16, 18, 75,  20, 135, "قال ألم"),
    Juz(17, 21, 1,   22, 78,  "اقترب للناس"),
    Juz(18, 23, 1,   25, 20,  "قد أفلح"),
    Juz(19, 25, 21,  27, 55,  "وقال الذين"),
    Juz(20, 27, 56,  29, 45,  "أمن خلق"),
    Juz(21, 29, 46,  33, 30,  "اتل ما أوحي"),
    Juz(22, 33, 31,  36, 27,  "ومن يقنت"),
    Juz(23, 36, 28,  39, 31,  "وما لي"),
    Juz(24, 39, 32,  41, 46,  "فمن أظلم"),
    Juz(25, 41, 47,  45, 37,  "إليه يرد"),
    Juz(26, 46, 1,   51, 30,  "حم"),
    Juz(27, 51, 31,  57, 29,  "قال فما خطبكم"),
    Juz(28, 58, 1,   66, 12,  "قد سمع"),
    Juz(29, 67, 1,   77, 50,  "تبارك الذي"),
    Juz(30, 78, 1,   114, 6,  "عم"),
)

# Scholars differ on some classifications; this follows the majority opinion.
# number, surah, ayah, type
SAJDAS: tuple[SajdaVerse, ...] = (
    SajdaVerse(1,  7,  206, RECOMMENDED),   # Al-A'raf
    SajdaVerse(2,  13, 15,  RECOMMENDED),   # Ar-Ra'd
    SajdaVerse(3,  16, 50,  RECOMMENDED),   # An-Nahl
    SajdaVerse(4,  17, 109, RECOMMENDED),   # Al-Isra
    SajdaVerse(5,  19, 58,  RECOMMENDED),   # Maryam
    SajdaVerse(6,  22, 18,  RECOMMENDED),   # Al-Hajj
    SajdaVerse(7,  22, 77,  RECOMMENDED),   # Al-Hajj (second sajda)
    SajdaVerse(8,  25, 60,  RECOMMENDED),   # Al-Furqan
    SajdaVerse(9,  27, 26,  RECOMMENDED),   # An-Naml
    SajdaVerse(10, 32, 15,  OBLIGATORY),    # As-Sajdah
    SajdaVerse(11, 38, 24,  RECOMMENDED),   # Sad
    SajdaVerse(12, 41, 38,  RECOMMENDED),   # Fussilat
    SajdaVerse(13, 53, 62,  RECOMMENDED),   # An-Najm
    SajdaVerse(14, 84, 21,  RECOMMENDED),   # Al-Inshiqaq
    SajdaVerse(15, 96, 19,  RECOMMENDED),   # Al-'Alaq
)

# number, start_surah, start_ayah, end_surah, end_ayah
MANZILS: tuple[Manzil, ...] = (
    Manzil(1, 1,  1,   4,  126),  # Al-Fatiha 1:1   to An-Nisa 4:126
    Manzil(2, 4,  127, 9,  92),   # An-Nisa 4:127   to At-Tawbah 9:92
    Manzil(3, 9,  93,  16, 128),  # At-Tawbah 9:93  to An-Nahl 16:128
    Manzil(4, 17, 1,   25, 20),   # Al-Isra 17:1    to Al-Furqan 25:20
    Manzil(5, 25, 21,  36, 27),   # Al-Furqan 25:21 to Ya-Sin 36:27
    Manzil(6, 36, 28,  48, 29),   # Ya-Sin 36:28    to Al-Fath 48:29
    Manzil(7, 49, 1,   114, 6),   # Al-Hujurat 49:1 to An-Nas 114:6
)

# surah, transliteration, arabic letters
MUQATTAAT: tuple[MuqattaatSurah, ...] = (
    MuqattaatSurah(2,  "Alif Lam Mim",           "الم"),
    MuqattaatSurah(3,  "Alif Lam Mim",           "الم"),
    MuqattaatSurah(7,  "Alif Lam Mim Sad",       "المص"),
    MuqattaatSurah(10, "Alif Lam Ra",            "الر"),
    MuqattaatSurah(11, "Alif Lam Ra",            "الر"),
    MuqattaatSurah(12, "Alif Lam Ra",            "الر"),
    MuqattaatSurah(13, "Alif Lam Mim Ra",        "المر"),
    MuqattaatSurah(14, "Alif Lam Ra",            "الر"),
    MuqattaatSurah(15, "Alif Lam Ra",            "الر"),
    MuqattaatSurah(19, "Kaf Ha Ya Ain Sad",      "كهيعص"),
    MuqattaatSurah(20, "Ta Ha",                  "طه"),
    MuqattaatSurah(26, "Ta Sin Mim",             "طسم"),
    MuqattaatSurah(27, "Ta Sin",                 "طس"),
    MuqattaatSurah(28, "Ta Sin Mim",             "طسم"),
    MuqattaatSurah(29, "Alif Lam Mim",           "الم"),
    MuqattaatSurah(30, "Alif Lam Mim",           "الم"),
    MuqattaatSurah(31, "Alif Lam Mim",           "الم"),
    MuqattaatSurah(32, "Alif Lam Mim",           "الم"),
    MuqattaatSurah(36, "Ya Sin",                 "يس"),
    MuqattaatSurah(38, "Sad",                    "ص"),
    MuqattaatSurah(40, "Ha Mim",                 "حم"),
    MuqattaatSurah(41, "Ha Mim",                 "حم"),
    MuqattaatSurah(42, "Ha Mim Ain Sin Qaf",     "حم عسق"),
    MuqattaatSurah(43, "Ha Mim",                 "حم"),
    MuqattaatSurah(44, "Ha Mim",                 "حم"),
    MuqattaatSurah(45, "Ha Mim",                 "حم"),
    MuqattaatSurah(46, "Ha Mim",                 "حم"),
    MuqattaatSurah(50, "Qaf",                    "ق"),
    MuqattaatSurah(68, "Nun",                    "ن"),
)

E = TranslationEdition

TRANSLATIONS: tuple[TranslationInfo, ...] = (
    TranslationInfo(E.ENGLISH_SAHEEH_INTERNATIONAL, "en.sahih",           "en_sahih",           "Saheeh International",         "Saheeh International",                 "English", "ltr"),
    TranslationInfo(E.ENGLISH_YUSUF_ALI,            "en.yusufali",        "en_yusufali",        "Abdullah Yusuf Ali",           "Abdullah Yusuf Ali",                   "English", "ltr"),
    TranslationInfo(E.ENGLISH_PICKTHALL,            "en.pickthall",       "en_pickthall",       "Mohammed Marmaduke Pickthall", "Mohammed Marmaduke William Pickthall", "English", "ltr"),
    TranslationInfo(E.ENGLISH_CLEAR_QURAN,          "en.itani",           "en_itani",           "Clear Quran - Talal Itani",    "Talal Itani",                          "English", "ltr"),
    TranslationInfo(E.ENGLISH_MAUDUDI,              "en.maududi",         "en_maududi",         "Abul Ala Maududi",             "Abul Ala Maududi",                     "English", "ltr"),
    TranslationInfo(E.ENGLISH_TRANSLITERATION,      "en.transliteration", "en_transliteration", "English Transliteration",      "English Transliteration",              "English", "ltr", "transliteration"),
    TranslationInfo(E.URDU_JALANDHRY,               "ur.jalandhry",       "ur_jalandhry",       "Fateh Muhammad Jalandhry",     "Fateh Muhammad Jalandhry",             "Urdu",    "rtl"),
    TranslationInfo(E.URDU_JUNAGARHI,               "ur.junagarhi",       "ur_junagarhi",       "Muhammad Junagarhi",           "Muhammad Junagarhi",                   "Urdu",    "rtl"),
    TranslationInfo(E.URDU_MAUDUDI,                 "ur.maududi",         "ur_maududi",         "Abul A'ala Maududi",           "Abul A'ala Maududi",                   "Urdu",    "rtl"),
)

del E

# ---------------------------------------------------------------------------
# Lookup maps
# ---------------------------------------------------------------------------

SURAH_BY_NUMBER: dict[int, Surah] = {s.number: s for s in SURAHS}
SURAH_BY_ENGLISH_NAME: dict[str, Surah] = {s.english_name.lower(): s for s in SURAHS}
SURAH_BY_ARABIC_NAME: dict[str, Surah] = {s.arabic_name: s for s in SURAHS}
JUZ_BY_NUMBER: dict[int, Juz] = {j.number: j for j in JUZ}
MANZIL_BY_NUMBER: dict[int, Manzil] = {m.number: m for m in MANZILS}
MUQATTAAT_BY_SURAH: dict[int, MuqattaatSurah] = {m.surah_number: m for m in MUQATTAAT}
SAJDA_BY_VERSE: dict[tuple[int, int], SajdaVerse] = {
    (s.surah_number, s.ayah_number): s for s in SAJDAS
}
TRANSLATION_BY_EDITION: dict[TranslationEdition, TranslationInfo] = {
    t.edition: t for t in TRANSLATIONS
}


def resolve_surah_number(surah) -> int:
    """
    Validate a surah reference and return its number.

    Args:
        surah: Surah number or SurahName member

    Raises:
        SurahNotFoundError: If *surah* is not a number, or not 1-114
    """
    try:
        number = int(surah)
    except (TypeError, ValueError):
        raise SurahNotFoundError(
            f"Surah '{surah}' was not found. Valid range is 1-114.", name=str(surah)
        ) from None
    if number not in SURAH_BY_NUMBER:
        raise surah_not_found(number)
    return number
