"""
Arabic text normalization for diacritics-insensitive search.

Every function here is total: ``None`` comes back as ``None``, an empty
string as an empty string, and nothing raises.
"""

import re

# Tashkeel and Quranic annotation marks (inclusive code point ranges)
MARK_RANGES: tuple[tuple[str, str], ...] = (
    ("\u064B", "\u0655"),   # fathatan .. hamza below
    ("\u0670", "\u0670"),   # superscript alef
    ("\u06D6", "\u06ED"),   # small high ligatures, waqf and annotation marks
    ("\u0610", "\u061A"),   # honorifics and small marks above/below
    ("\uFE70", "\uFE7F"),   # presentation-form harakat
)

_MARKS_RE = re.compile(
    "[" + "".join(lo if lo == hi else f"{lo}-{hi}" for lo, hi in MARK_RANGES) + "]"
)

# Alef with madda, hamza above, hamza below. Alef wasla (U+0671) is not included.
_ALEF_FORMS_RE = re.compile("[\u0622\u0623\u0625]")
PLAIN_ALEF = "\u0627"


def is_mark_character(c: str) -> bool:
    """Return True if *c* is a single tashkeel (diacritical or annotation) mark."""
    if not isinstance(c, str) or len(c) != 1:
        return False
    return any(lo <= c <= hi for lo, hi in MARK_RANGES)


def strip_diacritics(text: str | None) -> str | None:
    """
    Remove all tashkeel from the text.

    Letters, whitespace and characters from other scripts pass through.
    """
    if not text:
        return text
    return _MARKS_RE.sub("", text)


def strip_diacritics_with_map(text: str | None) -> tuple[str | None, list[int]]:
    """
    Remove tashkeel and record where each surviving character came from.

    Args:
        text: Arabic text, possibly with tashkeel

    Returns:
        (stripped, index_map) where ``index_map[i]`` is the offset in *text*
        of ``stripped[i]``. The map is strictly increasing and has exactly
        ``len(stripped)`` entries.
    """
    if not text:
        return text, []

    chars = []
    index_map = []
    for i, c in enumerate(text):
        if not is_mark_character(c):
            index_map.append(i)
            chars.append(c)

    return "".join(chars), index_map


def unify_alef_forms(text: str | None) -> str | None:
    """Replace the decorated Alef forms (آ أ إ) with plain Alef (ا)."""
    if not text:
        return text
    return _ALEF_FORMS_RE.sub(PLAIN_ALEF, text)


def normalize_for_search(text: str | None) -> str | None:
    """Remove tashkeel, unify Alef forms and strip surrounding whitespace."""
    if not text:
        return text
    return unify_alef_forms(strip_diacritics(text)).strip()
