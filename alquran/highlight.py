"""
Highlight a diacritics-insensitive match inside the original text.
"""

from typing import Callable

from .arabic import normalize_for_search, strip_diacritics_with_map, unify_alef_forms


def highlight_match(text: str | None, term: str | None,
                    wrapper: Callable[[str], str] | None) -> str | None:
    """
    Wrap the first occurrence of *term* in *text* using *wrapper*.

    Matching ignores tashkeel, Alef form and case, but the slice handed to
    *wrapper* is taken from the original text, so marks between the
    matched letters are kept. Marks after the last matched letter stay
    outside the wrapped slice.

    Args:
        text: Original text (e.g. an Uthmani ayah)
        term: Search term, with or without tashkeel
        wrapper: Called with the matched original substring, e.g.
            ``lambda s: f"<b>{s}</b>"``

    Returns:
        The text with the match wrapped, or *text* unchanged when there is
        nothing to do (empty input, no wrapper, or no match).
        Any character in *text* or *term* whose lowercase form has a
        different length (e.g. "İ") disables highlighting for the whole
        call, since offsets could no longer be mapped back.
    """
    if not text or not term or wrapper is None:
        return text

    needle = normalize_for_search(term)
    if not needle:
        return text

    stripped, index_map = strip_diacritics_with_map(text)
    # Untrimmed so positions line up with index_map
    haystack = unify_alef_forms(stripped)

    folded_haystack = haystack.lower()
    folded_needle = needle.lower()
    if (len(haystack) != len(index_map)
            or len(folded_haystack) != len(haystack)
            or len(folded_needle) != len(needle)):
        # A substitution changed lengths; the map can't be trusted
        return text

    index = folded_haystack.find(folded_needle)
    if index < 0:
        return text

    start = index_map[index]
    end = index_map[index + len(needle) - 1] + 1

    return text[:start] + wrapper(text[start:end]) + text[end:]
