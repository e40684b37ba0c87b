"""
Fuzzy filtering of completion candidates.

A candidate matches when the typed pattern is an ordered, case-insensitive
subsequence of it. Matches are ranked with rapidfuzz so that candidates
sharing longer runs with the pattern come first.
"""

from __future__ import annotations

from collections.abc import Iterable

from rapidfuzz import fuzz


def is_subsequence(pattern: str, text: str) -> bool:
    """True if all characters of ``pattern`` occur in ``text`` in order."""
    remaining = iter(text.lower())
    return all(char in remaining for char in pattern.lower())


def simple_filter(pattern: str, candidates: Iterable[str]) -> list[str]:
    """
    Candidates matching ``pattern``, best match first.

    An empty pattern matches everything and keeps the catalog order. Equal
    scores keep the catalog order as well.
    """
    matches = [c for c in candidates if is_subsequence(pattern, c)]
    if not pattern:
        return matches

    needle = pattern.lower()
    scores = {c: fuzz.partial_ratio(needle, c.lower()) for c in matches}
    return sorted(matches, key=lambda c: scores[c], reverse=True)
