"""Certification Detector.

Looks for explicit statements about third-party (B Corp) certification
in the evidence text.

Rules
-----
- Explicit negative statements win: any match returns False immediately
- A positive phrase counts only within the proximity window of a brand
  mention, so certification language about another entity in the same
  result set is not credited
"""

from __future__ import annotations

from typing import Iterator

from .. import constants
from .lexicon import DEFAULT_LEXICON, Lexicon


def _positions(haystack: str, needle: str) -> Iterator[int]:
    """Yield every start index of *needle* in *haystack*."""
    if not needle:
        return
    start = haystack.find(needle)
    while start != -1:
        yield start
        start = haystack.find(needle, start + 1)


def has_negative_certification_statement(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    lower_text = text.lower()
    return any(phrase in lower_text for phrase in lexicon.certification_negative_phrases)


def detect_certification(
    text: str,
    brand_name: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
    window: int = constants.CERTIFICATION_PROXIMITY_WINDOW,
) -> bool:
    """Return True if a positive certification phrase sits near the brand."""
    if has_negative_certification_statement(text, lexicon):
        return False

    lower_text = text.lower()
    brand_positions = list(_positions(lower_text, brand_name.lower()))
    if not brand_positions:
        return False

    for phrase in lexicon.certification_positive_phrases:
        for phrase_pos in _positions(lower_text, phrase):
            if any(abs(phrase_pos - b) < window for b in brand_positions):
                return True
    return False
