"""Existence Classifier.

Decides whether gathered evidence is enough to treat a brand as found.
A brand is found only when the evidence text is long enough, at least
one item came back, and the text mentions the brand alongside at least
one business-context term.
"""

from __future__ import annotations

from .. import constants
from ..schemas.evidence_schema import EvidenceBundle
from .lexicon import DEFAULT_LEXICON, Lexicon


def contains_brand_relevant_content(
    text: str,
    brand_name: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> bool:
    """True if *text* names the brand and has business framing."""
    lower_text = text.lower()
    has_brand = brand_name.lower() in lower_text
    has_context = any(term in lower_text for term in lexicon.business_context_terms)
    return has_brand and has_context


def brand_exists(
    bundle: EvidenceBundle,
    brand_name: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> bool:
    text = bundle.text
    if len(text) < constants.MIN_EVIDENCE_TEXT_LENGTH:
        return False
    if bundle.item_count < constants.MIN_EVIDENCE_ITEMS:
        return False
    return contains_brand_relevant_content(text, brand_name, lexicon)
