"""Input Validator.

Normalizes the raw brand name and rejects malformed or obviously
fictitious input before any evidence is gathered.  No side effects.
"""

from __future__ import annotations

import re
from typing import Optional

from ..errors import ValidationError
from .lexicon import DEFAULT_LEXICON, Lexicon

_MIN_LENGTH = 2


def is_fictitious_brand(name: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    """Return True if *name* matches any deny-list pattern (case-insensitive)."""
    return any(re.search(pattern, name, re.IGNORECASE) for pattern in lexicon.fictitious_patterns)


def validate_brand_name(raw: Optional[str], lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Return the trimmed brand name or raise ``ValidationError``.

    Checks run in order: length, presence of a letter, deny-list.
    """
    name = raw.strip() if isinstance(raw, str) else ""

    if len(name) < _MIN_LENGTH:
        raise ValidationError(
            "too short",
            "Brand name must be at least 2 characters long",
        )

    if not any(ch.isalpha() for ch in name):
        raise ValidationError(
            "no letters",
            "Brand name must contain at least one letter",
        )

    if is_fictitious_brand(name, lexicon):
        raise ValidationError(
            "fictitious",
            f'"{name}" appears to be a fictitious brand name. Please enter a real company name.',
        )

    return name
