"""Phrase tables consumed by the heuristic analyzers.

The defaults live in ``brand_vetting.constants``.  A JSON file named by
``BRAND_VETTING_LEXICON_PATH`` (or passed explicitly) may override any
table by field name, e.g.::

    {"negative_phrases": ["greenwashing", "oil spill"]}
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from .. import constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lexicon:
    fictitious_patterns: tuple[str, ...] = constants.FICTITIOUS_PATTERNS
    query_templates: tuple[str, ...] = constants.QUERY_TEMPLATES
    business_context_terms: tuple[str, ...] = constants.BUSINESS_CONTEXT_TERMS
    certification_negative_phrases: tuple[str, ...] = constants.CERTIFICATION_NEGATIVE_PHRASES
    certification_positive_phrases: tuple[str, ...] = constants.CERTIFICATION_POSITIVE_PHRASES
    strong_positive_phrases: tuple[str, ...] = constants.STRONG_POSITIVE_PHRASES
    positive_phrases: tuple[str, ...] = constants.POSITIVE_PHRASES
    strong_negative_phrases: tuple[str, ...] = constants.STRONG_NEGATIVE_PHRASES
    negative_phrases: tuple[str, ...] = constants.NEGATIVE_PHRASES
    sustainability_terms: tuple[str, ...] = constants.SUSTAINABILITY_TERMS


DEFAULT_LEXICON = Lexicon()


def lexicon_from_dict(overrides: dict) -> Lexicon:
    """Build a Lexicon from DEFAULT_LEXICON with *overrides* applied.

    Raises ValueError on unknown keys, non-list values, query templates that
    do not format with {brand} and {year}, or patterns that do not compile.
    """
    known = {f.name for f in fields(Lexicon)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown lexicon tables: {sorted(unknown)}")

    cleaned: dict[str, tuple[str, ...]] = {}
    for key, value in overrides.items():
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"Lexicon table {key!r} must be a list of strings")
        cleaned[key] = tuple(value)

    if "query_templates" in cleaned:
        _check_query_templates(cleaned["query_templates"])
    if "fictitious_patterns" in cleaned:
        _check_patterns(cleaned["fictitious_patterns"])

    return replace(DEFAULT_LEXICON, **cleaned)


def _check_query_templates(templates: tuple[str, ...]) -> None:
    if len(templates) != 5:
        raise ValueError("query_templates must contain exactly 5 templates")
    for template in templates:
        if "{brand}" not in template:
            raise ValueError(f"Query template {template!r} has no {{brand}} placeholder")
        try:
            template.format(brand="x", year=2000)
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"Query template {template!r} is not formattable: {exc}") from exc


def _check_patterns(patterns: tuple[str, ...]) -> None:
    for pattern in patterns:
        try:
            re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"Fictitious pattern {pattern!r} is not a valid regex: {exc}") from exc


def load_lexicon(path: Optional[Union[str, Path]] = None) -> Lexicon:
    """Load the lexicon, merging JSON overrides when a path is configured."""
    path = path or os.getenv("BRAND_VETTING_LEXICON_PATH", "").strip()
    if not path:
        return DEFAULT_LEXICON

    with open(path, encoding="utf-8") as fh:
        overrides = json.load(fh)

    lexicon = lexicon_from_dict(overrides)
    logger.info("Loaded lexicon overrides from %s (%d tables)", path, len(overrides))
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    """Process-wide lexicon used by the API (loaded once)."""
    return load_lexicon()
