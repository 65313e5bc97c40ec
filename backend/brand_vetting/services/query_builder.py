"""Evidence query builder — exactly 5 topic-scoped queries per brand.

Topics (LOCKED order):
  1. Certification status
  2. Sustainability / environmental record
  3. Greenwashing / controversy
  4. ESG rating
  5. General corporate / ethics profile
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from .lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)


def build_evidence_queries(
    brand_name: str,
    lexicon: Lexicon = DEFAULT_LEXICON,
    *,
    year: Optional[int] = None,
) -> List[str]:
    """Interpolate *brand_name* into the lexicon's 5 query templates."""
    year = year or datetime.now(timezone.utc).year
    queries = [t.format(brand=brand_name, year=year) for t in lexicon.query_templates]

    logger.debug("Built %d evidence queries for %r", len(queries), brand_name)
    return queries
