"""Collation helpers for sorting Arabic category names.

Category names are ordered with ICU's Arabic (``ar``) collation: Arabic
script sorts before Latin, vowel marks only break ties, and letter variants
such as teh marbuta and alef maksura sort with their base letters.
"""

from __future__ import annotations

from functools import lru_cache

import icu

COLLATION_LOCALE = "ar"


@lru_cache(maxsize=1)
def _collator() -> icu.Collator:
    return icu.Collator.createInstance(icu.Locale(COLLATION_LOCALE))


def arabic_sort_key(text: str) -> bytes:
    """Return an ICU sort key suitable for ``sorted(..., key=...)``."""
    return _collator().getSortKey(text)
