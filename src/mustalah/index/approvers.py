"""Approver aggregation across terms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from mustalah.models.index import ApproverInfo


def aggregate_approvers(terms: Iterable[Any]) -> list[ApproverInfo]:
    """Count approvals per username over every Arabic word of every term.

    Each occurrence of a username in an ``approved_by`` list counts once, so a
    name repeated on the same word is counted repeatedly. Terms or words with
    no ``arabic_words`` / ``approved_by`` contribute nothing.

    Args:
        terms: Parsed terms (one category's worth when building the root index)

    Returns:
        ApproverInfo entries sorted by username
    """
    counts: Counter[str] = Counter()

    for term in terms:
        for arabic_word in getattr(term, "arabic_words", None) or []:
            counts.update(getattr(arabic_word, "approved_by", None) or [])

    return [
        ApproverInfo(username=username, approve_count=count)
        for username, count in sorted(counts.items())
    ]
