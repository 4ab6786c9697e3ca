"""Base interface for term repositories.

A repository serves the published artifacts (``categories.json``,
``<category>/index.json``) and the raw term markdown to readers such as the
static site.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from mustalah.lib.errors import RepositoryError
from mustalah.models.index import CategoryIndex, RootIndex, utc_timestamp
from mustalah.models.term import Term


class TermRepository(ABC):
    """Abstract base class for term repositories."""

    @abstractmethod
    def fetch_root_index(self) -> RootIndex:
        """Return the published root index.

        Raises:
            ResourceNotFoundError: If no root index is published.
            RepositoryError: If the index cannot be retrieved or decoded.
        """

    @abstractmethod
    def fetch_category_index(self, category: str) -> CategoryIndex:
        """Return the published index of one category.

        Args:
            category: Category directory name.

        Raises:
            ResourceNotFoundError: If the category has no index.
            RepositoryError: If the index cannot be retrieved or decoded.
        """

    @abstractmethod
    def fetch_term(self, category: str, slug: str) -> Term:
        """Return the parsed term ``slug`` of ``category``.

        Raises:
            ResourceNotFoundError: If the term file does not exist.
            RepositoryError: If the term cannot be retrieved.
        """


def root_index_from_payload(payload: Any, source: str) -> RootIndex:
    """Validate a decoded ``categories.json`` payload."""
    try:
        return RootIndex.model_validate(payload)
    except ValidationError as e:
        raise RepositoryError(f"Invalid root index from {source}: {e}") from e


def category_index_from_payload(payload: Any, source: str) -> CategoryIndex:
    """Validate a decoded ``index.json`` payload.

    Older indexes are a bare list of term entries; those are accepted, and a
    missing ``generatedAt`` is filled with the current time.
    """
    if isinstance(payload, list):
        terms: Any = payload
        generated_at = None
    elif isinstance(payload, dict):
        terms = payload.get("terms") or []
        generated_at = payload.get("generatedAt")
    else:
        raise RepositoryError(f"Invalid category index from {source}")

    try:
        return CategoryIndex(
            terms=terms, generated_at=generated_at or utc_timestamp()
        )
    except ValidationError as e:
        raise RepositoryError(f"Invalid category index from {source}: {e}") from e
