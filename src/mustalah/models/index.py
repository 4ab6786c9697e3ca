"""Index artifact models.

These models describe the JSON files published next to the term markdown:
``index.json`` per category (:class:`CategoryIndex`) and ``categories.json``
at the data root (:class:`RootIndex`). Field aliases carry the camelCase JSON
names; dump with :func:`dump_index` to get the published shape.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TermIndex(BaseModel):
    """Lightweight projection of a term for listings.

    ``abbrev`` is None (and omitted from JSON) when the term has none.
    """

    slug: str
    title: str
    abbrev: str | None = None

    @field_validator("abbrev")
    @classmethod
    def empty_abbrev_is_absent(cls, v: str | None) -> str | None:
        """Normalise an empty abbreviation to None."""
        return v or None


class CategoryIndex(BaseModel):
    """Sorted term listing for one category directory."""

    model_config = ConfigDict(populate_by_name=True)

    terms: list[TermIndex] = Field(default_factory=list)
    generated_at: str = Field(default_factory=utc_timestamp, alias="generatedAt")


class ApproverInfo(BaseModel):
    """Number of approvals credited to one username."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    approve_count: int = Field(..., alias="approveCount", ge=0)


class CategoryMeta(BaseModel):
    """Contents of a category's ``meta.json``."""

    name: str = Field(..., min_length=1)
    description: str | None = None

    @field_validator("description")
    @classmethod
    def empty_description_is_absent(cls, v: str | None) -> str | None:
        """Treat an empty description as missing."""
        return v or None


class CategoryEntry(BaseModel):
    """One category in the root index."""

    model_config = ConfigDict(populate_by_name=True)

    path: str = Field(..., description="Directory name of the category")
    name: str = Field(..., description="Display name from meta.json or path")
    description: str | None = None
    terms_count: int = Field(..., alias="termsCount", ge=0)
    approvers: list[ApproverInfo] = Field(default_factory=list)
    terms: list[TermIndex] = Field(default_factory=list)


class RootIndex(BaseModel):
    """Top-level listing of every non-empty category."""

    model_config = ConfigDict(populate_by_name=True)

    categories: list[CategoryEntry] = Field(default_factory=list)
    generated_at: str = Field(default_factory=utc_timestamp, alias="generatedAt")


def dump_index(index: BaseModel) -> dict[str, Any]:
    """Return the JSON-ready dict for an index model.

    Uses camelCase aliases and drops optional fields that are unset.
    """
    return index.model_dump(mode="json", by_alias=True, exclude_none=True)
