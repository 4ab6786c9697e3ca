"""Term data models.

A term file is parsed into a :class:`Term`: an English title, an optional
abbreviation, an Arabic description, Arabic tags and a list of candidate
Arabic translations, each with the usernames that approved it.
"""

from pydantic import BaseModel, ConfigDict, Field


class ArabicWord(BaseModel):
    """One candidate Arabic translation and its approvers."""

    model_config = ConfigDict(populate_by_name=True)

    word: str = Field(..., description="Arabic translation text")
    approved_by: list[str] = Field(
        default_factory=list,
        alias="approvedBy",
        description="Usernames that approved this word, in document order",
    )


class Term(BaseModel):
    """A parsed glossary entry.

    Attributes:
        title: Heading text of the first ``# Title`` line
        abbrev: Explicit ``(ABBR)`` from the title line or a generated one
        description: Trimmed description text
        tags: Tag list items in document order
        arabic_words: Arabic translation candidates in document order
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    abbrev: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    arabic_words: list[ArabicWord] = Field(default_factory=list, alias="arabicWords")
