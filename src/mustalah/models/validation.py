"""Validation result models for term files."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ValidationErrorType(str, Enum):
    """Category of a validation problem.

    - required: a mandatory element is missing or empty
    - content: the element exists but is not written in Arabic
    - format: the file could not be read or parsed at all
    """

    REQUIRED = "required"
    FORMAT = "format"
    CONTENT = "content"


class ValidationIssue(BaseModel):
    """A single problem found in a term file."""

    file: str = Field(..., description="File name the problem was found in")
    type: ValidationErrorType = Field(..., description="Problem category")
    message: str = Field(..., description="Human-readable description")
    line: int | None = Field(None, description="1-based line number, if known")


class ValidationResultData(BaseModel):
    """Summary of a term file that passed validation."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    abbrev: str
    tags_count: int = Field(..., alias="tagsCount", ge=0)
    arabic_words_count: int = Field(..., alias="arabicWordsCount", ge=0)


class ValidationResult(BaseModel):
    """Outcome of validating one term file.

    ``data`` is only present when the file has no errors.
    """

    valid: bool
    file: str
    errors: list[ValidationIssue] = Field(default_factory=list)
    data: ValidationResultData | None = None
