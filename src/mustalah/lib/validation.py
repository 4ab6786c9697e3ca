"""Content validation for parsed terms.

Validation runs in two tiers. Terms that fail the structural gate
(:func:`~mustalah.lib.md_parser.is_valid_term`) only get ``required`` errors
for the missing top-level fields. Structurally valid terms are then checked
against the content rules: an Arabic description, at least one Arabic tag,
and at least one Arabic word with at least one approver. Content checks
accumulate rather than stopping at the first problem.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from mustalah.lib.arabic import contains_arabic
from mustalah.lib.md_parser import is_valid_term
from mustalah.models.validation import ValidationErrorType, ValidationIssue

TITLE_LINE_RE = re.compile(r"^# ")
DESCRIPTION_LINE_RE = re.compile(r"^## Description$")
TAGS_LINE_RE = re.compile(r"^## Tags$")
ARABIC_WORDS_LINE_RE = re.compile(r"^# Arabic Words$")
WORD_LINE_RE = re.compile(r"^## .+$")
APPROVED_BY_LINE_RE = re.compile(r"^### Approved By$")


def find_line_number(
    lines: Sequence[str],
    pattern: re.Pattern[str],
    occurrence: int = 1,
    start: int = 0,
) -> int | None:
    """Return the 1-based line number of the n-th line matching ``pattern``.

    Lines are trimmed before matching.

    Args:
        lines: Document lines
        pattern: Compiled pattern to search for
        occurrence: Which match to return (1 = first)
        start: 0-based index to begin searching from

    Returns:
        Line number, or None if there are fewer matches than ``occurrence``
    """
    count = 0
    for index in range(start, len(lines)):
        if pattern.search(lines[index].strip()):
            count += 1
            if count == occurrence:
                return index + 1
    return None


class _IssueCollector:
    def __init__(self, filename: str, lines: list[str]) -> None:
        self.filename = filename
        self.lines = lines
        self.issues: list[ValidationIssue] = []

    def add(
        self,
        error_type: ValidationErrorType,
        message: str,
        line: int | None = None,
    ) -> None:
        self.issues.append(
            ValidationIssue(
                file=self.filename, type=error_type, message=message, line=line
            )
        )

    def line_of(
        self, pattern: re.Pattern[str], occurrence: int = 1, start: int = 0
    ) -> int | None:
        return find_line_number(self.lines, pattern, occurrence, start)


def validate_term_structure(
    term: Any, content: str, filename: str
) -> list[ValidationIssue]:
    """Check a parsed term against the structural and content rules.

    Args:
        term: Parsed term (normally a Term, but any object is accepted)
        content: Raw markdown the term was parsed from, used for line numbers
        filename: Name reported in every issue

    Returns:
        Issues in the order they were found; empty when the term is valid
    """
    collector = _IssueCollector(filename, content.split("\n"))

    if not is_valid_term(term):
        _check_required_fields(term, collector)
        return collector.issues

    _check_description(term.description, collector)
    _check_tags(term.tags, collector)
    _check_arabic_words(term.arabic_words, collector)
    return collector.issues


def _check_required_fields(term: Any, collector: _IssueCollector) -> None:
    title = getattr(term, "title", None)
    if not title:
        collector.add(
            ValidationErrorType.REQUIRED,
            "Missing or empty title (expected: # Title)",
            collector.line_of(TITLE_LINE_RE),
        )
    if not isinstance(getattr(term, "tags", None), list):
        collector.add(
            ValidationErrorType.REQUIRED,
            "Tags section missing or invalid (expected: ## Tags with list items)",
            collector.line_of(TAGS_LINE_RE),
        )
    if not isinstance(getattr(term, "arabic_words", None), list):
        collector.add(
            ValidationErrorType.REQUIRED,
            "Arabic Words section missing or invalid "
            "(expected: # Arabic Words with ## Arabic Word subsections)",
            collector.line_of(ARABIC_WORDS_LINE_RE),
        )


def _check_description(description: str, collector: _IssueCollector) -> None:
    line = collector.line_of(DESCRIPTION_LINE_RE)
    if not description or not description.strip():
        collector.add(
            ValidationErrorType.REQUIRED,
            "Missing or empty description "
            "(expected: ## Description with Arabic content)",
            line,
        )
    elif not contains_arabic(description):
        collector.add(
            ValidationErrorType.CONTENT, "Description must be in Arabic", line
        )


def _check_tags(tags: list[str], collector: _IssueCollector) -> None:
    line = collector.line_of(TAGS_LINE_RE)
    if not tags:
        collector.add(
            ValidationErrorType.REQUIRED,
            "At least one tag is required (expected: - tagname in ## Tags section)",
            line,
        )
        return

    non_arabic = [tag for tag in tags if not contains_arabic(tag)]
    if non_arabic:
        collector.add(
            ValidationErrorType.CONTENT,
            f"All tags must be in Arabic. Non-Arabic tags: {', '.join(non_arabic)}",
            line,
        )


def _check_arabic_words(words: list[Any], collector: _IssueCollector) -> None:
    section_line = collector.line_of(ARABIC_WORDS_LINE_RE)
    if not words:
        collector.add(
            ValidationErrorType.REQUIRED,
            "At least one Arabic word is required "
            "(expected: ## Arabic Word in # Arabic Words section)",
            section_line,
        )
        return

    # word headings are only searched for below the "# Arabic Words" heading
    search_from = section_line or 0

    for index, arabic_word in enumerate(words, start=1):
        word = getattr(arabic_word, "word", "") or ""
        word_line = collector.line_of(WORD_LINE_RE, index, search_from)

        if not word.strip():
            collector.add(
                ValidationErrorType.REQUIRED,
                f"Arabic word #{index} is empty",
                word_line,
            )
        elif not contains_arabic(word):
            collector.add(
                ValidationErrorType.CONTENT,
                f'Arabic word #{index} must be in Arabic: "{word}"',
                word_line,
            )

        if not getattr(arabic_word, "approved_by", None):
            collector.add(
                ValidationErrorType.REQUIRED,
                f'Arabic word "{word}" must have at least one approver '
                "(expected: ### Approved By with - username)",
                collector.line_of(APPROVED_BY_LINE_RE, 1, (word_line or 1) - 1),
            )
