"""Markdown parser for Arabic tech terms.

Converts the text of one term file into a :class:`~mustalah.models.term.Term`.
The parser is a single forward pass over the lines of the document, driven by
a small state machine (:class:`SectionState`). Each line is dispatched once
through an ordered list of rules; the first rule that applies consumes it.

Expected layout::

    # Title (ABBR)

    ## Description
    Arabic text...

    ## Tags
    - tag

    # Arabic Words

    ## word
    ### Approved By
    - username
"""

from __future__ import annotations

import re
from enum import Enum, auto

from mustalah.lib.abbreviation import generate_abbreviation
from mustalah.models.term import ArabicWord, Term

TITLE_RE = re.compile(r"# (.+?)(?:\s*\(([^)]+)\))?")
MD_SUFFIX_RE = re.compile(r"\.md$", re.IGNORECASE)
BYTE_ORDER_MARK = "\ufeff"

DESCRIPTION_HEADING = "## Description"
TAGS_HEADING = "## Tags"
ARABIC_WORDS_HEADING = "# Arabic Words"
APPROVED_BY_HEADING = "### Approved By"
SUBSECTION_PREFIX = "## "
LIST_ITEM_PREFIX = "- "


class SectionState(Enum):
    """Section of the document the parser is currently in."""

    NONE = auto()
    DESCRIPTION = auto()
    TAGS = auto()
    ARABIC_WORDS = auto()
    APPROVED_BY = auto()
    UNKNOWN = auto()


class _TermParser:
    """Accumulates a Term line by line."""

    def __init__(self) -> None:
        self.term = Term()
        self.state = SectionState.NONE
        self.current_word: ArabicWord | None = None
        self.title_found = False
        self._description_lines: list[str] = []

    def feed(self, line: str) -> None:
        """Consume one raw line of the document."""
        trimmed = line.strip()

        if not trimmed and self.state is not SectionState.DESCRIPTION:
            return

        if (
            not self.title_found
            and trimmed.startswith("# ")
            and not trimmed.startswith(SUBSECTION_PREFIX)
        ):
            self._read_title(trimmed)
            self.state = SectionState.NONE
            return

        if trimmed == DESCRIPTION_HEADING:
            self.state = SectionState.DESCRIPTION
            self._description_lines = []
            return

        if trimmed == TAGS_HEADING:
            self.state = SectionState.TAGS
            return

        if trimmed == ARABIC_WORDS_HEADING:
            self.state = SectionState.ARABIC_WORDS
            return

        if trimmed.startswith(SUBSECTION_PREFIX) and self.state in (
            SectionState.ARABIC_WORDS,
            SectionState.APPROVED_BY,
        ):
            self.current_word = ArabicWord(
                word=trimmed[len(SUBSECTION_PREFIX) :].strip(), approved_by=[]
            )
            self.term.arabic_words.append(self.current_word)
            self.state = SectionState.ARABIC_WORDS
            return

        if trimmed == APPROVED_BY_HEADING and self.current_word is not None:
            self.state = SectionState.APPROVED_BY
            return

        if trimmed.startswith(LIST_ITEM_PREFIX):
            self._read_list_item(trimmed[len(LIST_ITEM_PREFIX) :].strip())
            return

        if self.state is SectionState.DESCRIPTION:
            if trimmed.startswith(SUBSECTION_PREFIX):
                self.state = SectionState.UNKNOWN
            elif trimmed:
                self._description_lines.append(trimmed)

    def _read_title(self, trimmed: str) -> None:
        match = TITLE_RE.fullmatch(trimmed)
        if match:
            self.term.title = match.group(1).strip()
            self.term.abbrev = match.group(2) or ""
            self.title_found = True

    def _read_list_item(self, item: str) -> None:
        if self.state is SectionState.TAGS:
            self.term.tags.append(item)
        elif self.state is SectionState.APPROVED_BY and self.current_word is not None:
            self.current_word.approved_by.append(item)

    def finish(self) -> Term:
        """Apply post-pass normalisation and return the term."""
        term = self.term
        term.description = "\n".join(self._description_lines).strip()

        if not term.abbrev and term.title and len(term.title.split()) > 1:
            term.abbrev = generate_abbreviation(term.title)

        return term


def parse_markdown(content: str) -> Term:
    """Parse a term markdown document.

    Never fails for string input: missing sections simply leave the
    corresponding fields empty. A leading byte-order mark is ignored.

    Args:
        content: Full text of the markdown file

    Returns:
        Parsed Term

    Raises:
        TypeError: If content is not a string
    """
    if not isinstance(content, str):
        raise TypeError("Content must be a string")

    parser = _TermParser()
    for line in content.removeprefix(BYTE_ORDER_MARK).split("\n"):
        parser.feed(line)
    return parser.finish()


def is_valid_term(term: object) -> bool:
    """Structural check: a non-empty title plus list-typed tags and words.

    Content rules (Arabic text, non-empty lists, approvers) are checked by
    :func:`mustalah.lib.validation.validate_term_structure`.
    """
    if term is None:
        return False
    title = getattr(term, "title", None)
    return (
        isinstance(title, str)
        and len(title) > 0
        and isinstance(getattr(term, "tags", None), list)
        and isinstance(getattr(term, "arabic_words", None), list)
    )


def extract_slug(filename: str) -> str:
    """Strip a trailing ``.md`` (any case) from a filename.

    Raises:
        TypeError: If filename is not a string
    """
    if not isinstance(filename, str):
        raise TypeError("Filename must be a string")
    return MD_SUFFIX_RE.sub("", filename)
