"""Abbreviation generation for multi-word term titles."""

IGNORED_WORDS = frozenset(
    {
        "the",
        "a",
        "an",
        "in",
        "on",
        "at",
        "for",
        "with",
        "by",
        "and",
        "or",
        "as",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
    }
)


def generate_abbreviation(title: object) -> str:
    """Build an abbreviation from the first letter of each significant word.

    Stop words in :data:`IGNORED_WORDS` are dropped; "of" and "to" are not
    stop words and still contribute a letter.

    Args:
        title: Term title, e.g. ``"Object Oriented Programming"``

    Returns:
        Upper-case initials (``"OOP"``), or ``""`` for empty or non-string input

    Example:
        >>> generate_abbreviation("Separation of Concerns")
        'SOC'
    """
    if not isinstance(title, str) or not title.strip():
        return ""

    return "".join(
        word[0].upper()
        for word in title.split()
        if word.lower() not in IGNORED_WORDS
    )
