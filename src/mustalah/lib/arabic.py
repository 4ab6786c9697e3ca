"""Arabic-script detection used by the term validator."""

import re

# Arabic, Arabic Supplement, Arabic Extended-A, Presentation Forms A and B
ARABIC_RE = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)


def contains_arabic(text: object) -> bool:
    """Return True if ``text`` contains at least one Arabic-script character.

    Non-string and empty input is never Arabic.
    """
    if not text or not isinstance(text, str):
        return False
    return ARABIC_RE.search(text) is not None
