"""Terminal detection for report output."""

import sys
from typing import TextIO


def is_tty(stream: TextIO | None = None) -> bool:
    """Return True when ``stream`` (stdout by default) is an interactive terminal.

    Streams without ``isatty`` (e.g. some test capture objects) count as
    non-terminals.
    """
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())
