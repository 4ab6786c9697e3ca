"""Status marks for validation reports.

A file line in the report starts with a check mark (valid) or a cross
(invalid). On a terminal the line is green or red; otherwise it is plain.
"""

from mustalah.lib.ui.terminal import is_tty

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"

VALID_MARK = "✓"
INVALID_MARK = "✗"


def status_mark(filename: str, valid: bool, force_tty: bool | None = None) -> str:
    """Return the report heading for one file.

    Args:
        filename: File name shown after the mark
        valid: Whether the file passed validation
        force_tty: Override terminal detection (None auto-detects)
    """
    mark, color = (VALID_MARK, GREEN) if valid else (INVALID_MARK, RED)
    text = f"{mark} {filename}"
    use_color = is_tty() if force_tty is None else force_tty
    return f"{color}{text}{RESET}" if use_color else text
