"""Terminal helpers for CLI reports."""

from mustalah.lib.ui.colors import status_mark
from mustalah.lib.ui.terminal import is_tty

__all__ = [
    "is_tty",
    "status_mark",
]
