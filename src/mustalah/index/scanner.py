"""Directory scanning for term files.

Listings follow the order the filesystem returns entries in; callers that
need a deterministic order sort the results themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mustalah.lib.errors import DirectoryReadError

MARKDOWN_SUFFIX = ".md"
SKIPPED_DIR_NAMES = frozenset({"node_modules"})


@dataclass(frozen=True)
class MarkdownFile:
    """A markdown file found by the scanner."""

    path: Path
    name: str


def _is_skipped_dir(name: str) -> bool:
    return name.startswith(".") or name in SKIPPED_DIR_NAMES


def find_markdown_files(dir_path: str | Path) -> list[MarkdownFile]:
    """Recursively collect ``*.md`` files under ``dir_path``.

    Hidden directories and ``node_modules`` are not descended into. The
    suffix check is case-sensitive.

    Raises:
        DirectoryReadError: If ``dir_path`` or any subdirectory cannot be listed
    """
    root = Path(dir_path)
    files: list[MarkdownFile] = []

    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise DirectoryReadError(str(dir_path), e.strerror or str(e)) from e

    for entry in entries:
        if entry.is_dir():
            if not _is_skipped_dir(entry.name):
                files.extend(find_markdown_files(entry))
        elif entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
            files.append(MarkdownFile(path=entry, name=entry.name))

    return files


def list_term_files(dir_path: str | Path) -> list[MarkdownFile]:
    """List the ``*.md`` files directly inside ``dir_path`` (no recursion).

    Raises:
        DirectoryReadError: If the directory cannot be listed
    """
    try:
        entries = list(Path(dir_path).iterdir())
    except OSError as e:
        raise DirectoryReadError(str(dir_path), e.strerror or str(e)) from e

    return [
        MarkdownFile(path=entry, name=entry.name)
        for entry in entries
        if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
    ]


def list_subdirectories(dir_path: str | Path) -> list[Path]:
    """List the immediate subdirectories of ``dir_path``.

    Raises:
        DirectoryReadError: If the directory cannot be listed
    """
    try:
        entries = list(Path(dir_path).iterdir())
    except OSError as e:
        raise DirectoryReadError(str(dir_path), e.strerror or str(e)) from e

    return [entry for entry in entries if entry.is_dir()]
