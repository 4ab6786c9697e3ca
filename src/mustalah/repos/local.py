"""Term repository backed by a local checkout."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mustalah.lib.errors import RepositoryError, ResourceNotFoundError
from mustalah.lib.md_parser import parse_markdown
from mustalah.models.index import CategoryIndex, RootIndex
from mustalah.models.term import Term
from mustalah.repos.base import (
    TermRepository,
    category_index_from_payload,
    root_index_from_payload,
)


class LocalRepository(TermRepository):
    """Reads published indexes and term files from disk.

    Example:
        >>> repo = LocalRepository("build/dictionary/api/v1", "data")
        >>> [c.name for c in repo.fetch_root_index().categories]
    """

    def __init__(
        self,
        api_dir: str | Path,
        terms_dir: str | Path,
        index_filename: str = "index.json",
        categories_filename: str = "categories.json",
    ) -> None:
        """Initialize with the artifact and term directories.

        Args:
            api_dir: Directory holding categories.json and <category>/index.json
            terms_dir: Directory holding <category>/<slug>.md
            index_filename: Per-category index file name
            categories_filename: Root index file name
        """
        self.api_dir = Path(api_dir)
        self.terms_dir = Path(terms_dir)
        self.index_filename = index_filename
        self.categories_filename = categories_filename

    def fetch_root_index(self) -> RootIndex:
        """Load the root index from ``api_dir``."""
        path = self.api_dir / self.categories_filename
        return root_index_from_payload(self._read_json(path, "root index"), str(path))

    def fetch_category_index(self, category: str) -> CategoryIndex:
        """Load the index of ``category`` from ``api_dir``."""
        path = self.api_dir / category / self.index_filename
        payload = self._read_json(path, f"category {category}")
        return category_index_from_payload(payload, str(path))

    def fetch_term(self, category: str, slug: str) -> Term:
        """Load and parse ``<terms_dir>/<category>/<slug>.md``."""
        path = self.terms_dir / category / f"{slug}.md"
        return parse_markdown(self._read_text(path, f'term "{slug}"'))

    def _read_text(self, path: Path, resource: str) -> str:
        try:
            return path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise ResourceNotFoundError(f"{resource} ({path})") from e
        except (OSError, UnicodeDecodeError) as e:
            raise RepositoryError(f"Failed to read {resource} from {path}: {e}") from e

    def _read_json(self, path: Path, resource: str) -> Any:
        text = self._read_text(path, resource)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise RepositoryError(f"Invalid JSON in {path}: {e}") from e
