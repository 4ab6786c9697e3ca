"""Index generation from term markdown files.

Builds the two published artifacts:

- ``index.json`` for a single category directory (:func:`generate_index`)
- ``categories.json`` for the data root (:func:`generate_categories_index`)

Files are processed one at a time. A term file that cannot be read, parsed,
or that fails the structural check is logged and skipped; only a directory
that cannot be listed aborts generation.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel

from mustalah.index.approvers import aggregate_approvers
from mustalah.index.scanner import MarkdownFile, list_subdirectories, list_term_files
from mustalah.lib.collation import arabic_sort_key
from mustalah.lib.errors import IndexWriteError
from mustalah.lib.logging_config import get_logger
from mustalah.lib.md_parser import extract_slug, is_valid_term, parse_markdown
from mustalah.models.index import (
    CategoryEntry,
    CategoryIndex,
    CategoryMeta,
    RootIndex,
    TermIndex,
    dump_index,
)
from mustalah.models.term import Term

logger = get_logger(__name__)

DEFAULT_META_FILENAME = "meta.json"


def parse_term_file(file_path: str | Path, filename: str) -> Term | None:
    """Read and parse one term file.

    Args:
        file_path: Path to the markdown file
        filename: Name used in log messages

    Returns:
        The parsed term, or None if it could not be read or is structurally
        invalid
    """
    try:
        content = Path(file_path).read_text(encoding="utf-8-sig")
        term = parse_markdown(content)
    except (OSError, UnicodeDecodeError, TypeError) as e:
        logger.error(f"Error parsing {filename}: {e}")
        return None

    if not is_valid_term(term):
        logger.warning(f"Skipping invalid file {filename}: missing required fields")
        return None

    return term


def to_term_index(slug: str, term: Term) -> TermIndex:
    """Project a parsed term onto its index entry."""
    return TermIndex(slug=slug, title=term.title, abbrev=term.abbrev or None)


def _collect_terms(files: list[MarkdownFile]) -> list[tuple[TermIndex, Term]]:
    collected: list[tuple[TermIndex, Term]] = []
    for md_file in files:
        term = parse_term_file(md_file.path, md_file.name)
        if term is None:
            continue
        logger.debug(f"Indexed {md_file.path}")
        collected.append((to_term_index(extract_slug(md_file.name), term), term))
    return collected


def _sorted_by_title(entries: list[TermIndex]) -> list[TermIndex]:
    return sorted(entries, key=lambda entry: entry.title)


def generate_index(data_dir: str | Path) -> CategoryIndex:
    """Build the term index for one directory.

    Only ``*.md`` files directly inside ``data_dir`` are considered.

    Raises:
        DirectoryReadError: If ``data_dir`` cannot be listed
    """
    collected = _collect_terms(list_term_files(data_dir))
    return CategoryIndex(terms=_sorted_by_title([entry for entry, _ in collected]))


def read_category_meta(
    category_path: str | Path, meta_filename: str = DEFAULT_META_FILENAME
) -> CategoryMeta | None:
    """Read a category's metadata file.

    A missing or malformed file, or one that is not a JSON object, is
    treated as absent. An object without a ``name`` logs a warning and is
    also treated as absent.
    """
    meta_path = Path(category_path) / meta_filename
    try:
        raw = json.loads(meta_path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug(f"No usable {meta_filename} in {category_path}: {e}")
        return None

    if not isinstance(raw, dict):
        logger.debug(f"Ignoring {meta_filename} in {category_path}: not an object")
        return None

    if not raw.get("name"):
        logger.warning(f'{meta_filename} in {category_path} is missing "name" field')
        return None

    description = raw.get("description")
    return CategoryMeta(
        name=str(raw["name"]),
        description=str(description) if description else None,
    )


def build_category_entry(
    category_dir: Path, meta_filename: str = DEFAULT_META_FILENAME
) -> CategoryEntry | None:
    """Build the root-index entry for one category directory.

    Returns:
        The entry, or None when the directory yields no valid terms

    Raises:
        DirectoryReadError: If the category directory cannot be listed
    """
    meta = read_category_meta(category_dir, meta_filename)
    collected = _collect_terms(list_term_files(category_dir))
    if not collected:
        logger.debug(f"Skipping category {category_dir.name}: no terms")
        return None

    terms = [term for _, term in collected]
    return CategoryEntry(
        path=category_dir.name,
        name=meta.name if meta else category_dir.name,
        description=meta.description if meta else None,
        terms_count=len(terms),
        approvers=aggregate_approvers(terms),
        terms=_sorted_by_title([entry for entry, _ in collected]),
    )


def generate_categories_index(
    data_dir: str | Path, meta_filename: str = DEFAULT_META_FILENAME
) -> RootIndex:
    """Build the root index from the category subdirectories of ``data_dir``.

    Approvers are aggregated per category. Categories are ordered by display
    name using Arabic-aware collation; term listings inside a category are
    ordered by plain title comparison.

    Raises:
        DirectoryReadError: If ``data_dir`` or a category cannot be listed
    """
    categories: list[CategoryEntry] = []

    for category_dir in list_subdirectories(data_dir):
        entry = build_category_entry(category_dir, meta_filename)
        if entry is not None:
            categories.append(entry)

    categories.sort(key=lambda category: arabic_sort_key(category.name))
    return RootIndex(categories=categories)


def write_index(index: BaseModel, output_path: str | Path) -> None:
    """Write an index artifact as 2-space indented JSON with a trailing newline.

    Raises:
        IndexWriteError: If the file cannot be written
    """
    payload = json.dumps(dump_index(index), indent=2, ensure_ascii=False)
    try:
        Path(output_path).write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        raise IndexWriteError(str(output_path), str(e)) from e
