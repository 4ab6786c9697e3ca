"""Tests for index generation."""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from mustalah.index.builder import (
    build_category_entry,
    generate_categories_index,
    generate_index,
    parse_term_file,
    read_category_meta,
    to_term_index,
    write_index,
)
from mustalah.lib.errors import DirectoryReadError, IndexWriteError
from mustalah.lib.md_parser import parse_markdown
from mustalah.models.index import CategoryIndex, TermIndex

NO_TITLE_MD = "## Description\nوصف بلا عنوان\n"


@pytest.mark.unit
class TestParseTermFile:
    """Tests for parse_term_file()."""

    def test_parses_valid_file(
        self, write_term: Callable[..., Path], api_term_md: str
    ) -> None:
        """A valid file yields a Term."""
        path = write_term("api.md", api_term_md)
        term = parse_term_file(path, "api.md")
        assert term is not None
        assert term.abbrev == "API"

    def test_skips_file_without_title(
        self, write_term: Callable[..., Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        """Structurally invalid files are skipped with a warning."""
        path = write_term("broken.md", NO_TITLE_MD)
        with caplog.at_level(logging.WARNING, logger="mustalah"):
            assert parse_term_file(path, "broken.md") is None
        assert "Skipping invalid file broken.md" in caplog.text

    def test_byte_order_mark(
        self, write_term: Callable[..., Path], term_md: Callable[..., str]
    ) -> None:
        """Files saved with a UTF-8 BOM keep their title."""
        path = write_term("cache.md", "\ufeff" + term_md("Cache"))

        term = parse_term_file(path, "cache.md")

        assert term is not None
        assert (term.title, term.abbrev) == ("Cache", "")
        assert [w.word for w in term.arabic_words] == ["مصطلح"]

    def test_unreadable_file_is_logged(
        self, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Read errors are logged at error level and swallowed."""
        with caplog.at_level(logging.ERROR, logger="mustalah"):
            assert parse_term_file(temp_dir / "gone.md", "gone.md") is None
        assert "Error parsing gone.md" in caplog.text


@pytest.mark.unit
class TestGenerateIndex:
    """Tests for generate_index()."""

    def test_sorted_entries_with_slugs(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Entries are sorted by title and carry slugs and abbreviations."""
        write_term("oop.md", term_md("Object Oriented Programming"))
        write_term("cache.md", term_md("Cache"))
        write_term("api.md", term_md("Application Programming Interface (API)"))

        index = generate_index(temp_dir)

        assert [t.model_dump(exclude_none=True) for t in index.terms] == [
            {
                "slug": "api",
                "title": "Application Programming Interface",
                "abbrev": "API",
            },
            {"slug": "cache", "title": "Cache"},
            {"slug": "oop", "title": "Object Oriented Programming", "abbrev": "OOP"},
        ]

    def test_invalid_files_excluded(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Files without a title do not appear in the index."""
        write_term("cache.md", term_md("Cache"))
        write_term("broken.md", NO_TITLE_MD)
        write_term("notes.txt", "ignored")

        index = generate_index(temp_dir)
        assert [t.slug for t in index.terms] == ["cache"]

    def test_byte_order_mark_in_index(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        api_term_md: str,
    ) -> None:
        """A BOM-prefixed file is indexed under its real title."""
        write_term("api.md", "\ufeff" + api_term_md)

        [entry] = generate_index(temp_dir).terms
        assert (entry.title, entry.abbrev) == (
            "Application Programming Interface",
            "API",
        )

    def test_not_recursive(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Only files directly inside the directory are indexed."""
        write_term("nested/cache.md", term_md("Cache"))
        assert generate_index(temp_dir).terms == []

    def test_missing_directory_raises(self, temp_dir: Path) -> None:
        """An unreadable directory aborts generation."""
        with pytest.raises(DirectoryReadError):
            generate_index(temp_dir / "missing")

    def test_repeatable(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Two runs over an unchanged directory list the same terms."""
        write_term("b.md", term_md("Binary Tree"))
        write_term("a.md", term_md("Array"))

        assert generate_index(temp_dir).terms == generate_index(temp_dir).terms


@pytest.mark.unit
class TestToTermIndex:
    """Tests for to_term_index()."""

    def test_from_parsed_document(self, api_term_md: str) -> None:
        """A parsed document projects onto slug, title and abbreviation."""
        entry = to_term_index("api", parse_markdown(api_term_md))
        assert entry.model_dump(exclude_none=True) == {
            "slug": "api",
            "title": "Application Programming Interface",
            "abbrev": "API",
        }

    def test_single_word_title_has_no_abbrev(
        self, term_md: Callable[..., str]
    ) -> None:
        """A one-word title without an explicit abbreviation omits abbrev."""
        entry = to_term_index("cache", parse_markdown(term_md("Cache")))
        assert "abbrev" not in entry.model_dump(exclude_none=True)


@pytest.mark.unit
class TestReadCategoryMeta:
    """Tests for read_category_meta()."""

    def test_reads_name_and_description(self, write_term: Callable[..., Path]) -> None:
        """Both fields are read from meta.json."""
        path = write_term(
            "tech/meta.json",
            json.dumps({"name": "تقنية", "description": "مصطلحات البرمجيات"}),
        )
        meta = read_category_meta(path.parent)
        assert meta is not None
        assert meta.name == "تقنية"
        assert meta.description == "مصطلحات البرمجيات"

    def test_missing_file(self, temp_dir: Path) -> None:
        """No meta.json means no metadata."""
        assert read_category_meta(temp_dir) is None

    def test_malformed_json(self, write_term: Callable[..., Path]) -> None:
        """Malformed JSON is treated as absent."""
        path = write_term("tech/meta.json", "{not json")
        assert read_category_meta(path.parent) is None

    def test_missing_name_warns(
        self, write_term: Callable[..., Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        """A file without a name is ignored with a warning."""
        path = write_term("tech/meta.json", json.dumps({"description": "x"}))
        with caplog.at_level(logging.WARNING, logger="mustalah"):
            assert read_category_meta(path.parent) is None
        assert 'missing "name" field' in caplog.text
        assert "Warning:" not in caplog.text

    def test_null_document_is_silent(
        self, write_term: Callable[..., Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        """A meta.json holding null is ignored without a warning."""
        path = write_term("tech/meta.json", "null")
        with caplog.at_level(logging.WARNING, logger="mustalah"):
            assert read_category_meta(path.parent) is None
        assert caplog.text == ""

    def test_custom_filename(self, write_term: Callable[..., Path]) -> None:
        """The metadata filename is configurable."""
        path = write_term("tech/category.json", json.dumps({"name": "Tech"}))
        meta = read_category_meta(path.parent, "category.json")
        assert meta is not None
        assert meta.name == "Tech"
        assert meta.description is None


@pytest.mark.unit
class TestGenerateCategoriesIndex:
    """Tests for generate_categories_index()."""

    def test_per_category_approvers_and_terms(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Counts and approvers are computed per category."""
        write_term(
            "tech/oop.md",
            term_md(
                "Object Oriented Programming",
                {"برمجة كائنية": ["alice", "bob"], "البرمجة الشيئية": ["alice"]},
            ),
        )
        write_term("tech/cache.md", term_md("Cache", {"ذاكرة مؤقتة": ["bob"]}))
        write_term("medical/mri.md", term_md("Magnetic Resonance", {"رنين": ["bob"]}))

        root = generate_categories_index(temp_dir)
        by_path = {c.path: c for c in root.categories}

        tech = by_path["tech"]
        assert tech.terms_count == 2
        assert [(a.username, a.approve_count) for a in tech.approvers] == [
            ("alice", 2),
            ("bob", 2),
        ]
        assert [t.slug for t in tech.terms] == ["cache", "oop"]

        medical = by_path["medical"]
        assert [(a.username, a.approve_count) for a in medical.approvers] == [
            ("bob", 1)
        ]

    def test_uses_meta_and_falls_back_to_dir_name(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """The display name comes from meta.json or the directory name."""
        write_term("tech/cache.md", term_md("Cache"))
        write_term(
            "tech/meta.json", json.dumps({"name": "تقنية", "description": "برمجيات"})
        )
        write_term("misc/cache.md", term_md("Cache"))

        root = generate_categories_index(temp_dir)
        by_path = {c.path: c for c in root.categories}

        assert by_path["tech"].name == "تقنية"
        assert by_path["tech"].description == "برمجيات"
        assert by_path["misc"].name == "misc"
        assert by_path["misc"].description is None

    def test_empty_categories_skipped(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Categories without valid terms are omitted."""
        write_term("tech/cache.md", term_md("Cache"))
        write_term("empty/meta.json", json.dumps({"name": "فارغ"}))
        write_term("broken/bad.md", NO_TITLE_MD)
        write_term("top.md", term_md("Top Level"))

        root = generate_categories_index(temp_dir)
        assert [c.path for c in root.categories] == ["tech"]

    def test_categories_sorted_by_name(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """Categories are ordered by display name."""
        for path, name in [("c", "شبكات"), ("a", "أمن"), ("b", "بيانات")]:
            write_term(f"{path}/t.md", term_md("Cache"))
            write_term(f"{path}/meta.json", json.dumps({"name": name}))

        root = generate_categories_index(temp_dir)
        assert [c.name for c in root.categories] == ["أمن", "بيانات", "شبكات"]

    def test_arabic_names_before_directory_names(
        self,
        temp_dir: Path,
        write_term: Callable[..., Path],
        term_md: Callable[..., str],
    ) -> None:
        """A category without meta.json sorts after Arabic-named ones."""
        write_term("tech/t.md", term_md("Cache"))
        write_term("science/t.md", term_md("Cache"))
        write_term("science/meta.json", json.dumps({"name": "علوم"}))

        root = generate_categories_index(temp_dir)
        assert [c.name for c in root.categories] == ["علوم", "tech"]

    def test_build_category_entry_empty(self, temp_dir: Path) -> None:
        """An empty directory produces no entry."""
        assert build_category_entry(temp_dir) is None


@pytest.mark.unit
class TestWriteIndex:
    """Tests for write_index()."""

    def test_output_format(self, temp_dir: Path) -> None:
        """JSON is 2-space indented, unescaped and newline terminated."""
        output = temp_dir / "index.json"
        index = CategoryIndex(
            terms=[TermIndex(slug="cache", title="ذاكرة")],
            generated_at="2026-02-15T12:00:00.000Z",
        )

        write_index(index, output)

        text = output.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert "ذاكرة" in text
        assert '\n  "terms": [' in text
        assert json.loads(text) == {
            "terms": [{"slug": "cache", "title": "ذاكرة"}],
            "generatedAt": "2026-02-15T12:00:00.000Z",
        }

    def test_write_failure_raises(self, temp_dir: Path) -> None:
        """OS errors become IndexWriteError."""
        with (
            patch.object(Path, "write_text", side_effect=OSError("disk full")),
            pytest.raises(IndexWriteError) as exc_info,
        ):
            write_index(CategoryIndex(), temp_dir / "index.json")
        assert "disk full" in str(exc_info.value)
