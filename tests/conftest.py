"""Pytest configuration and shared fixtures for Mustalah tests."""

import logging
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

API_TERM_MD = """# Application Programming Interface (API)

## Description
واجهة تسمح لتطبيقين بالتواصل مع بعضهما.
تحدد الطرق وصيغ البيانات التي تستخدمها البرامج.

## Tags
- برمجة
- ويب

# Arabic Words

## واجهة برمجة التطبيقات
### Approved By
- user1
- user2

## الواجهة البرمجية
### Approved By
- user3
"""


def make_term_md(
    title: str,
    words: dict[str, list[str]] | None = None,
    description: str = "وصف المصطلح.",
    tags: list[str] | None = None,
) -> str:
    """Render a term markdown document.

    Args:
        title: Full title line text, including any "(ABBR)"
        words: Arabic word -> approver usernames
        description: Description body
        tags: Tag list items (defaults to a single Arabic tag)
    """
    tags = ["تقنية"] if tags is None else tags
    words = {"مصطلح": ["user1"]} if words is None else words

    lines = [f"# {title}", "", "## Description", description, "", "## Tags"]
    lines.extend(f"- {tag}" for tag in tags)
    lines.extend(["", "# Arabic Words", ""])
    for word, approvers in words.items():
        lines.append(f"## {word}")
        lines.append("### Approved By")
        lines.extend(f"- {username}" for username in approvers)
        lines.append("")
    return "\n".join(lines)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def api_term_md() -> str:
    """A fully valid term document."""
    return API_TERM_MD


@pytest.fixture
def write_term(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing term files below ``temp_dir``.

    Usage: ``write_term("tech/api.md", content)``; parent directories are
    created as needed.
    """

    def _write(relative_path: str, content: str) -> Path:
        path = temp_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def term_md() -> Callable[..., str]:
    """Expose :func:`make_term_md` to tests."""
    return make_term_md


@pytest.fixture(autouse=True)
def reset_mustalah_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging() during CLI runs."""
    yield
    logger = logging.getLogger("mustalah")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
