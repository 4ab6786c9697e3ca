"""Shared fixtures for CLI command tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from mustalah.config.loader import ENV_VAR_MAP


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run commands from temp_dir with no MUSTALAH_* overrides."""
    monkeypatch.chdir(temp_dir)
    for env_name in ENV_VAR_MAP:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture
def category_tree(
    write_term: Callable[..., Path], term_md: Callable[..., str]
) -> None:
    """Two categories plus an empty one under temp_dir/data."""
    write_term(
        "data/tech/oop.md",
        term_md("Object Oriented Programming", {"برمجة كائنية": ["alice", "bob"]}),
    )
    write_term("data/tech/cache.md", term_md("Cache", {"ذاكرة مؤقتة": ["alice"]}))
    write_term("data/tech/meta.json", '{"name": "تقنية", "description": "برمجيات"}')
    write_term("data/medical/mri.md", term_md("Magnetic Resonance Imaging"))
    write_term("data/empty/notes.txt", "nothing here")
