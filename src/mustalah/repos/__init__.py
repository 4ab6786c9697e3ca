"""Read-side access to published glossary artifacts."""

from mustalah.repos.base import TermRepository
from mustalah.repos.github import GitHubRepository
from mustalah.repos.local import LocalRepository

__all__ = [
    "GitHubRepository",
    "LocalRepository",
    "TermRepository",
]
