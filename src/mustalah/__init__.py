"""Mustalah - a crowd-curated glossary of Arabic technical terms.

Term entries are markdown files mapping an English technical term to approved
Arabic translations. This package parses and validates those files and builds
the JSON indexes published with the glossary site.

Main features:
- Line-oriented markdown parser producing Term records
- Structural and Arabic-content validation with line-numbered errors
- Per-category term indexes and a root categories index with approver counts
- Read access to published indexes on disk or on GitHub
"""

from mustalah.lib.errors import ConfigError, MustalahError
from mustalah.lib.md_parser import parse_markdown

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "MustalahError",
    "parse_markdown",
]
