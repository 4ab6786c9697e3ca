"""Index generation and file validation over term directories.

Main components:
- generate_index / generate_categories_index: build index artifacts
- aggregate_approvers: per-username approval counts
- find_markdown_files: recursive term file discovery
- validate_file / format_results: file validation and reporting
"""

from mustalah.index.approvers import aggregate_approvers
from mustalah.index.builder import (
    generate_categories_index,
    generate_index,
    parse_term_file,
    read_category_meta,
    write_index,
)
from mustalah.index.scanner import MarkdownFile, find_markdown_files
from mustalah.index.validator import format_results, validate_file

__all__ = [
    "MarkdownFile",
    "aggregate_approvers",
    "find_markdown_files",
    "format_results",
    "generate_categories_index",
    "generate_index",
    "parse_term_file",
    "read_category_meta",
    "validate_file",
    "write_index",
]
