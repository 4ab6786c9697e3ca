"""File-level validation of term markdown.

Wraps the pure term validator with file reading and produces
:class:`~mustalah.models.validation.ValidationResult` records plus the plain
text report printed by ``mustalah validate``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from mustalah.lib.logging_config import get_logger
from mustalah.lib.md_parser import parse_markdown
from mustalah.lib.ui.colors import status_mark
from mustalah.lib.validation import validate_term_structure
from mustalah.models.validation import (
    ValidationErrorType,
    ValidationIssue,
    ValidationResult,
    ValidationResultData,
)

logger = get_logger(__name__)

SEPARATOR = "─" * 50


def _format_failure(filename: str, message: str) -> ValidationResult:
    return ValidationResult(
        valid=False,
        file=filename,
        errors=[
            ValidationIssue(
                file=filename, type=ValidationErrorType.FORMAT, message=message
            )
        ],
    )


def validate_file(file_path: str | Path, filename: str) -> ValidationResult:
    """Read, parse and validate one term file.

    Read and parse failures are reported as a single ``format`` issue rather
    than raised.

    Args:
        file_path: Path to the markdown file
        filename: Name reported in the result and its issues

    Returns:
        ValidationResult; ``data`` is set only when there are no issues
    """
    try:
        content = Path(file_path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {file_path}: {e}")
        return _format_failure(filename, f"File read error: {e}")

    try:
        term = parse_markdown(content)
    except TypeError as e:
        return _format_failure(filename, f"Parse error: {e}")

    errors = validate_term_structure(term, content, filename)
    if errors:
        return ValidationResult(valid=False, file=filename, errors=errors)

    return ValidationResult(
        valid=True,
        file=filename,
        errors=[],
        data=ValidationResultData(
            title=term.title,
            abbrev=term.abbrev,
            tags_count=len(term.tags),
            arabic_words_count=len(term.arabic_words),
        ),
    )


def format_results(
    results: Iterable[ValidationResult], force_tty: bool | None = None
) -> str:
    """Render validation results as the human-readable report.

    Args:
        results: Results in the order files were validated
        force_tty: Override colour detection (None auto-detects)

    Returns:
        Multi-line report ending with a summary line
    """
    results = list(results)
    lines: list[str] = []
    valid_count = 0

    for result in results:
        if result.valid:
            valid_count += 1
            lines.append(status_mark(result.file, True, force_tty))
            if result.data:
                lines.append(f"  Title: {result.data.title}")
                if result.data.abbrev:
                    lines.append(f"  Abbrev: {result.data.abbrev}")
                lines.append(
                    f"  Tags: {result.data.tags_count}, "
                    f"Arabic Words: {result.data.arabic_words_count}"
                )
        else:
            lines.append(status_mark(result.file, False, force_tty))
            for error in result.errors:
                line_info = f" (line {error.line})" if error.line else ""
                lines.append(
                    f"  [{error.type.value.upper()}] {error.message}{line_info}"
                )
        lines.append("")

    invalid_count = len(results) - valid_count
    lines.append(SEPARATOR)
    lines.append(
        f"Summary: {valid_count} valid, {invalid_count} invalid, "
        f"{len(results)} total"
    )
    return "\n".join(lines)
