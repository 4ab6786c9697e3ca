"""CLI command for validating term markdown files.

Implements ``mustalah validate``: checks files against the expected term
format and Arabic content rules, prints a report, and exits non-zero when any
file has problems.
"""

import sys
from pathlib import Path

import click

from mustalah.config.loader import load_config
from mustalah.index.scanner import find_markdown_files
from mustalah.index.validator import format_results, validate_file
from mustalah.lib.errors import ConfigError, DirectoryReadError
from mustalah.lib.logging_config import get_logger, setup_logging
from mustalah.models.validation import ValidationResult

logger = get_logger(__name__)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--config",
    "config_file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to a mustalah.yaml configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
def validate(paths: tuple[str, ...], config_file: str | None, verbose: bool) -> None:
    """Validate markdown term files against the expected format.

    PATHS are files or directories to validate (default: the configured
    data directory, ./data).

    \b
    EXAMPLES:

        Validate everything:
            mustalah validate

        Validate one category or one file:
            mustalah validate data/tech
            mustalah validate data/tech/api.md
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(1)

    setup_logging(verbose=verbose or config.verbose)
    targets = list(paths) or [config.data_dir]
    results: list[ValidationResult] = []

    for target in targets:
        path = Path(target)
        try:
            if path.is_file():
                if path.name.endswith(".md"):
                    results.append(validate_file(path, path.name))
                else:
                    click.echo(f"Error: {target} is not a markdown file", err=True)
            elif path.is_dir():
                files = find_markdown_files(path)
                if not files:
                    click.echo(
                        f"Warning: No markdown files found in {target}", err=True
                    )
                    continue

                click.echo(f"Found {len(files)} markdown file(s) in {target}\n")
                for md_file in files:
                    results.append(validate_file(md_file.path, md_file.name))
            else:
                raise FileNotFoundError(f"No such file or directory: '{target}'")
        except (OSError, DirectoryReadError) as e:
            click.echo(f"Error accessing {target}: {e}", err=True)
            sys.exit(1)

    if not results:
        click.echo("No files to validate.")
        return

    click.echo(format_results(results))

    invalid = [result.file for result in results if not result.valid]
    if invalid:
        logger.debug(f"Invalid files: {', '.join(invalid)}")
        sys.exit(1)
