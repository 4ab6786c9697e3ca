"""CLI command for generating index artifacts.

Implements ``mustalah generate``, which writes ``index.json`` for a category
directory, ``categories.json`` for the data root, or both (``--full``).
"""

import sys
from pathlib import Path

import click

from mustalah.config.loader import load_config
from mustalah.index.builder import (
    generate_categories_index,
    generate_index,
    write_index,
)
from mustalah.index.scanner import list_subdirectories
from mustalah.lib.errors import ConfigError, MustalahError
from mustalah.lib.logging_config import get_logger, setup_logging
from mustalah.models.config import GlossaryConfig

logger = get_logger(__name__)


@click.command()
@click.argument("data_dir", required=False, type=click.Path(file_okay=False))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--categories",
    "categories_mode",
    is_flag=True,
    help="Generate the top-level categories index instead of a terms index",
)
@click.option(
    "--full",
    "full_mode",
    is_flag=True,
    help="Generate index.json in each category, then categories.json",
)
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
def generate(
    data_dir: str | None,
    output_file: str | None,
    categories_mode: bool,
    full_mode: bool,
    config_file: str | None,
    verbose: bool,
) -> None:
    """Generate JSON indexes from markdown term files.

    DATA_DIR holds .md term files or category subdirectories (default:
    ./data). OUTPUT_FILE defaults to DATA_DIR/index.json, or
    DATA_DIR/categories.json with --categories.

    \b
    EXAMPLES:

        Index the terms of one category:
            mustalah generate data/tech

        Build the categories index:
            mustalah generate --categories data

        Rebuild everything:
            mustalah generate --full data
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(1)

    setup_logging(verbose=verbose or config.verbose)
    root = Path(data_dir or config.data_dir)

    try:
        if full_mode:
            _generate_full(root, config)
        elif categories_mode:
            output = (
                Path(output_file) if output_file else root / config.categories_filename
            )
            click.echo(f"Generating categories index from {root}...")
            root_index = generate_categories_index(root, config.meta_filename)
            click.echo(f"Found {len(root_index.categories)} categories")
            write_index(root_index, output)
            click.echo(f"Categories index written to {output}")
            click.echo(f"Generated at: {root_index.generated_at}")
        else:
            output = (
                Path(output_file) if output_file else root / config.index_filename
            )
            click.echo(f"Generating index from {root}...")
            index = generate_index(root)
            click.echo(f"Found {len(index.terms)} terms")
            write_index(index, output)
            click.echo(f"Index written to {output}")
            click.echo(f"Generated at: {index.generated_at}")
    except MustalahError as e:
        logger.debug(f"Generation failed: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


def _generate_full(root: Path, config: GlossaryConfig) -> None:
    """Write every category's index.json, then the root categories.json."""
    click.echo(f"Running full generation for {root}...")

    for category_dir in list_subdirectories(root):
        index = generate_index(category_dir)
        if not index.terms:
            logger.info(f"No terms in {category_dir}, skipping index")
            continue
        output = category_dir / config.index_filename
        write_index(index, output)
        click.echo(f"Generated {output} with {len(index.terms)} terms")

    click.echo("\nGenerating categories index...")
    root_index = generate_categories_index(root, config.meta_filename)
    output = root / config.categories_filename
    write_index(root_index, output)

    click.echo(f"\nCategories index written to {output}")
    click.echo(f"Generated at: {root_index.generated_at}")
    click.echo(f"Total categories: {len(root_index.categories)}")
