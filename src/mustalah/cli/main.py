"""Entry point for the ``mustalah`` command."""

import click

from mustalah import __version__
from mustalah.cli.commands.generate import generate
from mustalah.cli.commands.validate import validate

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, prog_name="mustalah")
def main() -> None:
    """Mustalah - curate and publish the Arabic technical terms glossary.

    Validate term files written in markdown and generate the JSON indexes
    consumed by the glossary site.
    """
    pass


main.add_command(generate)
main.add_command(validate)


if __name__ == "__main__":
    main()
