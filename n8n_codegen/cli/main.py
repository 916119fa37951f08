# n8n_codegen/cli/main.py
"""Main CLI entry point for n8n-codegen."""

import logging

import click

from n8n_codegen import __version__
from n8n_codegen.config import get_settings
from n8n_codegen.log_config import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def cli(verbose: bool):
    """n8n-codegen CLI - Convert n8n workflows into Node.js code."""
    level = logging.INFO if verbose else get_settings().log_level.upper()
    configure_logging(level)


def register_commands():
    """Register all CLI command groups."""
    from n8n_codegen.cli.commands.generate import generate
    cli.add_command(generate)

    from n8n_codegen.cli.commands.refactor import refactor
    cli.add_command(refactor)


register_commands()


if __name__ == '__main__':
    cli()
