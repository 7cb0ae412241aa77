"""
Defines the main Click command group for the CMDLEX REPL.

This module provides:
- The root `cli` command group for the application.
- Registration of subcommands from other modules.

Usage:
Import `cli` to dispatch tokenized slash-commands.
"""

import click
from cmdlex.commands.base import RichGroup
from cmdlex.commands.alias import alias
from cmdlex.commands.config import config


@click.group(
    cls=RichGroup,
    help="""
    CMDLEX Command Palette

    Inspect the tokenizer and the alias normalization settings.
    Lines not starting with '/' are split into tokens.
    """,
)
def cli() -> None:
    """
    The root Click command group for CMDLEX.
    """
    pass


cli: click.Group = cli

cli.add_command(config)
cli.add_command(alias)
