"""Subcommand modules for orderctl.

Provides register_commands() which uses deferred imports to keep
``orderctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from orderctl.commands.info import info
    from orderctl.commands.process import process

    cli.add_command(process)
    cli.add_command(info)
