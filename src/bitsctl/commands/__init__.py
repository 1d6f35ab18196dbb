"""Subcommand modules for bitsctl.

Provides register_commands() which uses deferred imports to keep
``bitsctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bitsctl.commands.decode import decode
    from bitsctl.commands.eval_cmd import eval_cmd
    from bitsctl.commands.versions import versions

    cli.add_command(eval_cmd)
    cli.add_command(decode)
    cli.add_command(versions)
