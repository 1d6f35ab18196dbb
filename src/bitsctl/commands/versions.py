"""Command: sum packet version numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitsctl.commands._base import BitsCommand, transmission_input

if TYPE_CHECKING:
    from bitsctl.commands._context import AppContext


@click.command(
    cls=BitsCommand,
    examples="""\
  bitsctl versions --hex 8A004A801A8002F478
  bitsctl -q versions transmission.txt""",
)
@transmission_input
@click.pass_obj
def versions(app: AppContext, source: str | None, hex_text: str | None) -> None:
    """Print the sum of the version numbers of every packet in SOURCE."""
    text = app.load_input("version_sum", source, hex_text)
    app.emit(app.packets.version_sum(text))
