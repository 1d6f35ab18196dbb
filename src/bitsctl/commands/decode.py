"""Command: show the decoded packet tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitsctl.commands._base import BitsCommand, transmission_input

if TYPE_CHECKING:
    from bitsctl.commands._context import AppContext


@click.command(
    cls=BitsCommand,
    examples="""\
  bitsctl decode --hex 38006F45291200
  bitsctl -q decode transmission.txt
  bitsctl --json decode transmission.txt""",
)
@transmission_input
@click.pass_obj
def decode(app: AppContext, source: str | None, hex_text: str | None) -> None:
    """Decode SOURCE and print its packet tree."""
    text = app.load_input("decode", source, hex_text)
    app.emit(app.packets.decode(text))
