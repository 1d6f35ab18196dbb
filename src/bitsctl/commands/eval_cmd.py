"""Command: evaluate a transmission to a single integer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitsctl.commands._base import BitsCommand, transmission_input

if TYPE_CHECKING:
    from bitsctl.commands._context import AppContext


@click.command(
    "eval",
    cls=BitsCommand,
    examples="""\
  bitsctl eval
  bitsctl eval transmission.txt
  bitsctl eval --hex 9C0141080250320F1802104A08
  cat transmission.txt | bitsctl -q eval -""",
)
@transmission_input
@click.pass_obj
def eval_cmd(app: AppContext, source: str | None, hex_text: str | None) -> None:
    """Decode SOURCE and print the value of its outermost packet.

    SOURCE is a file of hex text, or - for stdin. Without SOURCE the
    configured default file (input.txt) is read.
    """
    text = app.load_input("evaluate", source, hex_text)
    app.emit(app.packets.evaluate(text))
