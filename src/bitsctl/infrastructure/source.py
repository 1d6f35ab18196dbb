"""Input provider — fetch the hex transmission text.

Sources, in the order the CLI considers them: an inline ``--hex`` value,
a file path (``-`` means stdin), or the configured default file.
Surrounding whitespace is trimmed; nothing else is interpreted here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

logger = logging.getLogger(__name__)

STDIN = "-"


class InputUnavailable(Exception):
    """The transmission could not be read, or was empty."""

    code = "NO_INPUT"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


def read_source(source: str | None, *, default_path: Path) -> str:
    """Return the trimmed hex text from *source*.

    *source* is a file path, ``"-"`` for stdin, or None to use
    *default_path*.
    """
    if source == STDIN:
        text = click.get_text_stream("stdin").read()
        origin = "<stdin>"
    else:
        path = Path(source) if source is not None else default_path
        origin = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise InputUnavailable(f"Input file not found: {path}", path=origin) from None
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailable(f"Cannot read {path}: {exc}", path=origin) from exc

    text = text.strip()
    if not text:
        raise InputUnavailable(f"No input in {origin}", path=origin)
    logger.debug("Read %d characters from %s", len(text), origin)
    return text
