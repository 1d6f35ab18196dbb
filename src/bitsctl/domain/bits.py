"""Hex-to-bit conversion and the forward-only bit cursor.

Bits are kept as a string of ``"0"``/``"1"`` characters: each hex digit
expands to four bits, most significant first, digits left to right.
"""

from __future__ import annotations

import string

from bitsctl.domain.errors import InvalidEncoding, TruncatedStream

BITS_PER_DIGIT = 4

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bits(hex_text: str) -> str:
    """Expand *hex_text* into its bit sequence.

    Raises InvalidEncoding for empty input, odd-length input, or any
    character that is not a hex digit.
    """
    if not hex_text:
        raise InvalidEncoding("Input is empty")
    for index, char in enumerate(hex_text):
        if char not in _HEX_DIGITS:
            raise InvalidEncoding(
                f"Invalid hex character {char!r} at offset {index}",
                offset=index,
                character=char,
            )
    if len(hex_text) % 2:
        raise InvalidEncoding(
            f"Hex input has odd length {len(hex_text)}",
            length=len(hex_text),
        )
    return "".join(format(int(char, 16), "04b") for char in hex_text)


def bits_to_hex(bits: str) -> str:
    """Regroup a bit sequence into upper-case hex digits."""
    if len(bits) % BITS_PER_DIGIT:
        msg = f"Bit length {len(bits)} is not a multiple of {BITS_PER_DIGIT}"
        raise ValueError(msg)
    return "".join(
        format(int(bits[i : i + BITS_PER_DIGIT], 2), "X")
        for i in range(0, len(bits), BITS_PER_DIGIT)
    )


class BitCursor:
    """Single read head over a bit sequence.

    Every recursive parse call shares one cursor; reads only move forward.
    """

    __slots__ = ("_bits", "_pos")

    def __init__(self, bits: str) -> None:
        self._bits = bits
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._bits) - self._pos

    def read(self, width: int) -> int:
        """Consume *width* bits and return them as an unsigned integer."""
        if width > self.remaining:
            raise TruncatedStream(
                f"Needed {width} bits at offset {self._pos}, only {self.remaining} left",
                position=self._pos,
                requested=width,
                remaining=self.remaining,
            )
        chunk = self._bits[self._pos : self._pos + width]
        self._pos += width
        return int(chunk, 2)

    def read_flag(self) -> bool:
        return self.read(1) == 1
