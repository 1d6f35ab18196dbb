"""Recursive-descent parser for BITS packets.

Layout of one packet (all fields MSB-first):

- 3 bits version, 3 bits type code
- type 4 (literal): 5-bit groups, 1 continuation bit + 4 value bits,
  ending with the first group whose continuation bit is 0
- any other type (operator): 1 framing bit, then either a 15-bit total
  length of the children in bits (framing 0) or an 11-bit child count
  (framing 1), followed by the children

Every parse call returns the number of bits it consumed, header and
descendants included, so length-prefixed parents know when to stop.
"""

from __future__ import annotations

from dataclasses import dataclass

from bitsctl.domain.bits import BitCursor, hex_to_bits
from bitsctl.domain.errors import FramingMismatch, LiteralOverflow, NestingTooDeep
from bitsctl.domain.packets import (
    LITERAL_TYPE_CODE,
    U64_MASK,
    Literal,
    Operator,
    OperatorKind,
    Packet,
    check_arity,
)

VERSION_BITS = 3
TYPE_BITS = 3
HEADER_BITS = VERSION_BITS + TYPE_BITS
GROUP_VALUE_BITS = 4
TOTAL_LENGTH_BITS = 15
CHILD_COUNT_BITS = 11

DEFAULT_MAX_DEPTH = 64
# Deepest nesting every output mode can render, JSON included.
MAX_DEPTH_LIMIT = 100


@dataclass(frozen=True)
class DecodeReport:
    """Root packet plus bit accounting for one decoded transmission."""

    packet: Packet
    bits_consumed: int
    total_bits: int

    @property
    def trailing_bits(self) -> int:
        """Padding after the root packet (never validated)."""
        return self.total_bits - self.bits_consumed


def decode(hex_text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> DecodeReport:
    """Decode a whole hex transmission into its root packet."""
    bits = hex_to_bits(hex_text)
    packet, consumed = parse_packet(BitCursor(bits), max_depth=max_depth)
    return DecodeReport(packet=packet, bits_consumed=consumed, total_bits=len(bits))


def parse_packet(
    cursor: BitCursor,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    _depth: int = 1,
) -> tuple[Packet, int]:
    """Parse one packet at the cursor.

    Returns ``(packet, bits_consumed)`` and leaves the cursor just past
    the packet.
    """
    if _depth > max_depth:
        raise NestingTooDeep(
            f"Packet nesting exceeds {max_depth} levels at offset {cursor.position}",
            max_depth=max_depth,
            position=cursor.position,
        )

    version = cursor.read(VERSION_BITS)
    type_code = cursor.read(TYPE_BITS)

    if type_code == LITERAL_TYPE_CODE:
        value, body_bits = _parse_literal(cursor)
        return Packet(version=version, payload=Literal(value)), HEADER_BITS + body_bits

    kind = OperatorKind.from_code(type_code)
    children, body_bits = _parse_children(cursor, max_depth=max_depth, depth=_depth)
    check_arity(kind, len(children))
    packet = Packet(version=version, payload=Operator(kind=kind, children=tuple(children)))
    return packet, HEADER_BITS + body_bits


def _parse_literal(cursor: BitCursor) -> tuple[int, int]:
    start = cursor.position
    value = 0
    consumed = 0
    more = True
    while more:
        more = cursor.read_flag()
        value = (value << GROUP_VALUE_BITS) | cursor.read(GROUP_VALUE_BITS)
        consumed += 1 + GROUP_VALUE_BITS
    if value > U64_MASK:
        raise LiteralOverflow(
            f"Literal at offset {start} does not fit in 64 bits",
            position=start,
            groups=consumed // (1 + GROUP_VALUE_BITS),
        )
    return value, consumed


def _parse_children(
    cursor: BitCursor,
    *,
    max_depth: int,
    depth: int,
) -> tuple[list[Packet], int]:
    children: list[Packet] = []
    consumed = 1

    if not cursor.read_flag():
        total = cursor.read(TOTAL_LENGTH_BITS)
        consumed += TOTAL_LENGTH_BITS
        parsed = 0
        while parsed < total:
            child, child_bits = parse_packet(cursor, max_depth=max_depth, _depth=depth + 1)
            children.append(child)
            parsed += child_bits
        if parsed != total:
            raise FramingMismatch(
                f"Children declared {total} bits but consumed {parsed}",
                declared=total,
                consumed=parsed,
            )
        consumed += parsed
    else:
        count = cursor.read(CHILD_COUNT_BITS)
        consumed += CHILD_COUNT_BITS
        for _ in range(count):
            child, child_bits = parse_packet(cursor, max_depth=max_depth, _depth=depth + 1)
            children.append(child)
            consumed += child_bits

    return children, consumed
