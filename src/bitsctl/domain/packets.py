"""Packet tree model.

A packet is either a literal value or an operator applied to an ordered
tuple of child packets.  Trees are built once by the decoder and are
read-only afterwards.

INVARIANT: comparison operators own exactly two children; every other
operator owns at least one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from bitsctl.domain.errors import MalformedTree, UnknownOperator

LITERAL_TYPE_CODE = 4
U64_MASK = (1 << 64) - 1


class OperatorKind(IntEnum):
    """Operator type codes.  Code 4 is reserved for literals."""

    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @classmethod
    def from_code(cls, code: int) -> OperatorKind:
        """Map a 3-bit type code to its operator, or raise UnknownOperator."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownOperator(f"Unknown operator type code {code}", type_code=code) from None

    @property
    def is_comparison(self) -> bool:
        return self in _COMPARISONS


_COMPARISONS = frozenset(
    {OperatorKind.GREATER_THAN, OperatorKind.LESS_THAN, OperatorKind.EQUAL_TO}
)


@dataclass(frozen=True)
class Literal:
    """Literal payload: a single unsigned 64-bit value."""

    value: int


@dataclass(frozen=True)
class Operator:
    """Operator payload: *kind* applied to *children* in order."""

    kind: OperatorKind
    children: tuple[Packet, ...]


@dataclass(frozen=True)
class Packet:
    """One node of a decoded transmission."""

    version: int
    payload: Literal | Operator

    @property
    def is_literal(self) -> bool:
        return isinstance(self.payload, Literal)

    @property
    def children(self) -> tuple[Packet, ...]:
        if isinstance(self.payload, Operator):
            return self.payload.children
        return ()


def check_arity(kind: OperatorKind, child_count: int) -> None:
    """Raise MalformedTree if *child_count* is invalid for *kind*."""
    if kind.is_comparison:
        if child_count != 2:
            msg = f"{kind.name} requires exactly 2 children, got {child_count}"
            raise MalformedTree(msg, kind=kind.name, children=child_count)
    elif child_count < 1:
        msg = f"{kind.name} requires at least 1 child"
        raise MalformedTree(msg, kind=kind.name, children=child_count)


def iter_packets(root: Packet) -> Iterator[Packet]:
    """Yield every packet of the tree in pre-order."""
    stack = [root]
    while stack:
        packet = stack.pop()
        yield packet
        stack.extend(reversed(packet.children))


def to_dict(packet: Packet) -> dict[str, Any]:
    """Return a JSON-ready nested dict for *packet*."""
    payload = packet.payload
    if isinstance(payload, Literal):
        return {"version": packet.version, "type": "literal", "value": payload.value}
    return {
        "version": packet.version,
        "type": payload.kind.name.lower(),
        "children": [to_dict(child) for child in payload.children],
    }
