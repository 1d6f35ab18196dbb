"""Evaluate a packet tree to a single unsigned 64-bit integer.

Arithmetic wraps modulo 2**64.  Comparison operators yield 1 or 0.
"""

from __future__ import annotations

from bitsctl.domain.packets import (
    U64_MASK,
    Literal,
    OperatorKind,
    Packet,
    check_arity,
    iter_packets,
)


def evaluate(packet: Packet) -> int:
    """Reduce *packet* and its descendants to one value."""
    payload = packet.payload
    if isinstance(payload, Literal):
        return payload.value

    kind = payload.kind
    check_arity(kind, len(payload.children))
    values = [evaluate(child) for child in payload.children]

    if kind is OperatorKind.SUM:
        total = 0
        for value in values:
            total = (total + value) & U64_MASK
        return total
    if kind is OperatorKind.PRODUCT:
        product = 1
        for value in values:
            product = (product * value) & U64_MASK
        return product
    if kind is OperatorKind.MINIMUM:
        return min(values)
    if kind is OperatorKind.MAXIMUM:
        return max(values)

    left, right = values
    if kind is OperatorKind.GREATER_THAN:
        return int(left > right)
    if kind is OperatorKind.LESS_THAN:
        return int(left < right)
    return int(left == right)


def version_sum(packet: Packet) -> int:
    """Sum of the version fields of every packet in the tree."""
    return sum(p.version for p in iter_packets(packet))


def count_packets(packet: Packet) -> int:
    return sum(1 for _ in iter_packets(packet))


def tree_depth(packet: Packet) -> int:
    """Number of levels in the tree; a lone literal has depth 1."""
    depth = 0
    level = [packet]
    while level:
        depth += 1
        level = [child for p in level for child in p.children]
    return depth
