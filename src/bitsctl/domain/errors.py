"""Error kinds raised by the decoder and evaluator.

Every kind carries a stable ``code`` so the service layer can turn it into
a :class:`~bitsctl.services.result.ServiceError` without inspecting
messages.  All kinds are fatal: decoding stops at the first one.
"""

from __future__ import annotations

from typing import Any, ClassVar


class BitsError(Exception):
    """Base class for all decode/evaluate failures."""

    code: ClassVar[str] = "BITS_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class InvalidEncoding(BitsError):
    """Input is not a usable hexadecimal string."""

    code = "INVALID_ENCODING"


class TruncatedStream(BitsError):
    """A fixed-width read ran past the end of the bit sequence."""

    code = "TRUNCATED_STREAM"


class FramingMismatch(BitsError):
    """Length-prefixed children did not add up to the declared bit total."""

    code = "FRAMING_MISMATCH"


class UnknownOperator(BitsError):
    """Type code outside the operator table."""

    code = "UNKNOWN_OPERATOR"


class MalformedTree(BitsError):
    """A packet breaks the child-count rules for its kind."""

    code = "MALFORMED_TREE"


class LiteralOverflow(BitsError):
    """Literal value does not fit in 64 unsigned bits."""

    code = "LITERAL_OVERFLOW"


class NestingTooDeep(BitsError):
    """Operator nesting exceeds the configured maximum depth."""

    code = "NESTING_TOO_DEEP"
