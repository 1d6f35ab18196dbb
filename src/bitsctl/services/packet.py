"""PacketService — decode and evaluate hex transmissions.

Wraps the domain decoder/evaluator, converts domain errors into failed
ServiceResults, and records telemetry spans for each stage.
"""

from __future__ import annotations

import logging

from bitsctl.config.models import DecoderConfig
from bitsctl.domain.decoder import DecodeReport, decode
from bitsctl.domain.errors import BitsError
from bitsctl.domain.evaluator import count_packets, evaluate, tree_depth, version_sum
from bitsctl.domain.packets import to_dict
from bitsctl.services.result import ServiceResult
from bitsctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class PacketService:
    """Decode/evaluate operations over one decoder configuration."""

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config or DecoderConfig()

    @traced
    def evaluate(self, hex_text: str) -> ServiceResult:
        """Decode *hex_text* and evaluate the root packet."""
        op = "evaluate"
        try:
            report = self._decode(hex_text)
            with trace_span("evaluate") as span:
                value = evaluate(report.packet)
                if span:
                    span.annotate("value", value)
        except BitsError as exc:
            return self._fail(op, exc)

        logger.debug("Evaluated transmission to %d", value)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": value,
                "packets": count_packets(report.packet),
                "bits_consumed": report.bits_consumed,
                "trailing_bits": report.trailing_bits,
            },
        )

    @traced
    def decode(self, hex_text: str) -> ServiceResult:
        """Decode *hex_text* into a nested packet tree."""
        op = "decode"
        try:
            report = self._decode(hex_text)
        except BitsError as exc:
            return self._fail(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "tree": to_dict(report.packet),
                "packets": count_packets(report.packet),
                "depth": tree_depth(report.packet),
                "bits_consumed": report.bits_consumed,
                "trailing_bits": report.trailing_bits,
            },
        )

    @traced
    def version_sum(self, hex_text: str) -> ServiceResult:
        """Sum the version numbers of every packet in the transmission."""
        op = "version_sum"
        try:
            report = self._decode(hex_text)
        except BitsError as exc:
            return self._fail(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "version_sum": version_sum(report.packet),
                "packets": count_packets(report.packet),
            },
        )

    # ── internals ─────────────────────────────────────────────────────

    def _decode(self, hex_text: str) -> DecodeReport:
        text = hex_text.strip()
        with trace_span("decode") as span:
            report = decode(text, max_depth=self._config.max_depth)
            if span:
                span.annotate("bits", report.total_bits)
                span.annotate("bits_consumed", report.bits_consumed)

        logger.debug(
            "Decoded %d hex digits: %d bits consumed, %d trailing",
            len(text),
            report.bits_consumed,
            report.trailing_bits,
        )
        return report

    @staticmethod
    def _fail(op: str, exc: BitsError) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult.failure(op, exc)
