"""Shared pytest fixtures and test helpers for bitsctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bitsctl.domain.bits import BitCursor, bits_to_hex, hex_to_bits
from bitsctl.services.telemetry import disable_telemetry

# (hex transmission, evaluated value)
EVALUATION_CASES: list[tuple[str, int]] = [
    ("C200B40A82", 3),
    ("04005AC33890", 54),
    ("880086C3E88112", 7),
    ("CE00C43D881120", 9),
    ("D8005AC2A8F0", 1),
    ("F600BC2D8F", 0),
    ("9C005AC2F8F0", 0),
    ("9C0141080250320F1802104A08", 1),
]

# (hex transmission, version sum)
VERSION_SUM_CASES: list[tuple[str, int]] = [
    ("8A004A801A8002F478", 16),
    ("620080001611562C8802118E34", 12),
    ("C0015000016115A2E0802F182340", 23),
    ("A0016C880162017C3686B18A3D4780", 31),
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's BITSCTL_* environment out of tests."""
    for name in (
        "BITSCTL_CONFIG",
        "BITSCTL_WORK_DIR",
        "BITSCTL_JSON_OUTPUT",
        "BITSCTL_QUIET",
        "BITSCTL_VERBOSE",
        "BITSCTL_DECODER__MAX_DEPTH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    bits_level = logging.getLogger("bitsctl").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("bitsctl").setLevel(bits_level)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so no stray bitsctl.toml or input.txt is found.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")``.
    """
    monkeypatch.chdir(tmp_path)


def cursor_for(hex_text: str) -> BitCursor:
    """Bit cursor positioned at the start of *hex_text*."""
    return BitCursor(hex_to_bits(hex_text))


def bits_cursor(bits: str) -> BitCursor:
    """Bit cursor over a literal ``0``/``1`` string (spaces ignored)."""
    return BitCursor(bits.replace(" ", ""))


def nested_sum_hex(depth: int) -> str:
    """Hex for ``sum(sum(...(1)))`` nested *depth* levels, literal included.

    Each SUM uses child-count framing with one child; the stream is
    zero-padded to whole bytes.
    """
    sum_of_one = "000" "000" "1" + format(1, "011b")
    literal_one = "000" "100" "00001"
    bits = sum_of_one * (depth - 1) + literal_one
    bits += "0" * (-len(bits) % 8)
    return bits_to_hex(bits)
