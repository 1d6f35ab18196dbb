"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from bitsctl.config.models import DecoderConfig, InputConfig
from bitsctl.domain.decoder import MAX_DEPTH_LIMIT


class TestSectionModels:
    def test_defaults(self) -> None:
        assert DecoderConfig().max_depth == 64
        assert InputConfig().default_file == "input.txt"

    def test_frozen(self) -> None:
        cfg = DecoderConfig()
        with pytest.raises(ValidationError):
            cfg.max_depth = 3  # type: ignore[misc]

    def test_ceiling_accepted(self) -> None:
        assert DecoderConfig(max_depth=MAX_DEPTH_LIMIT).max_depth == MAX_DEPTH_LIMIT

    @pytest.mark.parametrize("depth", [0, -1, MAX_DEPTH_LIMIT + 1, 400])
    def test_depth_bounds(self, depth: int) -> None:
        with pytest.raises(ValidationError):
            DecoderConfig(max_depth=depth)
