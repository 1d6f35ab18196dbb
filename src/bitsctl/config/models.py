"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bitsctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bitsctl.domain.decoder import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

# --- bitsctl.toml sections ---


class DecoderConfig(BaseModel):
    """[decoder] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    default_file: str = "input.txt"
