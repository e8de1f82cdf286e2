"""Typed configuration for law checking runs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CheckConfig(BaseModel):
    """Sample sizes and mode for a LawRunner run.

    Natural-domain laws are checked on 0..max_n. Tree-domain laws are
    checked on every raw tree with at most max_depth digits, plus
    random_samples seeded random trees of up to random_max_depth digits.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    max_n: int = Field(default=256, ge=0)
    max_depth: int = Field(default=8, ge=0, le=20)
    random_samples: int = Field(default=200, ge=0)
    random_max_depth: int = Field(default=64, ge=0)
    seed: int = 0
    strict: bool = False
