"""Dependency providers for the API."""

from __future__ import annotations

from functools import lru_cache

from preterm_risk.scoring import DisplayThresholds, RiskModelConfig


@lru_cache(maxsize=1)
def get_model_config() -> RiskModelConfig:
    return RiskModelConfig()


@lru_cache(maxsize=1)
def get_display_thresholds() -> DisplayThresholds:
    return DisplayThresholds()
