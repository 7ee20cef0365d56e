"""Preterm labor risk scoring."""

from .batch import estimate_risk_frame
from .core import estimate_risk
from .display import classify_display
from .types import (
    DisplayThresholds,
    RiskDisplay,
    RiskInput,
    RiskModelConfig,
    RiskOutput,
)
from .validation import InvalidInputError

__all__ = [
    "DisplayThresholds",
    "InvalidInputError",
    "RiskDisplay",
    "RiskInput",
    "RiskModelConfig",
    "RiskOutput",
    "classify_display",
    "estimate_risk",
    "estimate_risk_frame",
]
