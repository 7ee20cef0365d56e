from __future__ import annotations

import math
import numbers

import numpy as np

from .types import InputDomain, RiskInput


class InvalidInputError(ValueError):
    """Raised when a risk input falls outside the domain the form allows."""


def validate_int_range(value: object, name: str, lower: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInputError(f"{name} must be an integer")
    if value < lower or value > upper:
        raise InvalidInputError(f"{name} must be in [{lower}, {upper}]")


def validate_finite_range(value: object, name: str, lower: float, upper: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite")
    if value < lower or value > upper:
        raise InvalidInputError(f"{name} must be in [{lower:g}, {upper:g}]")


def validate_flag(value: object, name: str) -> None:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(f"{name} must be a boolean")


def validate_risk_input(risk_input: RiskInput, domain: InputDomain) -> None:
    validate_int_range(
        risk_input.gestational_weeks, "gestational_weeks", domain.min_weeks, domain.max_weeks
    )
    # days stay within [0, max_days] for every weeks value, including the last week
    validate_int_range(risk_input.gestational_days, "gestational_days", 0, domain.max_days)
    validate_finite_range(
        risk_input.cervical_length_mm,
        "cervical_length_mm",
        domain.min_cervical_length_mm,
        domain.max_cervical_length_mm,
    )
    validate_int_range(
        risk_input.fetal_count, "fetal_count", min(domain.fetal_counts), max(domain.fetal_counts)
    )
    if risk_input.fetal_count not in domain.fetal_counts:
        allowed = ", ".join(str(count) for count in domain.fetal_counts)
        raise InvalidInputError(f"fetal_count must be one of {{{allowed}}}")

    for name in (
        "uterine_dynamics",
        "prior_preterm_birth",
        "membrane_rupture",
        "prior_cervical_surgery",
    ):
        validate_flag(getattr(risk_input, name), name)
