from __future__ import annotations

from dataclasses import asdict, fields
from typing import Iterable

import numpy as np
import pandas as pd

from .types import DisplayThresholds, InputDomain, RiskInput, RiskModelConfig
from .validation import InvalidInputError

INPUT_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(RiskInput))
FLAG_COLUMNS: tuple[str, ...] = (
    "uterine_dynamics",
    "prior_preterm_birth",
    "membrane_rupture",
    "prior_cervical_surgery",
)
OUTPUT_COLUMNS: tuple[str, ...] = (
    "gestational_age",
    "risk_factor",
    "risk_one_week_pct",
    "risk_two_weeks_pct",
    "risk_four_weeks_pct",
    "elevated",
)


def inputs_to_frame(inputs: Iterable[RiskInput]) -> pd.DataFrame:
    rows = [asdict(item) for item in inputs]
    return pd.DataFrame(rows, columns=list(INPUT_COLUMNS))


def _validate_integral(series: pd.Series, name: str, lower: int, upper: int) -> None:
    if not pd.api.types.is_numeric_dtype(series) or pd.api.types.is_bool_dtype(series):
        raise InvalidInputError(f"{name} must be numeric")
    values = series.to_numpy(dtype="float64")
    if np.isnan(values).any():
        raise InvalidInputError(f"{name} contains NaN values")
    if not np.all(np.mod(values, 1.0) == 0.0):
        raise InvalidInputError(f"{name} must contain integers")
    if (values < lower).any() or (values > upper).any():
        raise InvalidInputError(f"{name} must be in [{lower}, {upper}]")


def validate_input_frame(frame: pd.DataFrame, domain: InputDomain) -> None:
    if not isinstance(frame, pd.DataFrame):
        raise TypeError("frame must be a pandas DataFrame")
    missing = [column for column in INPUT_COLUMNS if column not in frame.columns]
    if missing:
        raise InvalidInputError(f"frame is missing columns: {', '.join(missing)}")

    _validate_integral(frame["gestational_weeks"], "gestational_weeks", domain.min_weeks, domain.max_weeks)
    _validate_integral(frame["gestational_days"], "gestational_days", 0, domain.max_days)
    _validate_integral(frame["fetal_count"], "fetal_count", min(domain.fetal_counts), max(domain.fetal_counts))
    if not frame["fetal_count"].isin(domain.fetal_counts).all():
        raise InvalidInputError("fetal_count contains unsupported values")

    cervix = pd.to_numeric(frame["cervical_length_mm"], errors="coerce").to_numpy(dtype="float64")
    if not np.isfinite(cervix).all():
        raise InvalidInputError("cervical_length_mm contains non-finite values")
    if (cervix < domain.min_cervical_length_mm).any() or (cervix > domain.max_cervical_length_mm).any():
        raise InvalidInputError(
            f"cervical_length_mm must be in [{domain.min_cervical_length_mm:g}, "
            f"{domain.max_cervical_length_mm:g}]"
        )

    for column in FLAG_COLUMNS:
        if not pd.api.types.is_bool_dtype(frame[column]):
            raise InvalidInputError(f"{column} must be boolean")


def _band_multiplier(values: np.ndarray, bands: tuple[tuple[float, float], ...]) -> np.ndarray:
    conditions = [values < upper for upper, _ in bands]
    choices = [multiplier for _, multiplier in bands]
    return np.select(conditions, choices, default=1.0)


def _flag_multiplier(flags: pd.Series, multiplier: float) -> np.ndarray:
    return np.where(flags.to_numpy(dtype=bool), multiplier, 1.0)


def estimate_risk_frame(
    frame: pd.DataFrame,
    cfg: RiskModelConfig | None = None,
    thresholds: DisplayThresholds | None = None,
) -> pd.DataFrame:
    """
    Column-wise version of ``estimate_risk`` for tabular inputs.

    Multipliers are applied in the same order as the scalar estimator so each
    row reproduces its result exactly. The ``elevated`` column follows the
    panel rule (one week or two weeks over threshold).
    """

    cfg = cfg or RiskModelConfig()
    thresholds = thresholds or DisplayThresholds()
    validate_input_frame(frame, cfg.domain)

    weeks = frame["gestational_weeks"].to_numpy(dtype="float64")
    days = frame["gestational_days"].to_numpy(dtype="float64")
    gestational_age = weeks + days / 7
    cervix = frame["cervical_length_mm"].to_numpy(dtype="float64")

    fetal_lookup = dict(cfg.fetal_count)
    fetal = frame["fetal_count"].map(lambda count: fetal_lookup.get(int(count), 1.0)).to_numpy(dtype="float64")

    factor = np.ones(len(frame), dtype="float64")
    factor = factor * _band_multiplier(gestational_age, cfg.gestational_age_bands)
    factor = factor * _band_multiplier(cervix, cfg.cervical_length_bands)
    factor = factor * _flag_multiplier(frame["uterine_dynamics"], cfg.uterine_dynamics)
    factor = factor * _flag_multiplier(frame["prior_preterm_birth"], cfg.prior_preterm_birth)
    factor = factor * _flag_multiplier(frame["membrane_rupture"], cfg.membrane_rupture)
    factor = factor * fetal
    factor = factor * _flag_multiplier(frame["prior_cervical_surgery"], cfg.prior_cervical_surgery)

    def horizon(multiplier: float) -> np.ndarray:
        return np.minimum(cfg.base_risk * factor * multiplier, 1.0) * 100

    result = pd.DataFrame(index=frame.index)
    result["gestational_age"] = gestational_age
    result["risk_factor"] = factor
    result["risk_one_week_pct"] = horizon(cfg.horizon_one_week)
    result["risk_two_weeks_pct"] = horizon(cfg.horizon_two_weeks)
    result["risk_four_weeks_pct"] = horizon(cfg.horizon_four_weeks)
    result["elevated"] = (result["risk_one_week_pct"] >= thresholds.one_week_pct) | (
        result["risk_two_weeks_pct"] >= thresholds.two_weeks_pct
    )
    return result[list(OUTPUT_COLUMNS)]
