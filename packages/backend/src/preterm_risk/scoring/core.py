from __future__ import annotations

from .types import RiskInput, RiskModelConfig, RiskOutput
from .validation import validate_risk_input


def band_multiplier(value: float, bands: tuple[tuple[float, float], ...]) -> float:
    for upper, multiplier in bands:
        if value < upper:
            return multiplier
    return 1.0


def compute_risk_factor(risk_input: RiskInput, cfg: RiskModelConfig) -> float:
    factor = 1.0
    factor *= band_multiplier(risk_input.gestational_age, cfg.gestational_age_bands)
    factor *= band_multiplier(risk_input.cervical_length_mm, cfg.cervical_length_bands)

    if risk_input.uterine_dynamics:
        factor *= cfg.uterine_dynamics
    if risk_input.prior_preterm_birth:
        factor *= cfg.prior_preterm_birth
    if risk_input.membrane_rupture:
        factor *= cfg.membrane_rupture

    factor *= dict(cfg.fetal_count).get(risk_input.fetal_count, 1.0)

    if risk_input.prior_cervical_surgery:
        factor *= cfg.prior_cervical_surgery
    return factor


def horizon_risk_pct(base_risk: float, risk_factor: float, horizon_multiplier: float) -> float:
    # probability is capped before scaling, so percentages never exceed 100
    return min(base_risk * risk_factor * horizon_multiplier, 1.0) * 100


def build_recommendations(gestational_age: float, uterine_dynamics: bool) -> tuple[str, ...]:
    recommendations: list[str] = []
    if gestational_age < 24:
        recommendations.append("critical-viability-window")
    if gestational_age < 34:
        recommendations.append("corticosteroids-for-lung-maturation")
    if gestational_age < 32:
        recommendations.append("magnesium-sulfate-neuroprotection")
    if uterine_dynamics:
        recommendations.append("consider-tocolysis")
    return tuple(recommendations)


def estimate_risk(risk_input: RiskInput, cfg: RiskModelConfig | None = None) -> RiskOutput:
    """
    Estimate preterm delivery risk at one, two and four weeks.

    The estimate is a heuristic: a base risk scaled by the product of the
    multipliers triggered by the input, then by a per-horizon multiplier.
    Raises InvalidInputError when the input is outside the form's domain.
    """

    cfg = cfg or RiskModelConfig()
    validate_risk_input(risk_input, cfg.domain)

    gestational_age = risk_input.gestational_age
    risk_factor = compute_risk_factor(risk_input, cfg)

    return RiskOutput(
        risk_one_week_pct=horizon_risk_pct(cfg.base_risk, risk_factor, cfg.horizon_one_week),
        risk_two_weeks_pct=horizon_risk_pct(cfg.base_risk, risk_factor, cfg.horizon_two_weeks),
        risk_four_weeks_pct=horizon_risk_pct(cfg.base_risk, risk_factor, cfg.horizon_four_weeks),
        recommendations=build_recommendations(gestational_age, risk_input.uterine_dynamics),
        risk_factor=risk_factor,
        gestational_age=gestational_age,
    )
