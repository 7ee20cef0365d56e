from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

RecommendationTag = Literal[
    "critical-viability-window",
    "corticosteroids-for-lung-maturation",
    "magnesium-sulfate-neuroprotection",
    "consider-tocolysis",
]

RiskTier = Literal["elevated", "low"]

RECOMMENDATION_TEXT: dict[str, str] = {
    "critical-viability-window": (
        "Período crítico de viabilidad fetal. Evaluación individualizada urgente."
    ),
    "corticosteroids-for-lung-maturation": (
        "Considerar administración de corticosteroides para maduración pulmonar fetal."
    ),
    "magnesium-sulfate-neuroprotection": (
        "Considerar sulfato de magnesio para neuroprotección fetal."
    ),
    "consider-tocolysis": "Considerar tocólisis.",
}

DISCLAIMER = (
    "Esta herramienta es solo una guía. "
    "La decisión final debe ser tomada por un profesional de la salud."
)


@dataclass(frozen=True)
class RiskInput:
    gestational_weeks: int
    gestational_days: int
    uterine_dynamics: bool
    prior_preterm_birth: bool
    cervical_length_mm: float
    membrane_rupture: bool
    fetal_count: int
    prior_cervical_surgery: bool

    @property
    def gestational_age(self) -> float:
        return self.gestational_weeks + self.gestational_days / 7


@dataclass(frozen=True)
class InputDomain:
    min_weeks: int = 23
    max_weeks: int = 33
    max_days: int = 6
    min_cervical_length_mm: float = 0.0
    max_cervical_length_mm: float = 50.0
    fetal_counts: tuple[int, ...] = (1, 2, 3)


@dataclass(frozen=True)
class RiskModelConfig:
    base_risk: float = 0.015
    # (upper bound exclusive, multiplier), checked in order; first match wins
    gestational_age_bands: tuple[tuple[float, float], ...] = (
        (24.0, 1.8),
        (28.0, 1.5),
        (32.0, 1.3),
    )
    cervical_length_bands: tuple[tuple[float, float], ...] = (
        (15.0, 2.5),
        (20.0, 2.0),
        (25.0, 1.5),
    )
    uterine_dynamics: float = 1.5
    prior_preterm_birth: float = 1.8
    membrane_rupture: float = 2.0
    fetal_count: tuple[tuple[int, float], ...] = ((1, 1.0), (2, 1.8), (3, 2.2))
    prior_cervical_surgery: float = 1.4
    horizon_one_week: float = 2.2
    horizon_two_weeks: float = 3.3
    horizon_four_weeks: float = 4.4
    domain: InputDomain = InputDomain()


@dataclass(frozen=True)
class RiskOutput:
    risk_one_week_pct: float
    risk_two_weeks_pct: float
    risk_four_weeks_pct: float
    recommendations: tuple[str, ...]
    risk_factor: float
    gestational_age: float


@dataclass(frozen=True)
class DisplayThresholds:
    one_week_pct: float = 5.0
    two_weeks_pct: float = 10.0
    four_weeks_pct: float = 15.0


@dataclass(frozen=True)
class HorizonDisplay:
    key: str
    label: str
    value_pct: float
    text: str
    is_high: bool


@dataclass(frozen=True)
class RiskDisplay:
    tier: RiskTier
    title: str
    message: str
    horizons: tuple[HorizonDisplay, ...]
    recommendations: tuple[str, ...] = field(default_factory=tuple)
