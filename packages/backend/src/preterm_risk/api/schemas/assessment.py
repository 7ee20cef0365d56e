"""Schemas for risk assessment payloads."""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field

from preterm_risk.api.schemas.common import APIBaseModel
from preterm_risk.scoring.types import RiskInput


class RiskInputPayload(APIBaseModel):
    gestational_weeks: int = Field(..., ge=23, le=33, description="Completed weeks of gestation")
    gestational_days: int = Field(..., ge=0, le=6, description="Additional days")
    uterine_dynamics: bool = Field(..., description="Uterine contractions present")
    prior_preterm_birth: bool = Field(..., description="History of preterm birth")
    cervical_length_mm: float = Field(..., ge=0, le=50, allow_inf_nan=False, description="Cervical length in mm")
    membrane_rupture: bool = Field(..., description="Rupture of membranes")
    fetal_count: int = Field(..., ge=1, le=3, description="Number of fetuses")
    prior_cervical_surgery: bool = Field(..., description="Prior cervical surgery")

    def to_domain(self) -> RiskInput:
        return RiskInput(**self.model_dump())


class RecommendationItem(APIBaseModel):
    tag: str
    text: str


class HorizonItem(APIBaseModel):
    key: Literal["one_week", "two_weeks", "four_weeks"]
    label: str
    value_pct: float
    text: str
    is_high: bool


class DisplayBlock(APIBaseModel):
    tier: Literal["elevated", "low"]
    title: str
    message: str
    horizons: List[HorizonItem]
    recommendations: List[RecommendationItem]


class RiskAssessmentResponse(APIBaseModel):
    input: RiskInputPayload
    gestational_age: float
    risk_factor: float
    risk_one_week_pct: float = Field(..., ge=0, le=100)
    risk_two_weeks_pct: float = Field(..., ge=0, le=100)
    risk_four_weeks_pct: float = Field(..., ge=0, le=100)
    recommendations: List[RecommendationItem]
    display: DisplayBlock
    disclaimer: str


class BatchAssessmentRequest(APIBaseModel):
    items: List[RiskInputPayload] = Field(..., min_length=1)


class BatchAssessmentRow(APIBaseModel):
    index: int
    gestational_age: float
    risk_factor: float
    risk_one_week_pct: float
    risk_two_weeks_pct: float
    risk_four_weeks_pct: float
    tier: Literal["elevated", "low"]


class BatchMetadata(APIBaseModel):
    items: int = Field(..., ge=0, description="Number of assessed records")
    elevated: int = Field(..., ge=0, description="Records on the elevated-risk panel")


class BatchAssessmentResponse(APIBaseModel):
    data: List[BatchAssessmentRow]
    metadata: BatchMetadata
