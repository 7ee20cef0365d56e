"""Health endpoint."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from preterm_risk.api.deps import get_display_thresholds, get_model_config
from preterm_risk.api.schemas.common import StatusResponse
from preterm_risk.scoring import DisplayThresholds, RiskModelConfig
from preterm_risk.settings import Settings, get_settings

router = APIRouter()


@router.get("/health", response_model=StatusResponse)
def health_check(
    settings: Settings = Depends(get_settings),
    model_cfg: RiskModelConfig = Depends(get_model_config),
    thresholds: DisplayThresholds = Depends(get_display_thresholds),
) -> StatusResponse:
    return StatusResponse(
        status="ok",
        service=settings.app_name,
        timestamp=datetime.now(timezone.utc),
        version=settings.api_version,
        environment=settings.environment,
        base_risk=model_cfg.base_risk,
        elevated_thresholds_pct=[thresholds.one_week_pct, thresholds.two_weeks_pct],
    )
