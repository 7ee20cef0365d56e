"""Risk assessment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from preterm_risk.api.deps import get_display_thresholds, get_model_config
from preterm_risk.api.schemas.assessment import (
    BatchAssessmentRequest,
    BatchAssessmentResponse,
    BatchAssessmentRow,
    BatchMetadata,
    DisplayBlock,
    HorizonItem,
    RecommendationItem,
    RiskAssessmentResponse,
    RiskInputPayload,
)
from preterm_risk.api.schemas.common import ErrorResponse
from preterm_risk.application.services.run_assessment import run_assessment, run_batch_assessment
from preterm_risk.scoring import DisplayThresholds, RiskDisplay, RiskModelConfig, RiskOutput
from preterm_risk.scoring.types import DISCLAIMER, RECOMMENDATION_TEXT
from preterm_risk.settings import Settings, get_settings

router = APIRouter()


def _recommendation_items(tags: tuple[str, ...]) -> list[RecommendationItem]:
    return [RecommendationItem(tag=tag, text=RECOMMENDATION_TEXT[tag]) for tag in tags]


def _build_response_payload(
    payload: RiskInputPayload,
    output: RiskOutput,
    display: RiskDisplay,
) -> RiskAssessmentResponse:
    display_block = DisplayBlock(
        tier=display.tier,
        title=display.title,
        message=display.message,
        horizons=[
            HorizonItem(
                key=horizon.key,
                label=horizon.label,
                value_pct=horizon.value_pct,
                text=horizon.text,
                is_high=horizon.is_high,
            )
            for horizon in display.horizons
        ],
        recommendations=_recommendation_items(display.recommendations),
    )
    return RiskAssessmentResponse(
        input=payload,
        gestational_age=output.gestational_age,
        risk_factor=output.risk_factor,
        risk_one_week_pct=output.risk_one_week_pct,
        risk_two_weeks_pct=output.risk_two_weeks_pct,
        risk_four_weeks_pct=output.risk_four_weeks_pct,
        recommendations=_recommendation_items(output.recommendations),
        display=display_block,
        disclaimer=DISCLAIMER,
    )


def _bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post(
    "/risk/assessments",
    response_model=RiskAssessmentResponse,
    responses={400: {"model": ErrorResponse}},
)
def assess_risk(
    payload: RiskInputPayload,
    model_cfg: RiskModelConfig = Depends(get_model_config),
    thresholds: DisplayThresholds = Depends(get_display_thresholds),
) -> RiskAssessmentResponse:
    try:
        result = run_assessment(payload.to_domain(), model_cfg=model_cfg, thresholds=thresholds)
    except ValueError as exc:
        raise _bad_request(exc) from exc

    return _build_response_payload(payload, result["output"], result["display"])


@router.post(
    "/risk/assessments/batch",
    response_model=BatchAssessmentResponse,
    responses={400: {"model": ErrorResponse}},
)
def assess_risk_batch(
    request: BatchAssessmentRequest,
    settings: Settings = Depends(get_settings),
    model_cfg: RiskModelConfig = Depends(get_model_config),
    thresholds: DisplayThresholds = Depends(get_display_thresholds),
) -> BatchAssessmentResponse:
    try:
        result = run_batch_assessment(
            [item.to_domain() for item in request.items],
            max_items=settings.batch_max_items,
            model_cfg=model_cfg,
            thresholds=thresholds,
        )
    except ValueError as exc:
        raise _bad_request(exc) from exc

    frame = result["results"]
    rows = [
        BatchAssessmentRow(
            index=int(index),
            gestational_age=float(row.gestational_age),
            risk_factor=float(row.risk_factor),
            risk_one_week_pct=float(row.risk_one_week_pct),
            risk_two_weeks_pct=float(row.risk_two_weeks_pct),
            risk_four_weeks_pct=float(row.risk_four_weeks_pct),
            tier="elevated" if bool(row.elevated) else "low",
        )
        for index, row in frame.iterrows()
    ]
    return BatchAssessmentResponse(data=rows, metadata=BatchMetadata(**result["metadata"]))
