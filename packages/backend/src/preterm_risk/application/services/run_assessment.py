"""Assessment service: risk input -> estimate + display classification."""

from __future__ import annotations

import logging
from typing import Sequence

from preterm_risk.scoring import (
    DisplayThresholds,
    InvalidInputError,
    RiskInput,
    RiskModelConfig,
    classify_display,
    estimate_risk,
    estimate_risk_frame,
)
from preterm_risk.scoring.batch import inputs_to_frame

logger = logging.getLogger(__name__)


def run_assessment(
    risk_input: RiskInput,
    *,
    model_cfg: RiskModelConfig | None = None,
    thresholds: DisplayThresholds | None = None,
) -> dict[str, object]:
    try:
        output = estimate_risk(risk_input, model_cfg)
    except InvalidInputError as exc:
        logger.warning("Rejected risk input: %s", exc)
        raise

    display = classify_display(output, thresholds)
    logger.info(
        "Risk assessed: tier=%s risk_factor=%.4f recommendations=%d",
        display.tier,
        output.risk_factor,
        len(output.recommendations),
    )
    return {
        "input": risk_input,
        "output": output,
        "display": display,
    }


def run_batch_assessment(
    inputs: Sequence[RiskInput],
    *,
    max_items: int,
    model_cfg: RiskModelConfig | None = None,
    thresholds: DisplayThresholds | None = None,
) -> dict[str, object]:
    if not inputs:
        raise InvalidInputError("batch must contain at least one record")
    if len(inputs) > max_items:
        raise InvalidInputError(f"batch exceeds the maximum of {max_items} records")

    try:
        frame = estimate_risk_frame(inputs_to_frame(inputs), model_cfg, thresholds)
    except InvalidInputError as exc:
        logger.warning("Rejected batch input: %s", exc)
        raise

    elevated = int(frame["elevated"].sum())
    logger.info("Batch assessed: items=%d elevated=%d", len(frame), elevated)
    return {
        "results": frame,
        "metadata": {"items": int(len(frame)), "elevated": elevated},
    }
