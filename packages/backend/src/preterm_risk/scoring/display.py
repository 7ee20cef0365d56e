from __future__ import annotations

from .types import DisplayThresholds, HorizonDisplay, RiskDisplay, RiskOutput

ELEVATED_TITLE = "¡Atención! Riesgo Elevado"
ELEVATED_MESSAGE = "Se requiere evaluación médica inmediata y seguimiento estrecho."
LOW_TITLE = "Riesgo Bajo"
LOW_MESSAGE = "Continuar con el control prenatal habitual según protocolo."


def format_pct(value: float) -> str:
    return f"{value:.1f}%"


def is_elevated(output: RiskOutput, thresholds: DisplayThresholds) -> bool:
    # the four-week threshold only highlights its own value, it never opens the panel
    return (
        output.risk_one_week_pct >= thresholds.one_week_pct
        or output.risk_two_weeks_pct >= thresholds.two_weeks_pct
    )


def classify_display(
    output: RiskOutput,
    thresholds: DisplayThresholds | None = None,
) -> RiskDisplay:
    thresholds = thresholds or DisplayThresholds()

    horizons = (
        HorizonDisplay(
            key="one_week",
            label="Riesgo a 1 semana",
            value_pct=output.risk_one_week_pct,
            text=format_pct(output.risk_one_week_pct),
            is_high=output.risk_one_week_pct >= thresholds.one_week_pct,
        ),
        HorizonDisplay(
            key="two_weeks",
            label="Riesgo a 2 semanas",
            value_pct=output.risk_two_weeks_pct,
            text=format_pct(output.risk_two_weeks_pct),
            is_high=output.risk_two_weeks_pct >= thresholds.two_weeks_pct,
        ),
        HorizonDisplay(
            key="four_weeks",
            label="Riesgo a 4 semanas",
            value_pct=output.risk_four_weeks_pct,
            text=format_pct(output.risk_four_weeks_pct),
            is_high=output.risk_four_weeks_pct >= thresholds.four_weeks_pct,
        ),
    )

    if is_elevated(output, thresholds):
        return RiskDisplay(
            tier="elevated",
            title=ELEVATED_TITLE,
            message=ELEVATED_MESSAGE,
            horizons=horizons,
            recommendations=output.recommendations,
        )
    return RiskDisplay(tier="low", title=LOW_TITLE, message=LOW_MESSAGE, horizons=horizons)
