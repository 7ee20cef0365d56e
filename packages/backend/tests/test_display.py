import pytest

from preterm_risk.scoring import DisplayThresholds, RiskInput, RiskOutput, classify_display, estimate_risk
from preterm_risk.scoring.display import format_pct


def _input(**overrides):
    base = dict(
        gestational_weeks=32,
        gestational_days=0,
        uterine_dynamics=False,
        prior_preterm_birth=False,
        cervical_length_mm=30.0,
        membrane_rupture=False,
        fetal_count=1,
        prior_cervical_surgery=False,
    )
    base.update(overrides)
    return RiskInput(**base)


def _output(one_week, two_weeks, four_weeks, recommendations=("consider-tocolysis",)):
    return RiskOutput(
        risk_one_week_pct=one_week,
        risk_two_weeks_pct=two_weeks,
        risk_four_weeks_pct=four_weeks,
        recommendations=recommendations,
        risk_factor=1.0,
        gestational_age=30.0,
    )


def test_one_week_threshold_opens_elevated_panel():
    display = classify_display(_output(5.0, 7.5, 10.0))

    assert display.tier == "elevated"
    assert display.title == "¡Atención! Riesgo Elevado"
    assert display.recommendations == ("consider-tocolysis",)
    assert [h.is_high for h in display.horizons] == [True, False, False]


def test_two_weeks_threshold_opens_elevated_panel():
    display = classify_display(_output(4.9, 10.0, 14.0))

    assert display.tier == "elevated"
    assert [h.is_high for h in display.horizons] == [False, True, False]


def test_four_weeks_alone_keeps_low_panel():
    display = classify_display(_output(4.0, 8.0, 16.0))

    assert display.tier == "low"
    assert display.title == "Riesgo Bajo"
    assert display.recommendations == ()
    assert [h.is_high for h in display.horizons] == [False, False, True]


def test_custom_thresholds():
    thresholds = DisplayThresholds(one_week_pct=3.0, two_weeks_pct=50.0, four_weeks_pct=50.0)
    display = classify_display(_output(3.3, 4.95, 6.6), thresholds)
    assert display.tier == "elevated"


def test_scenarios_end_to_end():
    viability = classify_display(estimate_risk(_input(gestational_weeks=23, cervical_length_mm=25.0)))
    assert viability.tier == "elevated"
    assert viability.recommendations[0] == "critical-viability-window"

    late = classify_display(
        estimate_risk(_input(gestational_weeks=33, gestational_days=6, cervical_length_mm=40.0))
    )
    assert late.tier == "low"
    assert late.horizons[0].text == "3.3%"
    assert late.horizons[2].text == "6.6%"


@pytest.mark.parametrize(("value", "text"), [(0.0, "0.0%"), (5.94, "5.9%"), (100.0, "100.0%"), (11.88, "11.9%")])
def test_format_pct(value, text):
    assert format_pct(value) == text
