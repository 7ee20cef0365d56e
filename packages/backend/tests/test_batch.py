import numpy as np
import pandas as pd
import pandas.testing as pdt
import pytest

from preterm_risk.scoring import (
    InvalidInputError,
    RiskInput,
    classify_display,
    estimate_risk,
    estimate_risk_frame,
)
from preterm_risk.scoring.batch import OUTPUT_COLUMNS, inputs_to_frame


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


def _inputs():
    return [
        _input(gestational_weeks=23, cervical_length_mm=25.0),
        _input(gestational_weeks=33, gestational_days=6, cervical_length_mm=40.0),
        _input(
            gestational_weeks=28,
            cervical_length_mm=10.0,
            uterine_dynamics=True,
            prior_preterm_birth=True,
            membrane_rupture=True,
            fetal_count=2,
            prior_cervical_surgery=True,
        ),
        _input(gestational_weeks=30, gestational_days=2, cervical_length_mm=17.5, fetal_count=3),
        _input(gestational_weeks=25, gestational_days=4, cervical_length_mm=22.0, prior_preterm_birth=True),
    ]


def test_frame_matches_scalar_estimator():
    inputs = _inputs()
    result = estimate_risk_frame(inputs_to_frame(inputs))

    expected_rows = []
    for item in inputs:
        output = estimate_risk(item)
        expected_rows.append(
            {
                "gestational_age": output.gestational_age,
                "risk_factor": output.risk_factor,
                "risk_one_week_pct": output.risk_one_week_pct,
                "risk_two_weeks_pct": output.risk_two_weeks_pct,
                "risk_four_weeks_pct": output.risk_four_weeks_pct,
                "elevated": classify_display(output).tier == "elevated",
            }
        )
    expected = pd.DataFrame(expected_rows, columns=list(OUTPUT_COLUMNS))

    pdt.assert_frame_equal(result, expected)


def test_frame_index_preserved():
    frame = inputs_to_frame(_inputs())
    frame.index = pd.Index(["a", "b", "c", "d", "e"], name="patient")

    result = estimate_risk_frame(frame)

    assert result.index.equals(frame.index)
    assert list(result["elevated"]) == [True, False, True, True, True]
    assert (result[["risk_one_week_pct", "risk_two_weeks_pct", "risk_four_weeks_pct"]] <= 100.0).all().all()


def test_missing_column_rejected():
    frame = inputs_to_frame(_inputs()).drop(columns=["fetal_count"])
    with pytest.raises(InvalidInputError):
        estimate_risk_frame(frame)


def test_days_above_six_rejected():
    frame = inputs_to_frame(_inputs())
    frame.loc[1, "gestational_days"] = 7
    with pytest.raises(InvalidInputError):
        estimate_risk_frame(frame)


def test_nan_cervical_length_rejected():
    frame = inputs_to_frame(_inputs())
    frame["cervical_length_mm"] = frame["cervical_length_mm"].astype("float64")
    frame.loc[0, "cervical_length_mm"] = np.nan
    with pytest.raises(InvalidInputError):
        estimate_risk_frame(frame)


def test_non_boolean_flags_rejected():
    frame = inputs_to_frame(_inputs())
    frame["membrane_rupture"] = frame["membrane_rupture"].astype(int)
    with pytest.raises(InvalidInputError):
        estimate_risk_frame(frame)


def test_fractional_weeks_rejected():
    frame = inputs_to_frame(_inputs())
    frame["gestational_weeks"] = frame["gestational_weeks"].astype("float64")
    frame.loc[2, "gestational_weeks"] = 28.5
    with pytest.raises(InvalidInputError):
        estimate_risk_frame(frame)


def test_non_frame_rejected():
    with pytest.raises(TypeError):
        estimate_risk_frame([{"gestational_weeks": 23}])
