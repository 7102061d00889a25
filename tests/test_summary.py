from __future__ import annotations

from math import isclose

import pytest

from interest_calc.core.projection import project
from interest_calc.core.summary import summarize
from interest_calc.schemas.scenario import ScenarioInput


def test_summary_reads_last_month():
    rows = project(
        ScenarioInput(
            initial_investment=1000.0,
            monthly_contribution=100.0,
            length_of_time_years=2,
            interest_rate_percent=10.0,
        )
    )

    summary = summarize(rows, 2)

    assert summary.length_of_time_years == 2
    assert isclose(summary.invested, 3400.0, abs_tol=1e-9)
    assert isclose(summary.total, 3730.0, abs_tol=1e-9)
    assert isclose(summary.returns, 330.0, abs_tol=1e-9)
    assert isclose(summary.performance_percent, 330.0 * 100 / 3400.0, rel_tol=1e-12)


def test_negative_rate_gives_negative_returns():
    rows = project(
        ScenarioInput(initial_investment=1000.0, length_of_time_years=1, interest_rate_percent=-5.0)
    )

    summary = summarize(rows, 1)

    assert isclose(summary.returns, -50.0, abs_tol=1e-9)
    assert isclose(summary.performance_percent, -5.0, abs_tol=1e-9)


def test_nothing_invested_has_no_performance():
    rows = project(ScenarioInput(initial_investment=0.0, length_of_time_years=1, interest_rate_percent=8.0))

    summary = summarize(rows, 1)

    assert summary.total == 0.0
    assert summary.returns == 0.0
    assert summary.performance_percent is None


def test_empty_projection_is_rejected():
    with pytest.raises(ValueError):
        summarize([], 1)
