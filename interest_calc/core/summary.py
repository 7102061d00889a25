from __future__ import annotations

from typing import Optional, Sequence

from interest_calc.schemas.calculation import CalculationSummary
from interest_calc.schemas.scenario import MonthRecord


def performance_percent(returns: float, invested: float) -> Optional[float]:
    if invested == 0:
        return None
    return returns * 100 / invested


def summarize(records: Sequence[MonthRecord], length_of_time_years: int) -> CalculationSummary:
    """Final invested/total plus the return and performance of the whole horizon."""
    if not records:
        raise ValueError("cannot summarize an empty projection")

    last = records[-1]
    returns = last.total - last.invested
    return CalculationSummary(
        length_of_time_years=length_of_time_years,
        invested=last.invested,
        total=last.total,
        returns=returns,
        performance_percent=performance_percent(returns, last.invested),
    )
