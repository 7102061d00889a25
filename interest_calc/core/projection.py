from __future__ import annotations

import math
from typing import List

from interest_calc.schemas.scenario import MonthRecord, ScenarioInput

MONTHS_PER_YEAR = 12


def project(scenario: ScenarioInput) -> List[MonthRecord]:
    """
    Build a month-by-month table from month 0 (baseline) to length_of_time_years * 12.

    Order of operations (per month):
      1) Add the monthly contribution to both invested and total.
      2) On every 12th month, add one year of interest computed on the total
         held at the START of that year (before this year's contributions).
      3) Record the month.

    Contributions made during a year only start earning at the next year-end.
    A non-positive horizon yields the baseline record alone.
    """
    total_months = scenario.length_of_time_years * MONTHS_PER_YEAR
    annual_rate = scenario.interest_rate_percent / 100
    contribution = scenario.monthly_contribution

    total = float(scenario.initial_investment)
    invested = float(scenario.initial_investment)

    rows: List[MonthRecord] = [MonthRecord(month=0, year=0, invested=invested, total=total)]

    # balance the current year's interest is computed on
    year_start_total = total

    for month in range(1, total_months + 1):
        total += contribution
        invested += contribution

        if month % MONTHS_PER_YEAR == 0:
            total += year_start_total * annual_rate
            year_start_total = total

        rows.append(
            MonthRecord(
                month=month,
                year=math.ceil(month / MONTHS_PER_YEAR),
                invested=invested,
                total=total,
            )
        )

    return rows


__all__ = ["MONTHS_PER_YEAR", "project"]
