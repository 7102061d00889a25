"""Reduce a monthly projection to one chart point per year."""

from __future__ import annotations

from typing import Iterable, List

from interest_calc.schemas.scenario import MonthRecord


def aggregate_by_year(records: Iterable[MonthRecord]) -> List[MonthRecord]:
    """Keep the last record of every year, in the order the years appear.

    The year-0 baseline survives as its own point so a chart starts at the
    initial investment.
    """
    out: List[MonthRecord] = []
    for record in records:
        if out and out[-1].year == record.year:
            out[-1] = record
        else:
            out.append(record)
    return out
