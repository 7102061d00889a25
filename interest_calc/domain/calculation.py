from __future__ import annotations

import logging
from typing import Dict, List, Optional

from interest_calc.core.aggregation import aggregate_by_year
from interest_calc.core.formatting import format_money, format_text, parse_number
from interest_calc.core.projection import project
from interest_calc.core.summary import summarize
from interest_calc.models import CalculatorForm
from interest_calc.schemas.calculation import (
    CalculationResult,
    CalculationSummary,
    ChartSeries,
    DisplayFigure,
    DisplaySummary,
)
from interest_calc.schemas.scenario import MonthRecord, ScenarioInput

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required."

# longest horizon the form accepts
MAX_YEARS = 1000


def _min_message(minimum: int) -> str:
    return f"Value must be {minimum} or greater."


def _max_message(maximum: int) -> str:
    return f"Value must be {maximum} or less."


class FormValidationError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


def validate_form(form: CalculatorForm) -> Dict[str, str]:
    """Return {field: message} for every rule the form breaks (empty when valid)."""
    errors: Dict[str, str] = {}

    if form.initialInvestment is None:
        errors["initialInvestment"] = REQUIRED_MESSAGE
    elif form.initialInvestment < 0:
        errors["initialInvestment"] = _min_message(0)

    if form.monthlyContribution is not None and form.monthlyContribution < 0:
        errors["monthlyContribution"] = _min_message(0)

    if form.interestRate is None:
        errors["interestRate"] = REQUIRED_MESSAGE

    if form.lengthOfTime is None:
        errors["lengthOfTime"] = REQUIRED_MESSAGE
    elif form.lengthOfTime < 1:
        errors["lengthOfTime"] = _min_message(1)
    elif form.lengthOfTime > MAX_YEARS:
        errors["lengthOfTime"] = _max_message(MAX_YEARS)

    return errors


def build_scenario(form: CalculatorForm) -> ScenarioInput:
    errors = validate_form(form)
    if errors:
        logger.warning("Rejected calculator form: %s", errors)
        raise FormValidationError(errors)

    return ScenarioInput(
        initial_investment=form.initialInvestment,
        monthly_contribution=form.monthlyContribution or 0.0,
        length_of_time_years=form.lengthOfTime,
        interest_rate_percent=form.interestRate,
    )


def build_chart(yearly: List[MonthRecord]) -> ChartSeries:
    label = format_text("year", "capitalize")
    return ChartSeries(
        labels=[f"{label} {row.year}" for row in yearly],
        invested=[row.invested for row in yearly],
        total=[row.total for row in yearly],
    )


def _tone(value: Optional[float]):
    return "success" if value is not None and value > 0 else "error"


def build_display(summary: CalculationSummary, currency_symbol: str = "$") -> DisplaySummary:
    """
    Format the summary the way the result cards read:
      - headline "In N years you will have $X"
      - invested is always shown as a success figure
      - returns/performance turn to "error" when not positive
    """
    total_text = format_money(summary.total, currency_symbol)
    years = summary.length_of_time_years
    unit = "year" if years == 1 else "years"

    performance = summary.performance_percent
    if performance is None:
        performance_text = "n/a"
    else:
        sign = "+" if performance > 0 else ""
        performance_text = f"{sign}{parse_number(performance)}%"

    return DisplaySummary(
        headline=f"In {years} {unit} you will have {total_text}",
        total=DisplayFigure(text=total_text, tone=_tone(summary.total)),
        invested=DisplayFigure(text=format_money(summary.invested, currency_symbol), tone="success"),
        returns=DisplayFigure(text=format_money(summary.returns, currency_symbol), tone=_tone(summary.returns)),
        performance=DisplayFigure(text=performance_text, tone=_tone(performance)),
    )


def calculate(form: CalculatorForm, currency_symbol: str = "$") -> CalculationResult:
    """Validate the form, run the projection and shape everything the result view needs."""
    scenario = build_scenario(form)

    monthly = project(scenario)
    yearly = aggregate_by_year(monthly)
    summary = summarize(monthly, scenario.length_of_time_years)

    logger.info(
        "Calculated %s years at %s%%: total=%.2f invested=%.2f",
        scenario.length_of_time_years,
        scenario.interest_rate_percent,
        summary.total,
        summary.invested,
    )

    return CalculationResult(
        scenario=scenario,
        monthly=monthly,
        yearly=yearly,
        chart=build_chart(yearly),
        summary=summary,
        display=build_display(summary, currency_symbol),
    )
