"""Data contracts for a full calculation result."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from interest_calc.schemas.scenario import MonthRecord, ScenarioInput

Tone = Literal["success", "error"]


class CalculationSummary(BaseModel):
    """Figures read off the last month of a projection."""

    model_config = ConfigDict(frozen=True)

    length_of_time_years: int
    invested: float
    total: float
    returns: float = Field(..., description="Total minus invested.")
    performance_percent: Optional[float] = Field(
        None,
        description="Returns as a percentage of invested; None when nothing was invested.",
    )


class DisplayFigure(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    tone: Tone


class DisplaySummary(BaseModel):
    """Summary figures formatted the way the result cards show them."""

    model_config = ConfigDict(frozen=True)

    headline: str
    total: DisplayFigure
    invested: DisplayFigure
    returns: DisplayFigure
    performance: DisplayFigure


class ChartSeries(BaseModel):
    """Yearly points laid out as parallel lists for a line chart."""

    model_config = ConfigDict(frozen=True)

    labels: List[str]
    invested: List[float]
    total: List[float]


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    scenario: ScenarioInput
    monthly: List[MonthRecord]
    yearly: List[MonthRecord]
    chart: ChartSeries
    summary: CalculationSummary
    display: DisplaySummary
