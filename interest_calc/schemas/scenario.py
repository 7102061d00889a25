"""Data contracts for the compound growth projection."""

from pydantic import BaseModel, ConfigDict, Field


class ScenarioInput(BaseModel):
    """Validated inputs of a single calculation.

    Range checks happen in the form layer; the projection trusts these values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_investment: float = Field(..., description="Amount invested at month 0.")
    monthly_contribution: float = Field(
        0.0,
        description="Amount added at the end of every month.",
    )
    length_of_time_years: int = Field(..., description="Number of years to project.")
    interest_rate_percent: float = Field(
        ...,
        description="Annual nominal rate in percent (e.g. 8 for 8%).",
    )


class MonthRecord(BaseModel):
    """Single month of a projection. Month 0 is the baseline."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=0)
    year: int = Field(..., ge=0)
    invested: float
    total: float
