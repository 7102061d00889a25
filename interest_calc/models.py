from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CalculatorForm(BaseModel):
    """Raw calculator form as the browser submits it.

    Number inputs arrive as strings; an empty input means the user left it blank.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialInvestment: Optional[float] = None
    monthlyContribution: Optional[float] = None
    lengthOfTime: Optional[int] = None
    interestRate: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
