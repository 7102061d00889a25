"""Display helpers for numbers and labels."""

from __future__ import annotations

from typing import Literal, Union

TextFormat = Literal["capitalize", "uppercase", "lowercase"]


def parse_number(value: Union[float, int, str]) -> str:
    """Format a value with two decimals and comma thousands separators (en-US style)."""
    return f"{float(value):,.2f}"


def format_money(value: float, symbol: str = "$") -> str:
    # sign goes before the symbol: -$1,000.00
    if value < 0:
        return f"-{symbol}{parse_number(-value)}"
    return f"{symbol}{parse_number(value)}"


def format_text(value: str, fmt: TextFormat) -> str:
    if fmt == "uppercase":
        return value.upper()
    if fmt == "lowercase":
        return value.lower()
    if fmt == "capitalize":
        return value[:1].upper() + value[1:].lower()
    raise ValueError(f"unknown text format: {fmt!r}")
