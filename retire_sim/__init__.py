"""Retirement Savings Projection Package."""

from retire_sim.params import (
    ProjectionParams,
    INFLATION,
    INVESTMENT_RETURN,
    WITHDRAWAL_RATE,
    KID_DEPENDENCY_YEARS,
    END_AGE,
)
from retire_sim.projection import (
    calculate_retirement,
    classify_theme,
    ProjectionResult,
    YearData,
    Theme,
    NOT_ACHIEVABLE,
    POST_RETIREMENT_YEARS,
)
from retire_sim.formatting import format_currency, format_axis_tick

__all__ = [
    "ProjectionParams",
    "INFLATION",
    "INVESTMENT_RETURN",
    "WITHDRAWAL_RATE",
    "KID_DEPENDENCY_YEARS",
    "END_AGE",
    "calculate_retirement",
    "classify_theme",
    "ProjectionResult",
    "YearData",
    "Theme",
    "NOT_ACHIEVABLE",
    "POST_RETIREMENT_YEARS",
    "format_currency",
    "format_axis_tick",
]
