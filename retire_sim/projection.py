"""Core projection engine."""

import math
from dataclasses import dataclass, field
from enum import Enum

from retire_sim.params import (
    END_AGE,
    INFLATION,
    INVESTMENT_RETURN,
    KID_DEPENDENCY_YEARS,
    WITHDRAWAL_RATE,
    ProjectionParams,
)

NOT_ACHIEVABLE = -1

# Years of series kept after the crossing year
POST_RETIREMENT_YEARS = 15


class Theme(Enum):
    """Outcome label, most favorable first."""

    PEACE = "peace"
    WORRY = "worry"
    PANIC = "panic"
    VOID = "void"


# (max retirement age, theme); first band whose ceiling is not exceeded wins
_THEME_BANDS: tuple[tuple[int, Theme], ...] = (
    (50, Theme.PEACE),
    (60, Theme.WORRY),
    (75, Theme.PANIC),
)


def classify_theme(retirement_age: int) -> Theme:
    """Map a retirement age (or NOT_ACHIEVABLE) to its theme band."""
    if retirement_age == NOT_ACHIEVABLE:
        return Theme.VOID
    for ceiling, theme in _THEME_BANDS:
        if retirement_age <= ceiling:
            return theme
    return Theme.VOID


def _round(x: float) -> int:
    """Nearest integer, ties toward +inf."""
    whole = math.floor(x)
    return whole + 1 if x - whole >= 0.5 else whole


@dataclass(frozen=True)
class YearData:
    """One displayed year. Money fields are rounded to whole units."""

    age: int
    savings: int
    target: int
    income: int
    expenses: int
    is_retired: bool
    # savings >= target in this year (may lapse after retirement)
    fully_funded: bool


@dataclass(frozen=True)
class ProjectionResult:
    years_to_retire: int
    retirement_age: int
    target_corpus: int
    savings_rate: float
    theme: Theme
    data: tuple[YearData, ...] = field(default_factory=tuple)

    @property
    def achievable(self) -> bool:
        return self.years_to_retire != NOT_ACHIEVABLE


def calculate_retirement(params: ProjectionParams) -> ProjectionResult:
    """Project savings year by year until the withdrawal-rate target is met.

    Pre-retirement: corpus = corpus * (1 + r) + (income - expenses)
    Post-retirement: corpus = corpus * (1 + r) - expenses, series capped
    POST_RETIREMENT_YEARS after the crossing year.
    Simulation state stays at full precision; only YearData is rounded.
    """
    base_expenses = params.annual_base_expenses
    kid_expense = params.annual_kid_expense

    income = params.annual_income
    if income > 0:
        savings_rate = (income - (base_expenses + kid_expense)) / income * 100
    else:
        savings_rate = 0.0

    corpus = params.initial_corpus

    growth = params.income_growth / 100
    inflation = INFLATION / 100
    investment = INVESTMENT_RETURN / 100

    data: list[YearData] = []
    age = params.current_age
    retired = False
    years_to_retire = NOT_ACHIEVABLE

    # Last record is age 99; END_AGE itself is never emitted
    for i in range(END_AGE - params.current_age):
        if i >= KID_DEPENDENCY_YEARS:
            kid_expense = 0.0
        elif i > 0:
            kid_expense *= 1 + inflation

        total_expenses = base_expenses + kid_expense
        target = total_expenses / WITHDRAWAL_RATE
        funded = corpus >= target

        if funded and not retired:
            retired = True
            years_to_retire = i

        data.append(YearData(
            age=age,
            savings=_round(corpus),
            target=_round(target),
            income=_round(income),
            expenses=_round(total_expenses),
            is_retired=retired,
            fully_funded=funded,
        ))

        if not retired:
            income *= 1 + growth
            base_expenses *= 1 + inflation
            net_savings = income - (base_expenses + kid_expense)
            corpus = corpus * (1 + investment) + net_savings
        else:
            base_expenses *= 1 + inflation
            withdrawal = base_expenses + kid_expense
            corpus = corpus * (1 + investment) - withdrawal
            if i > years_to_retire + POST_RETIREMENT_YEARS:
                break

        age += 1

    if years_to_retire == NOT_ACHIEVABLE:
        retirement_age = NOT_ACHIEVABLE
    else:
        retirement_age = params.current_age + years_to_retire

    if not data:
        target_corpus = 0
    elif years_to_retire == NOT_ACHIEVABLE:
        target_corpus = data[-1].target
    else:
        target_corpus = data[years_to_retire].target

    return ProjectionResult(
        years_to_retire=years_to_retire,
        retirement_age=retirement_age,
        target_corpus=target_corpus,
        savings_rate=savings_rate,
        theme=classify_theme(retirement_age),
        data=tuple(data),
    )
