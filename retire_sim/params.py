"""Projection parameters and fixed economic assumptions."""

from dataclasses import dataclass

# Economic assumptions (annual, percent unless noted)
INFLATION = 2.5
INVESTMENT_RETURN = 5.0
WITHDRAWAL_RATE = 0.04  # fraction of corpus spendable per year
KID_DEPENDENCY_YEARS = 20

# Series never reaches this age
END_AGE = 100


@dataclass(frozen=True)
class ProjectionParams:
    """Inputs for one projection run. Currency fields are in whole units."""

    current_age: int
    current_savings: float
    annual_income: float
    monthly_personal_expenses: float
    monthly_rent: float
    income_growth: float  # percent per year

    # One-time purchases, paid from savings at year zero
    buy_house: bool = False
    house_cost: float = 0.0
    buy_car: bool = False
    car_cost: float = 0.0

    # Dependents
    kids_count: int = 0
    kid_cost: float = 0.0  # per child per year

    @property
    def annual_base_expenses(self) -> float:
        """Year-zero living cost; buying a house removes rent."""
        annual_rent = 0.0 if self.buy_house else self.monthly_rent * 12
        return self.monthly_personal_expenses * 12 + annual_rent

    @property
    def annual_kid_expense(self) -> float:
        return self.kids_count * self.kid_cost

    @property
    def initial_corpus(self) -> float:
        """Savings after one-time purchases."""
        corpus = self.current_savings
        if self.buy_house:
            corpus -= self.house_cost
        if self.buy_car:
            corpus -= self.car_cost
        return corpus
