"""CLI entry point for a single projection report."""

from retire_sim.config import parse_args
from retire_sim.formatting import currency_for, format_currency
from retire_sim.params import (
    INFLATION,
    INVESTMENT_RETURN,
    WITHDRAWAL_RATE,
    ProjectionParams,
)
from retire_sim.projection import ProjectionResult, Theme, calculate_retirement

LABELS = {
    "zh": {
        "title": "退休储蓄模拟",
        "age": "年龄",
        "savings": "当前储蓄",
        "income": "年收入",
        "expenses": "月生活费",
        "rent": "月房租",
        "growth": "收入增长",
        "house": "买房",
        "car": "买车",
        "kids": "子女",
        "assumptions": "假设",
        "summary": "【结果】",
        "years_to_retire": "距退休",
        "retirement_age": "退休年龄",
        "not_achievable": "无法实现",
        "target": "目标储蓄",
        "savings_rate": "储蓄率",
        "theme": "状态",
        "log": "【年度明细（每5年）】",
        "col_age": "年龄",
        "col_income": "收入",
        "col_expenses": "支出",
        "col_savings": "储蓄",
        "col_target": "目标",
        "col_retired": "退休",
        "years": "{n}年",
        "per_kid": "{n}人（每人每年{cost}）",
    },
    "en": {
        "title": "Retirement savings projection",
        "age": "Age",
        "savings": "Savings",
        "income": "Annual income",
        "expenses": "Monthly expenses",
        "rent": "Monthly rent",
        "growth": "Income growth",
        "house": "Buy house",
        "car": "Buy car",
        "kids": "Kids",
        "assumptions": "Assumptions",
        "summary": "[Result]",
        "years_to_retire": "Years to retire",
        "retirement_age": "Retirement age",
        "not_achievable": "not achievable",
        "target": "Target corpus",
        "savings_rate": "Savings rate",
        "theme": "Outlook",
        "log": "[Yearly log (every 5 years)]",
        "col_age": "Age",
        "col_income": "Income",
        "col_expenses": "Expenses",
        "col_savings": "Savings",
        "col_target": "Target",
        "col_retired": "Retired",
        "years": "{n} yrs",
        "per_kid": "{n} ({cost} per kid per year)",
    },
}

THEME_NAMES = {
    "zh": {
        Theme.PEACE: "从容",
        Theme.WORRY: "担忧",
        Theme.PANIC: "紧迫",
        Theme.VOID: "虚无",
    },
    "en": {
        Theme.PEACE: "peace",
        Theme.WORRY: "worry",
        Theme.PANIC: "panic",
        Theme.VOID: "void",
    },
}


def _print_header(params: ProjectionParams, lang: str):
    t = LABELS[lang]
    currency, locale = currency_for(lang)
    money = lambda v: format_currency(v, currency, locale)
    print("=" * 80)
    print(t["title"])
    print(f"  {t['age']}: {params.current_age} / {t['savings']}: {money(params.current_savings)}"
          f" / {t['income']}: {money(params.annual_income)} ({t['growth']} {params.income_growth:.1f}%)")
    rent = "-" if params.buy_house else money(params.monthly_rent)
    print(f"  {t['expenses']}: {money(params.monthly_personal_expenses)} / {t['rent']}: {rent}")
    if params.buy_house:
        print(f"  {t['house']}: -{money(params.house_cost)}")
    if params.buy_car:
        print(f"  {t['car']}: -{money(params.car_cost)}")
    if params.kids_count > 0:
        print(f"  {t['kids']}: " + t["per_kid"].format(n=params.kids_count, cost=money(params.kid_cost)))
    print(f"  {t['assumptions']}: inflation {INFLATION:.1f}% / return {INVESTMENT_RETURN:.1f}%"
          f" / withdrawal {WITHDRAWAL_RATE:.0%}")
    print("=" * 80)


def _print_summary(result: ProjectionResult, lang: str):
    t = LABELS[lang]
    currency, locale = currency_for(lang)
    print(f"\n{t['summary']}")
    if result.achievable:
        print(f"  {t['years_to_retire']}: {t['years'].format(n=result.years_to_retire)}")
        print(f"  {t['retirement_age']}: {result.retirement_age}")
    else:
        print(f"  {t['retirement_age']}: {t['not_achievable']}")
    print(f"  {t['target']}: {format_currency(result.target_corpus, currency, locale)}")
    print(f"  {t['savings_rate']}: {result.savings_rate:.1f}%")
    print(f"  {t['theme']}: {THEME_NAMES[lang][result.theme]}")


def _print_yearly_log(result: ProjectionResult, lang: str):
    t = LABELS[lang]
    currency, locale = currency_for(lang)
    money = lambda v: format_currency(v, currency, locale)
    print(f"\n{t['log']}")
    print("-" * 90)
    print(
        f"{t['col_age']:<6} {t['col_income']:>16} {t['col_expenses']:>16}"
        f" {t['col_savings']:>18} {t['col_target']:>18} {t['col_retired']:>8}"
    )
    print("-" * 90)
    last = len(result.data) - 1
    for i, y in enumerate(result.data):
        if i % 5 == 0 or i == last or i == result.years_to_retire:
            mark = "*" if y.is_retired else ""
            print(
                f"{y.age:<6} {money(y.income):>16} {money(y.expenses):>16}"
                f" {money(y.savings):>18} {money(y.target):>18} {mark:>8}"
            )
    print("-" * 90)


def main():
    """Run one projection and print the report."""
    r, params, _ = parse_args("Retirement savings projection")
    lang = r["lang"]
    result = calculate_retirement(params)

    _print_header(params, lang)
    _print_summary(result, lang)
    if result.data:
        _print_yearly_log(result, lang)


if __name__ == "__main__":
    main()
