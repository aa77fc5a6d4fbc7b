"""TOML config loader with CLI > config > default resolution.

This is the input collector: it coerces text to numbers and checks ranges
before anything reaches the projection engine, which never validates.
"""

import argparse
import math
import sys
import tomllib
from pathlib import Path
from typing import Callable

from retire_sim.formatting import LANGUAGES
from retire_sim.params import END_AGE, ProjectionParams

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "current_age": 28,
    "current_savings": 100000.0,
    "annual_income": 200000.0,
    "monthly_personal_expenses": 5000.0,
    "monthly_rent": 3000.0,
    "income_growth": 8.0,
    "buy_house": False,
    "house_cost": 2000000.0,
    "buy_car": False,
    "car_cost": 200000.0,
    "kids_count": 0,
    "kid_cost": 30000.0,
    "lang": "zh",
}

_INT_FIELDS = ("current_age", "kids_count")
_FLOAT_FIELDS = (
    "current_savings",
    "annual_income",
    "monthly_personal_expenses",
    "monthly_rent",
    "income_growth",
    "house_cost",
    "car_cost",
    "kid_cost",
)
# Fields that may not go below zero (income and growth may)
_NON_NEGATIVE_FIELDS = (
    "current_savings",
    "monthly_personal_expenses",
    "monthly_rent",
    "house_cost",
    "car_cost",
    "kid_cost",
)


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Migrate legacy key from before rent was split out
    if "monthly_expenses" in raw:
        v = raw.pop("monthly_expenses")
        raw.setdefault("monthly_personal_expenses", v)
    return raw


def coerce_number(value, integer: bool = False) -> float | int:
    """Coerce form/CLI/TOML input to a number. Empty input counts as zero."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0 if integer else 0.0
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, str):
        try:
            value = float(value.strip().replace(",", ""))
        except ValueError:
            raise ValueError(f"not a number: {value!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"not a number: {value!r}")
    return int(value) if integer else float(value)


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared projection flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file (default: config.toml)")
    parser.add_argument("--current-age", type=str, default=None, help=f"current age (default: {d['current_age']})")
    parser.add_argument("--current-savings", type=str, default=None, help=f"current savings (default: {d['current_savings']:.0f})")
    parser.add_argument("--annual-income", type=str, default=None, help=f"annual income (default: {d['annual_income']:.0f})")
    parser.add_argument("--monthly-personal-expenses", type=str, default=None, help=f"monthly living expenses excluding rent (default: {d['monthly_personal_expenses']:.0f})")
    parser.add_argument("--monthly-rent", type=str, default=None, help=f"monthly rent (default: {d['monthly_rent']:.0f})")
    parser.add_argument("--income-growth", type=str, default=None, help=f"annual income growth in %% (default: {d['income_growth']})")
    parser.add_argument("--buy-house", action=argparse.BooleanOptionalAction, default=None, help="buy a house now (cost paid from savings, rent stops)")
    parser.add_argument("--house-cost", type=str, default=None, help=f"house price (default: {d['house_cost']:.0f})")
    parser.add_argument("--buy-car", action=argparse.BooleanOptionalAction, default=None, help="buy a car now (cost paid from savings)")
    parser.add_argument("--car-cost", type=str, default=None, help=f"car price (default: {d['car_cost']:.0f})")
    parser.add_argument("--kids-count", type=str, default=None, help=f"number of children (default: {d['kids_count']})")
    parser.add_argument("--kid-cost", type=str, default=None, help=f"annual cost per child (default: {d['kid_cost']:.0f})")
    parser.add_argument("--lang", choices=sorted(LANGUAGES), default=None, help=f"output language and currency (default: {d['lang']})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_params(r: dict) -> ProjectionParams:
    """Build ProjectionParams from resolved config dict."""
    values = {key: coerce_number(r[key], integer=True) for key in _INT_FIELDS}
    values.update({key: coerce_number(r[key]) for key in _FLOAT_FIELDS})
    return ProjectionParams(
        buy_house=bool(r["buy_house"]),
        buy_car=bool(r["buy_car"]),
        **values,
    )


def validate_params(params: ProjectionParams) -> list[str]:
    """Check collector-side ranges. Returns list of error messages."""
    errors = []
    if not 0 <= params.current_age < END_AGE:
        errors.append(f"current age {params.current_age} is out of range (0-{END_AGE - 1})")
    if params.kids_count < 0:
        errors.append(f"kids count {params.kids_count} must not be negative")
    for key in _NON_NEGATIVE_FIELDS:
        value = getattr(params, key)
        if value < 0:
            errors.append(f"{key} {value:,.0f} must not be negative")
    return errors


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
    argv: list[str] | None = None,
) -> tuple[dict, ProjectionParams, argparse.Namespace]:
    """Parse CLI args, load config, resolve and validate values.

    Returns (resolved_dict, params, namespace).
    namespace: raw argparse.Namespace (for extra CLI args added via add_args_fn).
    Invalid input exits with status 1.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    r = resolve(args, config)
    if r["lang"] not in LANGUAGES:
        parser.error(f"unsupported lang: {r['lang']!r} (choose from {', '.join(sorted(LANGUAGES))})")
    try:
        params = build_params(r)
    except ValueError as e:
        parser.error(str(e))
    errors = validate_params(params)
    if errors:
        for msg in errors:
            print(f"  {msg}", file=sys.stderr)
        raise SystemExit(1)
    return r, params, args
