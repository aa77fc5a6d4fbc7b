"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from retire_sim.charts import plot_projection
from retire_sim.config import parse_args
from retire_sim.projection import calculate_retirement


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output filename suffix (e.g. a → projection-a.png)",
    )


def main():
    r, params, args = parse_args("Retirement projection chart", _add_chart_args)

    print(f"Projecting from age {params.current_age}...", file=sys.stderr)
    result = calculate_retirement(params)
    if not result.data:
        print("  no yearly data (age at or beyond the projection horizon)", file=sys.stderr)
        raise SystemExit(1)

    path = plot_projection(result, args.output, name=args.name, lang=r["lang"])
    print(f"  → {path}", file=sys.stderr)
    print("done", file=sys.stderr)


if __name__ == "__main__":
    main()
