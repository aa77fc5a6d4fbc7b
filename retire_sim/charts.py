"""Chart generation for projection results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from retire_sim.formatting import currency_for, format_axis_tick, theme_color
from retire_sim.projection import ProjectionResult

CHART_LABELS = {
    "zh": {
        "savings": "储蓄",
        "target": "退休目标",
        "age": "年龄",
        "retire": "{age}岁退休",
        "title": "储蓄与退休目标",
    },
    "en": {
        "savings": "Savings",
        "target": "Target",
        "age": "Age",
        "retire": "Retire at {age}",
        "title": "Savings vs retirement target",
    },
}


def _setup_cjk_font():
    """Configure matplotlib to use a font with Chinese glyphs."""
    system = platform.system()
    if system == "Darwin":
        font_family = "PingFang SC"
    elif system == "Linux":
        font_family = "Noto Sans CJK SC"
    else:
        font_family = "sans-serif"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def plot_projection(
    result: ProjectionResult, output_path: Path, name: str = "", lang: str = "zh",
) -> Path:
    """Generate a savings-vs-target line chart for one projection.

    Args:
        result: calculate_retirement() return value.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "a" → "projection-a.png").
        lang: label language, also selects the tick abbreviation style.

    Returns:
        Path to the generated PNG file.
    """
    if not result.data:
        raise ValueError("No yearly data to plot")

    labels = CHART_LABELS.get(lang, CHART_LABELS["zh"])
    currency, _ = currency_for(lang)
    if lang == "zh":
        _setup_cjk_font()

    color = theme_color(result.theme)
    ages = [y.age for y in result.data]
    savings = [y.savings for y in result.data]
    targets = [y.target for y in result.data]

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(ages, savings, color=color, linewidth=2, label=labels["savings"])
    ax.fill_between(ages, savings, 0, color=color, alpha=0.15)
    ax.plot(ages, targets, color="#94a3b8", linewidth=1.5, linestyle="--", label=labels["target"])

    if result.achievable:
        ax.axvline(result.retirement_age, color=color, linewidth=1, linestyle=":")
        ax.annotate(
            labels["retire"].format(age=result.retirement_age),
            xy=(result.retirement_age, ax.get_ylim()[1] * 0.9),
            fontsize=11, color=color, ha="left",
            bbox=dict(boxstyle="round,pad=0.3", fc="white", ec=color, alpha=0.9),
        )

    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: format_axis_tick(x, currency))
    )
    ax.set_xlabel(labels["age"])
    ax.set_title(labels["title"])
    ax.legend(loc="upper left")
    ax.grid(True, axis="y", alpha=0.2, linestyle="--")

    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"projection{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath
