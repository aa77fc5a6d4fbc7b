"""Currency and chart-axis formatting."""

from retire_sim.projection import Theme

# lang -> (currency symbol, locale)
LANGUAGES: dict[str, tuple[str, str]] = {
    "zh": ("¥", "zh-CN"),
    "en": ("$", "en-US"),
}

# (locale, currency code) -> display symbol; a locale shows its own
# currency bare and prefixes foreign ones
_CURRENCY_SYMBOLS = {
    ("zh-CN", "CNY"): "¥",
    ("zh-CN", "USD"): "US$",
    ("en-US", "USD"): "$",
    ("en-US", "CNY"): "CN¥",
}

THEME_COLORS = {
    Theme.PEACE: "#10b981",  # emerald
    Theme.WORRY: "#6366f1",  # indigo
    Theme.PANIC: "#f97316",  # orange
    Theme.VOID: "#ef4444",   # red
}


def currency_for(lang: str) -> tuple[str, str]:
    """Return (currency, locale) for a UI language. Unknown → zh."""
    return LANGUAGES.get(lang, LANGUAGES["zh"])


def currency_code(currency: str) -> str:
    return "CNY" if currency == "¥" else "USD"


def format_currency(amount: float, currency: str = "¥", locale: str = "zh-CN") -> str:
    """Format whole currency units, e.g. -¥1,900,000 or $12,345.

    The locale picks the symbol: en-US shows CNY as CN¥, zh-CN shows USD
    as US$. Unknown locales format like en-US.
    """
    if locale not in ("zh-CN", "en-US"):
        locale = "en-US"
    symbol = _CURRENCY_SYMBOLS[(locale, currency_code(currency))]
    # Half away from zero, as Intl.NumberFormat does
    whole = int(abs(amount) + 0.5)
    sign = "-" if amount < 0 and whole != 0 else ""
    return f"{sign}{symbol}{whole:,}"


def format_axis_tick(value: float, currency: str = "¥") -> str:
    """Abbreviate a raw currency tick: 万/亿 for ¥, k/M otherwise."""
    if currency == "¥":
        if value >= 100_000_000:
            return f"{value / 100_000_000:.1f}亿"
        if value >= 10_000:
            return f"{value / 10_000:.0f}万"
    else:
        if value >= 1_000_000:
            return f"{value / 1_000_000:.1f}M"
        if value >= 1_000:
            return f"{value / 1_000:.0f}k"
    return f"{value:.0f}"


def theme_color(theme: Theme) -> str:
    return THEME_COLORS[theme]
