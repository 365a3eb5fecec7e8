"""Display formatting for engine output. Rounding happens here, never in the engine."""

from decimal import Decimal, ROUND_HALF_UP

NOT_AVAILABLE = "N/A"


def format_currency(amount: Decimal) -> str:
    """Whole US dollars, e.g. "$1,235" or "-$1,235"."""
    if not amount.is_finite():
        return NOT_AVAILABLE
    dollars = amount.quantize(Decimal("1"), ROUND_HALF_UP)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,}"


def format_percent(amount: Decimal, decimals: int = 2) -> str:
    if not amount.is_finite():
        return NOT_AVAILABLE
    places = Decimal(1).scaleb(-decimals)
    return f"{amount.quantize(places, ROUND_HALF_UP)}%"
