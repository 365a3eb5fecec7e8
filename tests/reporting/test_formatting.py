from decimal import Decimal

from src.reporting.formatting import format_currency, format_percent


class TestFormatCurrency:
    def test_whole_dollars(self):
        assert format_currency(Decimal("1348.99")) == "$1,349"

    def test_half_rounds_up(self):
        assert format_currency(Decimal("1234.5")) == "$1,235"

    def test_negative(self):
        assert format_currency(Decimal("-88000")) == "-$88,000"

    def test_small_negative_rounds_to_zero(self):
        assert format_currency(Decimal("-0.4")) == "$0"

    def test_nan(self):
        assert format_currency(Decimal("NaN")) == "N/A"


class TestFormatPercent:
    def test_two_decimals(self):
        assert format_percent(Decimal("10.2")) == "10.20%"

    def test_rounding(self):
        assert format_percent(Decimal("12.345")) == "12.35%"

    def test_custom_decimals(self):
        assert format_percent(Decimal("7.25"), decimals=1) == "7.3%"

    def test_nan(self):
        assert format_percent(Decimal("NaN")) == "N/A"

    def test_infinity(self):
        assert format_percent(Decimal("Infinity")) == "N/A"
        assert format_currency(Decimal("-Infinity")) == "N/A"
