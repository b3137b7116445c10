"""
Locale Formatter Tests
"""

import pytest

from fxrisk.formatting import LocaleFormatter, parse_locale
from fxrisk.models import CurrencyAmount


class TestLocaleFormatter:
    """CLDR rendering with registry decimal places."""

    def setup_method(self):
        self.formatter = LocaleFormatter()

    def test_usd_en_us(self):
        assert self.formatter.format(1234.56, "USD", "en-US") == "$1,234.56"

    def test_negative_amount(self):
        assert self.formatter.format(-1234.56, "USD", "en_US") == "-$1,234.56"

    def test_jpy_has_no_fraction(self):
        result = self.formatter.format(1234, "JPY", "ja-JP")
        assert "." not in result
        assert "1,234" in result

    def test_eur_de_de(self):
        result = self.formatter.format(1234.56, "EUR", "de-DE")
        assert "1.234,56" in result
        assert "€" in result

    def test_registry_decimals_override_locale(self):
        result = self.formatter.format(1.5, "KWD", "en_US")
        assert result.endswith("1.500")

    def test_default_locale_from_registry(self):
        assert self.formatter.format(10, "USD") == "$10.00"

    def test_unknown_locale_falls_back(self):
        assert self.formatter.format(100, "USD", "zz-ZZ") == "$100.00"

    def test_unknown_locale_keeps_currency_decimals(self):
        assert self.formatter.format(100, "JPY", "zz-ZZ") == "¥100"

    def test_unsupported_currency(self):
        assert self.formatter.format(1.5, "XYZ") == "1.50 XYZ"

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValueError):
            self.formatter.format(amount, "USD", "en_US")

    def test_parse_locale_accepts_both_separators(self):
        assert str(parse_locale("en-GB")) == "en_GB"
        assert str(parse_locale("en_GB")) == "en_GB"


class TestFormatWithConversion:

    def setup_method(self):
        self.formatter = LocaleFormatter()

    def test_shows_both_amounts(self):
        amount = CurrencyAmount(
            amount=100, currency="EUR", converted_amount=108.0, exchange_rate=1.08
        )
        assert self.formatter.format_with_conversion(amount, "USD", "en_US") == "€100.00 ($108.00)"

    def test_same_currency_shows_original_only(self):
        amount = CurrencyAmount(
            amount=100, currency="USD", converted_amount=100.0, exchange_rate=1.0
        )
        assert self.formatter.format_with_conversion(amount, "usd", "en_US") == "$100.00"

    def test_without_conversion(self):
        amount = CurrencyAmount(amount=100, currency="EUR")
        assert self.formatter.format_with_conversion(amount, "USD", "en_US") == "€100.00"

    def test_format_amount(self):
        amount = CurrencyAmount(amount=5, currency="GBP")
        assert self.formatter.format_amount(amount, "en_GB") == "£5.00"
