"""
Locale Formatter

Renders amounts with CLDR locale data (via Babel), always using the
registry's decimal places for the currency. Unknown locales fall back to
a plain "{symbol}{amount}" rendering instead of raising. NaN and infinite
amounts are rejected with ValueError.
"""

import logging
import math
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.numbers import parse_pattern

from fxrisk.models import Currency, CurrencyAmount
from fxrisk.registry import (
    UnsupportedCurrencyError,
    get_currency_info,
)

logger = logging.getLogger(__name__)


def parse_locale(locale: str) -> Locale:
    """Accept both BCP 47 ("en-US") and POSIX ("en_US") identifiers."""
    return Locale.parse(locale.strip().replace("-", "_"))


class LocaleFormatter:

    def format(self, amount: float, currency: str, locale: str | None = None) -> str:
        if not math.isfinite(amount):
            raise ValueError(f"Cannot format non-finite amount {amount!r}")

        try:
            info = get_currency_info(currency)
        except UnsupportedCurrencyError:
            return f"{amount:.2f} {currency}"

        format_locale = locale or info.locale
        try:
            return self._format_cldr(amount, info, format_locale)
        except (UnknownLocaleError, ValueError, TypeError, KeyError) as e:
            logger.debug(f"Locale {format_locale!r} unavailable ({e}), using symbol format")
            return self._format_fallback(amount, info)

    def format_amount(self, amount: CurrencyAmount, locale: str | None = None) -> str:
        return self.format(amount.amount, amount.currency, locale)

    def format_with_conversion(
        self,
        amount: CurrencyAmount,
        target_currency: str,
        locale: str | None = None,
    ) -> str:
        """
        "original (converted)" when the currencies differ, else "original".

        Example: "€100.00 ($108.70)"
        """
        original = self.format(amount.amount, amount.currency, locale)

        if (
            amount.converted_amount is not None
            and amount.currency.upper() != target_currency.strip().upper()
        ):
            converted = self.format(amount.converted_amount, target_currency.strip().upper(), locale)
            return f"{original} ({converted})"

        return original

    @staticmethod
    def _format_cldr(amount: float, info: Currency, locale: str) -> str:
        babel_locale = parse_locale(locale)
        pattern = parse_pattern(babel_locale.currency_formats["standard"].pattern)
        pattern.frac_prec = (info.decimal_places, info.decimal_places)
        return pattern.apply(
            Decimal(str(amount)),
            babel_locale,
            currency=info.code,
            currency_digits=False,
        )

    @staticmethod
    def _format_fallback(amount: float, info: Currency) -> str:
        return f"{info.symbol}{amount:.{info.decimal_places}f}"
