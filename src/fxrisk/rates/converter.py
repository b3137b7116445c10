"""
Currency Converter

converted_amount = amount * rate, with no rounding; display rounding
belongs to the formatter. Negative and zero amounts keep their sign.
"""

import logging
import math

from fxrisk.models import ConversionRequest, CurrencyAmount
from fxrisk.rates.fetcher import RateFetcher

logger = logging.getLogger(__name__)


class Converter:

    def __init__(self, fetcher: RateFetcher):
        self.fetcher = fetcher

    async def convert(self, amount: float, from_currency: str, to_currency: str) -> CurrencyAmount:
        """
        Convert an amount between currencies.

        Returns:
            CurrencyAmount holding the original amount and currency, the
            converted amount, the rate used and its source tier.

        Raises:
            ValueError: If amount is NaN or infinite
            UnsupportedCurrencyError: If either code is not supported
        """
        if not math.isfinite(amount):
            raise ValueError(f"Amount must be a finite number, got {amount!r}")

        exchange_rate = await self.fetcher.fetch_live(from_currency, to_currency)
        converted = amount * exchange_rate.rate

        logger.debug(
            f"Currency conversion: {amount} {exchange_rate.from_currency} → "
            f"{converted} {exchange_rate.to_currency} "
            f"(rate: {exchange_rate.rate}, source: {exchange_rate.source.value})"
        )

        return CurrencyAmount(
            amount=amount,
            currency=exchange_rate.from_currency,
            converted_amount=converted,
            exchange_rate=exchange_rate.rate,
            last_updated=exchange_rate.timestamp,
            target_currency=exchange_rate.to_currency,
            source=exchange_rate.source,
        )

    async def convert_batch(
        self,
        requests: list[ConversionRequest | tuple[float, str, str]],
    ) -> list[CurrencyAmount]:
        """Convert each entry independently, preserving input order."""
        results: list[CurrencyAmount] = []
        for request in requests:
            if isinstance(request, ConversionRequest):
                amount, from_c, to_c = request.amount, request.from_currency, request.to_currency
            else:
                amount, from_c, to_c = request
            results.append(await self.convert(amount, from_c, to_c))
        return results
