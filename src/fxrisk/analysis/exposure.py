"""
Exposure Calculator

Groups currency-tagged items, normalizes each group into the reporting
currency and reports per-currency shares.
"""

import logging
from collections import defaultdict
from typing import Iterable

from fxrisk.analysis.risk import RiskCalculator
from fxrisk.models import CurrencyAmount, CurrencyExposure, ExposureItem
from fxrisk.rates.converter import Converter
from fxrisk.registry import validate_currency_code

logger = logging.getLogger(__name__)


class ExposureCalculator:
    """
    Steps:
    1. Group items by currency and sum their current value
    2. Convert each group total into the reporting currency
    3. percentage = |converted| / sum(|converted|) * 100
    4. Sort by percentage descending, currency code ascending on ties

    Zero-valued groups are dropped; a zero total yields no exposures.
    """

    def __init__(self, converter: Converter, risk: RiskCalculator | None = None):
        self.converter = converter
        self.risk = risk or RiskCalculator()

    @staticmethod
    def group_by_currency(items: Iterable[ExposureItem]) -> dict[str, float]:
        totals: dict[str, float] = defaultdict(float)
        for item in items:
            totals[validate_currency_code(item.currency)] += item.current_value
        return dict(totals)

    async def calculate(
        self,
        items: Iterable[ExposureItem],
        reporting_currency: str,
    ) -> list[CurrencyExposure]:
        reporting_currency = validate_currency_code(reporting_currency)
        totals = self.group_by_currency(items)

        converted: dict[str, CurrencyAmount] = {}
        for currency, native_total in totals.items():
            if native_total == 0:
                continue
            converted[currency] = await self.converter.convert(
                native_total, currency, reporting_currency
            )

        grand_total = sum(abs(c.converted_amount) for c in converted.values())
        if grand_total == 0:
            return []

        exposures: list[CurrencyExposure] = []
        for currency, amount in converted.items():
            percentage = min(100.0, abs(amount.converted_amount) / grand_total * 100)
            exposures.append(CurrencyExposure(
                currency=currency,
                total_value=amount,
                percentage=percentage,
                risk_level=self.risk.assess_level(currency, percentage, reporting_currency),
            ))

        exposures.sort(key=lambda e: (-e.percentage, e.currency))

        logger.debug(
            f"Exposure in {reporting_currency}: "
            + ", ".join(f"{e.currency}={e.percentage:.1f}%" for e in exposures)
        )
        return exposures
