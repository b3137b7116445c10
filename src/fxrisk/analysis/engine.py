"""
Risk Analysis Engine - Orchestrate currency exposure and risk analysis
"""

import logging
from typing import Iterable

from fxrisk.analysis.exposure import ExposureCalculator
from fxrisk.analysis.recommendations import RecommendationEngine
from fxrisk.analysis.risk import RiskCalculator, RiskPolicy
from fxrisk.models import CurrencyExposure, CurrencyRiskAnalysis, ExposureItem
from fxrisk.rates.converter import Converter
from fxrisk.registry import validate_currency_code

logger = logging.getLogger(__name__)


class CurrencyRiskAnalyzer:
    """
    Orchestrates the exposure and risk pipeline.

    ├─ Exposure Calculator (group, convert, percentage, sort)
    ├─ Risk Calculator (per-currency level, 0-100 score)
    └─ Recommendation Engine (advice, hedging, volatility)
    """

    def __init__(
        self,
        converter: Converter,
        policy: RiskPolicy | None = None,
        reporting_currency: str = "USD",
    ):
        self.policy = policy or RiskPolicy()
        self.reporting_currency = validate_currency_code(reporting_currency)
        self.risk = RiskCalculator(self.policy)
        self.exposure = ExposureCalculator(converter, self.risk)
        self.advisor = RecommendationEngine(self.policy)

    async def calculate_exposure(
        self,
        items: Iterable[ExposureItem],
        reporting_currency: str | None = None,
    ) -> list[CurrencyExposure]:
        return await self.exposure.calculate(items, reporting_currency or self.reporting_currency)

    async def analyze(
        self,
        items: Iterable[ExposureItem],
        reporting_currency: str | None = None,
    ) -> CurrencyRiskAnalysis:
        reporting = validate_currency_code(reporting_currency or self.reporting_currency)

        exposures = await self.exposure.calculate(items, reporting)
        risk_score = self.risk.risk_score(exposures, reporting)

        analysis = CurrencyRiskAnalysis(
            reporting_currency=reporting,
            total_exposure=exposures,
            risk_score=risk_score,
            recommendations=self.advisor.recommendations(exposures, reporting),
            hedging_opportunities=self.advisor.hedging_opportunities(exposures, reporting),
            volatility_metrics=self.advisor.volatility_metrics(exposures),
        )

        logger.info(
            f"Currency risk analysis ({reporting}): {len(exposures)} currencies, "
            f"score={risk_score}"
        )
        return analysis
