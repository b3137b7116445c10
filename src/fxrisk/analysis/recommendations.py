"""
Advisory output: recommendations, hedging opportunities, volatility

Rule-based and deterministic. Hedging and volatility entries are
descriptive guidance, not transactions or market measurements.
"""

from fxrisk.analysis.risk import RiskPolicy, base_risk
from fxrisk.models import (
    CurrencyExposure,
    CurrencyVolatility,
    HedgingOption,
    RiskLevel,
    VolatilityTrend,
)

HEDGING_INSTRUMENTS = [
    "Currency Forward Contracts",
    "Currency Options",
    "Currency ETFs",
    "Multi-Currency Bonds",
]


class RecommendationEngine:

    # Annualized volatility (%) cutoffs for the volatility level
    VOL_LOW_THRESHOLD = 9.0
    VOL_HIGH_THRESHOLD = 14.0

    def __init__(self, policy: RiskPolicy | None = None):
        self.policy = policy or RiskPolicy()

    def recommendations(
        self,
        exposures: list[CurrencyExposure],
        reporting_currency: str,
    ) -> list[str]:
        if not exposures:
            return ["No currency exposure to analyze."]

        recommendations: list[str] = []

        top = exposures[0]
        if top.percentage >= self.policy.high_concentration_pct:
            recommendations.append(
                f"Portfolio is {top.percentage:.1f}% {top.currency}. Consider reducing "
                f"{top.currency} exposure by diversifying into other currencies."
            )

        if len(exposures) < self.policy.min_currencies:
            recommendations.append(
                "Consider diversifying across more currencies to reduce concentration risk."
            )

        flagged = [
            e.currency for e in exposures
            if e.risk_level == RiskLevel.HIGH
            and e.percentage > self.policy.flag_pct
            and e.currency != reporting_currency
        ]
        if flagged:
            recommendations.append(
                "Consider hedging or reducing exposure to high-risk currencies: "
                f"{', '.join(flagged)}."
            )

        if not recommendations:
            recommendations.append("Currency exposure is well diversified.")

        return recommendations

    def hedging_opportunities(
        self,
        exposures: list[CurrencyExposure],
        reporting_currency: str,
    ) -> list[HedgingOption]:
        """Hedge part of every significant foreign-currency exposure."""
        options = []
        for exposure in exposures:
            if exposure.currency == reporting_currency:
                continue
            if exposure.percentage <= self.policy.hedge_threshold_pct:
                continue
            value = abs(exposure.total_value.converted_amount or exposure.total_value.amount)
            options.append(HedgingOption(
                currency=exposure.currency,
                current_exposure=value,
                recommended_hedge=value * self.policy.hedge_ratio,
                hedging_instruments=list(HEDGING_INSTRUMENTS),
            ))
        return options

    def volatility_metrics(self, exposures: list[CurrencyExposure]) -> list[CurrencyVolatility]:
        """Reference volatility profile per currency, derived from its base risk."""
        metrics = []
        for exposure in exposures:
            annual = base_risk(exposure.currency) * 0.5 + 3.0
            if annual < self.VOL_LOW_THRESHOLD:
                level = RiskLevel.LOW
            elif annual < self.VOL_HIGH_THRESHOLD:
                level = RiskLevel.MEDIUM
            else:
                level = RiskLevel.HIGH
            metrics.append(CurrencyVolatility(
                currency=exposure.currency,
                volatility_30d=annual * 0.8,
                volatility_90d=annual * 0.9,
                volatility_1y=annual,
                trend=VolatilityTrend.STABLE,
                level=level,
            ))
        return metrics
