"""
Risk Calculator - per-currency risk levels and portfolio risk score

Thresholds come from RiskPolicy (built from Settings) and are policy
rather than contract.
"""

from pydantic import BaseModel

from fxrisk.config import Settings
from fxrisk.models import CurrencyExposure, RiskLevel

# Relative FX risk of holding a currency (higher = riskier)
CURRENCY_BASE_RISK: dict[str, float] = {
    "USD": 10,
    "EUR": 15,
    "GBP": 20,
    "JPY": 12,
    "CHF": 8,
    "CAD": 18,
    "AUD": 25,
}
DEFAULT_BASE_RISK = 30.0


def base_risk(currency: str) -> float:
    return CURRENCY_BASE_RISK.get(currency, DEFAULT_BASE_RISK)


class RiskPolicy(BaseModel):
    """Tunable thresholds for exposure and risk analysis."""
    high_concentration_pct: float = 70.0
    concentration_major_pct: float = 50.0
    concentration_minor_pct: float = 30.0
    low_cutoff: float = 20.0
    medium_cutoff: float = 40.0
    min_currencies: int = 3
    flag_pct: float = 20.0
    score_concentration_weight: float = 0.7
    score_foreign_weight: float = 0.3
    score_foreign_penalty: float = 10.0
    hedge_threshold_pct: float = 25.0
    hedge_ratio: float = 0.5

    @classmethod
    def from_settings(cls, settings: Settings) -> "RiskPolicy":
        return cls(
            high_concentration_pct=settings.risk_high_concentration_pct,
            concentration_major_pct=settings.risk_concentration_major_pct,
            concentration_minor_pct=settings.risk_concentration_minor_pct,
            low_cutoff=settings.risk_low_cutoff,
            medium_cutoff=settings.risk_medium_cutoff,
            min_currencies=settings.risk_min_currencies,
            flag_pct=settings.risk_flag_pct,
            score_concentration_weight=settings.risk_score_concentration_weight,
            score_foreign_weight=settings.risk_score_foreign_weight,
            score_foreign_penalty=settings.risk_score_foreign_penalty,
            hedge_threshold_pct=settings.hedge_threshold_pct,
            hedge_ratio=settings.hedge_ratio,
        )


class RiskCalculator:
    """
    Risk level per currency and an overall 0-100 score.

    Level rules (in order):
    1. Share >= high_concentration_pct: HIGH, whatever the currency
    2. base risk (0 for the reporting currency) + concentration add-on
       (+20 above the major share, +10 above the minor share)
    3. total < low_cutoff: LOW, < medium_cutoff: MEDIUM, else HIGH
    """

    def __init__(self, policy: RiskPolicy | None = None):
        self.policy = policy or RiskPolicy()

    def concentration_add(self, percentage: float) -> float:
        if percentage > self.policy.concentration_major_pct:
            return 20.0
        if percentage > self.policy.concentration_minor_pct:
            return 10.0
        return 0.0

    def assess_level(self, currency: str, percentage: float, reporting_currency: str) -> RiskLevel:
        if percentage >= self.policy.high_concentration_pct:
            return RiskLevel.HIGH

        currency_risk = 0.0 if currency == reporting_currency else base_risk(currency)
        total = currency_risk + self.concentration_add(percentage)

        if total < self.policy.low_cutoff:
            return RiskLevel.LOW
        if total < self.policy.medium_cutoff:
            return RiskLevel.MEDIUM
        return RiskLevel.HIGH

    @staticmethod
    def herfindahl(exposures: list[CurrencyExposure]) -> float:
        """Sum of squared shares: 1.0 for one currency, 1/n for an even split."""
        return sum((e.percentage / 100) ** 2 for e in exposures)

    def risk_score(self, exposures: list[CurrencyExposure], reporting_currency: str) -> float:
        """
        Weighted concentration and foreign-currency score, clamped to 0-100.

        score = w_c * HHI * 100 + w_f * min(100, foreign_count * penalty)
        """
        if not exposures:
            return 0.0

        concentration = self.herfindahl(exposures) * 100
        foreign_count = sum(1 for e in exposures if e.currency != reporting_currency)
        foreign = min(100.0, foreign_count * self.policy.score_foreign_penalty)

        score = (
            self.policy.score_concentration_weight * concentration
            + self.policy.score_foreign_weight * foreign
        )
        return round(min(100.0, max(0.0, score)), 1)
