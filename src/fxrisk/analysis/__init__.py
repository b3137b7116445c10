"""
FXRISK Exposure & Risk Analysis
"""

from fxrisk.analysis.exposure import ExposureCalculator
from fxrisk.analysis.risk import RiskCalculator, RiskPolicy
from fxrisk.analysis.recommendations import RecommendationEngine
from fxrisk.analysis.engine import CurrencyRiskAnalyzer

__all__ = [
    "ExposureCalculator",
    "RiskCalculator",
    "RiskPolicy",
    "RecommendationEngine",
    "CurrencyRiskAnalyzer",
]
