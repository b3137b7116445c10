"""
FXRISK - Currency Exchange Rates and Exposure Analysis

Multi-tier exchange-rate service (cache, providers, graceful degradation)
with currency exposure and risk analysis on top.
"""

__version__ = "1.0.0"
