"""
Synthetic Exchange Rates

Deterministic approximate rates used when no provider can answer (and
in mock mode). Rates are derived from a static table of units per 1 USD,
so every supported pair has a positive, finite value.
"""

import random
from datetime import date

# Approximate units of currency per 1 USD
REFERENCE_USD_RATES: dict[str, float] = {
    "USD": 1.0, "EUR": 0.92, "GBP": 0.79, "JPY": 150.0, "CHF": 0.88,
    "CAD": 1.36, "AUD": 1.52, "NZD": 1.65,
    "CNY": 7.2, "HKD": 7.8, "TWD": 32.0, "KRW": 1340.0, "SGD": 1.34,
    "INR": 83.5, "THB": 36.0, "IDR": 16000.0, "MYR": 4.7, "PHP": 57.0,
    "VND": 25000.0, "PKR": 278.0, "BDT": 110.0, "LKR": 300.0, "NPR": 133.0,
    "MMK": 2100.0, "KHR": 4100.0, "LAK": 21000.0, "MNT": 3400.0, "FJD": 2.25,
    "NOK": 10.6, "SEK": 10.5, "DKK": 6.87, "ISK": 138.0, "PLN": 4.0,
    "CZK": 23.2, "HUF": 360.0, "RON": 4.58, "BGN": 1.8, "RSD": 108.0,
    "MKD": 56.5, "ALL": 93.0, "BAM": 1.8, "MDL": 17.7, "UAH": 39.0,
    "BYN": 3.27, "RUB": 92.0, "TRY": 32.0, "GEL": 2.7, "AMD": 390.0,
    "AZN": 1.7, "KZT": 450.0, "UZS": 12600.0,
    "ILS": 3.7, "AED": 3.6725, "SAR": 3.75, "QAR": 3.64, "KWD": 0.307,
    "BHD": 0.376, "OMR": 0.385, "JOD": 0.709, "IQD": 1310.0, "IRR": 42000.0,
    "LBP": 89500.0, "EGP": 48.0, "MAD": 10.0, "TND": 3.1,
    "ZAR": 18.7, "NGN": 1500.0, "KES": 130.0, "GHS": 14.5, "ETB": 57.0,
    "TZS": 2600.0, "UGX": 3800.0, "ZMW": 26.0, "BWP": 13.6, "NAD": 18.7,
    "MUR": 46.0, "XOF": 603.0, "XAF": 603.0,
    "MXN": 17.5, "BRL": 5.0, "ARS": 900.0, "CLP": 940.0, "COP": 3900.0,
    "PEN": 3.75, "UYU": 39.0, "BOB": 6.91, "PYG": 7400.0, "VES": 36.5,
    "CRC": 510.0, "DOP": 59.0, "GTQ": 7.8, "JMD": 156.0, "TTD": 6.78,
    "XCD": 2.7,
}

# Used only if a code is somehow missing from the table
_NEUTRAL_RATE = 1.0

# Historical synthetic rates wander within +/- this fraction of the reference
HISTORICAL_VARIATION = 0.05


def synthetic_rate(from_currency: str, to_currency: str) -> float:
    """Cross rate via USD: units of to_currency per 1 from_currency."""
    if from_currency == to_currency:
        return 1.0
    from_per_usd = REFERENCE_USD_RATES.get(from_currency, _NEUTRAL_RATE)
    to_per_usd = REFERENCE_USD_RATES.get(to_currency, _NEUTRAL_RATE)
    return to_per_usd / from_per_usd


def synthetic_historical_rate(from_currency: str, to_currency: str, day: date) -> float:
    """
    Reference rate with a per-day variation of up to +/-5%.

    Seeded by pair and date, so the same day always yields the same rate.
    """
    base = synthetic_rate(from_currency, to_currency)
    if from_currency == to_currency:
        return base
    rng = random.Random(f"{from_currency}{to_currency}{day.isoformat()}")
    variation = (rng.random() - 0.5) * 2 * HISTORICAL_VARIATION
    return base * (1 + variation)
