"""Display currencies and regional reference prices.

Currency never changes a computed figure — it only decides how the
presentation layer prints one.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

CURRENCIES: dict[str, str] = {
    "MYR": "RM",
    "USD": "$",
    "AUD": "A$",
    "CNY": "¥",
}

DEFAULT_CURRENCY = "MYR"


class RegionalPrice(BaseModel):
    """Typical energy prices for one region (local currency)."""

    region: str
    currency: str
    diesel_per_liter: float
    electricity_per_kwh: float


REGIONAL_PRICES: list[RegionalPrice] = [
    RegionalPrice(region="Malaysia", currency="MYR", diesel_per_liter=3.02, electricity_per_kwh=0.55),
    RegionalPrice(region="United States", currency="USD", diesel_per_liter=1.11, electricity_per_kwh=0.15),
    RegionalPrice(region="Australia", currency="AUD", diesel_per_liter=2.00, electricity_per_kwh=0.30),
    RegionalPrice(region="China", currency="CNY", diesel_per_liter=7.60, electricity_per_kwh=0.65),
]


def format_currency(value: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Symbol + thousands separators + two decimals, e.g. ``RM1,234.50``.

    NaN prints as ``N/A``.  Raises ``KeyError`` for a currency outside
    :data:`CURRENCIES`.
    """
    symbol = CURRENCIES[currency]
    if math.isnan(value):
        return "N/A"
    if math.isinf(value):
        return f"{symbol}∞" if value > 0 else f"-{symbol}∞"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
