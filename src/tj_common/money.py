"""Currency boundary helpers.

All journal math runs in canonical USD and is unit-less. IDR only appears
at the edges: amounts typed in IDR are converted to USD before they reach
an engine, and results are converted back for display. The rate is an
explicit, versioned value object passed in by the caller; nothing here
caches or refreshes it.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from config.settings import settings
from src.tj_common.datetime_utils import utc_now
from src.tj_common.enums import Currency

RATE_MAX_AGE = timedelta(hours=12)


@dataclass(frozen=True)
class ExchangeRate:
    """1 unit of USD expressed in IDR, as observed at `as_of`."""

    rate: float
    as_of: datetime
    version: int = 1

    def __post_init__(self) -> None:
        if not (self.rate > 0 and math.isfinite(self.rate)):
            raise ValueError(f"Exchange rate must be a positive finite number, got {self.rate}")

    def is_stale(self, now: datetime, max_age: timedelta = RATE_MAX_AGE) -> bool:
        return now - self.as_of >= max_age


def default_exchange_rate() -> ExchangeRate:
    """Fallback rate used when no fresh quote is available (version 0)."""
    return ExchangeRate(rate=settings.DEFAULT_USD_TO_IDR, as_of=utc_now(), version=0)


def to_canonical_units(amount: float, currency: Currency, rate: ExchangeRate) -> float:
    """Convert an amount entered in `currency` into canonical USD."""
    if currency == Currency.IDR:
        return amount / rate.rate
    return amount


def from_canonical_units(amount_usd: float, currency: Currency, rate: ExchangeRate) -> float:
    if currency == Currency.IDR:
        return amount_usd * rate.rate
    return amount_usd


def format_number(num: float, decimals: int = 2) -> str:
    """12345.678 -> '12,345.68'. NaN renders as '0'."""
    if math.isnan(num):
        return "0"
    return f"{num:,.{decimals}f}"


def format_currency(num: float, decimals: int = 2) -> str:
    """USD display: 1200 -> '$1,200.00', -12 -> '-$12.00'."""
    formatted = format_number(abs(num), decimals)
    return f"${formatted}" if num >= 0 else f"-${formatted}"


def format_percent(num: float, decimals: int = 2) -> str:
    """1.5 -> '+1.50%', -3 -> '-3.00%'."""
    formatted = format_number(num, decimals)
    return f"+{formatted}%" if num >= 0 else f"{formatted}%"


def format_idr(amount_idr: float) -> str:
    """Rupiah display uses dot grouping and no decimals: 1580000 -> 'Rp 1.580.000'."""
    grouped = f"{round(abs(amount_idr)):,}".replace(",", ".")
    return f"Rp {grouped}" if amount_idr >= 0 else f"-Rp {grouped}"


def format_amount(amount_usd: float, currency: Currency, rate: ExchangeRate) -> str:
    """Render a canonical USD amount in the user's display currency."""
    if currency == Currency.IDR:
        return format_idr(from_canonical_units(amount_usd, currency, rate))
    return format_currency(amount_usd)
