"""Domain models for tj_spot: pure dataclasses, no business logic."""

from dataclasses import dataclass, field
from datetime import datetime

from src.tj_common.enums import LedgerSide


@dataclass(frozen=True)
class LedgerEntry:
    side: LedgerSide
    quantity: float
    price: float             # unit price in USD
    timestamp: datetime | None = None


@dataclass(frozen=True)
class CostBasisSummary:
    avg_price: float         # BUY legs only
    total_quantity: float    # bought - sold, may be <= 0
    total_cost: float        # BUY legs only, never reduced by sells


@dataclass(frozen=True)
class SpotTransaction:
    """A journal row: one ledger entry tagged with its asset."""

    symbol: str
    entry: LedgerEntry
    name: str | None = None


@dataclass
class Holding:
    symbol: str
    name: str
    total_quantity: float
    avg_buy_price: float
    total_cost: float
    transactions: list[SpotTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class ValuedHolding:
    symbol: str
    name: str
    total_quantity: float
    avg_buy_price: float
    total_cost: float
    current_price: float
    current_value: float
    pnl: float
    pnl_percent: float
    allocation: float


@dataclass(frozen=True)
class PortfolioValuation:
    holdings: list[ValuedHolding]
    total_value: float
    total_cost: float
    total_pnl: float
    total_pnl_percent: float
