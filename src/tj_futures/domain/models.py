"""Domain models for tj_futures: pure dataclasses, no business logic."""

from dataclasses import dataclass
from datetime import date, datetime

from src.tj_common.enums import BalanceEntryType, Direction, TradeOutcome


@dataclass(frozen=True)
class Position:
    """A single leveraged position as typed into the trade form.

    position_size is notional in the quote currency; fee_percent is charged
    per side (entry and exit).
    """

    direction: Direction
    entry_price: float
    exit_price: float
    position_size: float
    leverage: float = 1
    fee_percent: float = 0.0
    stop_loss: float | None = None
    take_profit: float | None = None


@dataclass(frozen=True)
class TradeResult:
    pnl: float               # gross, before fees
    fee_amount: float
    net_pnl: float
    pnl_percent: float       # ROE, independent of size
    rrr: float | None
    result: TradeOutcome


@dataclass(frozen=True)
class JournalTrade:
    """A closed trade as stored in the journal; the input to analytics."""

    trade_date: datetime
    net_pnl: float
    result: TradeOutcome
    rrr: float | None = None
    pair: str | None = None


@dataclass(frozen=True)
class BalanceEntry:
    entry_type: BalanceEntryType
    amount: float
    balance_after: float
    entry_date: datetime
    note: str | None = None


@dataclass(frozen=True)
class TradingStats:
    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    breakevens: int = 0
    win_rate: float = 0.0
    total_pnl: float = 0.0
    avg_rrr: float = 0.0
    profit_factor: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    largest_win: float = 0.0
    largest_loss: float = 0.0
    best_streak: int = 0
    worst_streak: int = 0


@dataclass(frozen=True)
class CalendarDay:
    day: date
    pnl: float
    trades_count: int


@dataclass(frozen=True)
class EquityPoint:
    day: date
    balance: float
