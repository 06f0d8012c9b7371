"""Futures account balance: manual adjustments plus realized trade P&L."""

from collections.abc import Iterable, Sequence

from src.tj_common.datetime_utils import as_utc
from src.tj_common.enums import BalanceEntryType
from src.tj_common.errors import InvalidBalanceAdjustmentError
from src.tj_futures.domain.analytics import daily_pnl
from src.tj_futures.domain.models import BalanceEntry, EquityPoint, JournalTrade


def apply_balance_adjustment(
    current_balance: float, entry_type: BalanceEntryType, amount: float
) -> float:
    """Return balance_after for a manual entry.

    INITIAL overwrites the balance; DEPOSIT/WITHDRAW move it. Withdrawals
    are not clamped at zero.
    """
    if entry_type == BalanceEntryType.INITIAL:
        return amount
    if entry_type == BalanceEntryType.DEPOSIT:
        return current_balance + amount
    if entry_type == BalanceEntryType.WITHDRAW:
        return current_balance - amount
    raise InvalidBalanceAdjustmentError(entry_type.value)


def current_balance(history: Sequence[BalanceEntry], trades: Iterable[JournalTrade]) -> float:
    """Latest manual balance_after plus all realized net P&L.

    Without any manual entry this is just total P&L.
    """
    base = max(history, key=lambda e: as_utc(e.entry_date)).balance_after if history else 0.0
    return base + sum(t.net_pnl for t in trades)


def equity_curve(initial_balance: float, trades: Iterable[JournalTrade]) -> list[EquityPoint]:
    points: list[EquityPoint] = []
    running = initial_balance
    for day in daily_pnl(trades):
        running += day.pnl
        points.append(EquityPoint(day=day.day, balance=running))
    return points
