"""Journal analytics over closed futures trades.

Inputs are the stored journal rows (net P&L and classification already
computed by calculations.evaluate_position); nothing is recomputed here.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from src.tj_common.datetime_utils import as_utc
from src.tj_common.enums import TradeOutcome
from src.tj_futures.domain.models import CalendarDay, JournalTrade, TradingStats


def _longest_run(results: list[TradeOutcome], target: TradeOutcome) -> int:
    best = current = 0
    for r in results:
        current = current + 1 if r == target else 0
        best = max(best, current)
    return best


def compute_trading_stats(trades: Iterable[JournalTrade]) -> TradingStats:
    ordered = sorted(trades, key=lambda t: as_utc(t.trade_date))
    if not ordered:
        return TradingStats()

    wins = [t.net_pnl for t in ordered if t.result == TradeOutcome.WIN]
    losses = [t.net_pnl for t in ordered if t.result == TradeOutcome.LOSS]
    breakevens = sum(1 for t in ordered if t.result == TradeOutcome.BE)

    total_win_amount = sum(wins)
    total_loss_amount = abs(sum(losses))

    rrr_values = [t.rrr for t in ordered if t.rrr is not None]
    results = [t.result for t in ordered]

    return TradingStats(
        total_trades=len(ordered),
        wins=len(wins),
        losses=len(losses),
        breakevens=breakevens,
        win_rate=len(wins) / len(ordered) * 100,
        total_pnl=sum(t.net_pnl for t in ordered),
        avg_rrr=sum(rrr_values) / len(rrr_values) if rrr_values else 0.0,
        # No losing trades: report gross winnings rather than infinity
        profit_factor=(
            total_win_amount / total_loss_amount if total_loss_amount > 0 else total_win_amount
        ),
        avg_win=total_win_amount / len(wins) if wins else 0.0,
        avg_loss=sum(losses) / len(losses) if losses else 0.0,
        largest_win=max(wins) if wins else 0.0,
        largest_loss=min(losses) if losses else 0.0,
        best_streak=_longest_run(results, TradeOutcome.WIN),
        worst_streak=_longest_run(results, TradeOutcome.LOSS),
    )


def daily_pnl(trades: Iterable[JournalTrade]) -> list[CalendarDay]:
    """Net P&L per UTC calendar day, ascending. Feeds the calendar heatmap."""
    pnl_by_day: dict[date, float] = defaultdict(float)
    count_by_day: dict[date, int] = defaultdict(int)
    for t in trades:
        day = as_utc(t.trade_date).date()
        pnl_by_day[day] += t.net_pnl
        count_by_day[day] += 1
    return [
        CalendarDay(day=day, pnl=pnl_by_day[day], trades_count=count_by_day[day])
        for day in sorted(pnl_by_day)
    ]
