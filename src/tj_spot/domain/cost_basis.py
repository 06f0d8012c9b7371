"""Spot cost-basis engine (DCA ledger reduction).

Average cost comes from BUY legs only. SELL legs reduce quantity but
never revise the average or the total cost, so a fully exited asset
still reports the cost of its original buys. This is average-cost
accounting, not FIFO/LIFO lot matching.
"""

from collections.abc import Iterable, Mapping

from src.tj_common.enums import LedgerSide
from src.tj_common.errors import UnknownLedgerSideError
from src.tj_spot.domain.models import (
    CostBasisSummary,
    Holding,
    LedgerEntry,
    PortfolioValuation,
    SpotTransaction,
    ValuedHolding,
)


def calculate_average_price(entries: Iterable[LedgerEntry]) -> CostBasisSummary:
    """Reduce a ledger to avg price, net quantity and cost basis.

    Plain sums, so the result does not depend on entry order.
    """
    total_bought = 0.0
    total_cost = 0.0
    total_sold = 0.0

    for e in entries:
        if e.side == LedgerSide.BUY:
            total_bought += e.quantity
            total_cost += e.quantity * e.price
        elif e.side == LedgerSide.SELL:
            total_sold += e.quantity
        else:
            raise UnknownLedgerSideError(str(e.side))

    return CostBasisSummary(
        avg_price=total_cost / total_bought if total_bought > 0 else 0.0,
        total_quantity=total_bought - total_sold,
        total_cost=total_cost,
    )


def summarize_holdings(transactions: Iterable[SpotTransaction]) -> list[Holding]:
    """Group by symbol and reduce each ledger; fully exited symbols are dropped."""
    grouped: dict[str, list[SpotTransaction]] = {}
    names: dict[str, str] = {}
    for tx in transactions:
        grouped.setdefault(tx.symbol, []).append(tx)
        if tx.symbol not in names and tx.name:
            names[tx.symbol] = tx.name

    holdings: list[Holding] = []
    for symbol, txs in grouped.items():
        summary = calculate_average_price(tx.entry for tx in txs)
        if summary.total_quantity <= 0:
            continue
        holdings.append(
            Holding(
                symbol=symbol,
                name=names.get(symbol, symbol),
                total_quantity=summary.total_quantity,
                avg_buy_price=summary.avg_price,
                total_cost=summary.total_cost,
                transactions=txs,
            )
        )
    return holdings


def value_holdings(
    holdings: Iterable[Holding], prices: Mapping[str, float]
) -> PortfolioValuation:
    """Mark holdings to market.

    A missing or zero quote falls back to the average buy price, so the
    holding shows zero unrealized P&L rather than a total loss.
    """
    marked: list[tuple[Holding, float, float]] = []
    for h in holdings:
        current_price = prices.get(h.symbol) or h.avg_buy_price
        marked.append((h, current_price, h.total_quantity * current_price))

    total_value = sum(value for _, _, value in marked)
    total_cost = sum(h.total_cost for h, _, _ in marked)

    valued = []
    for h, current_price, value in marked:
        pnl = value - h.total_cost
        valued.append(
            ValuedHolding(
                symbol=h.symbol,
                name=h.name,
                total_quantity=h.total_quantity,
                avg_buy_price=h.avg_buy_price,
                total_cost=h.total_cost,
                current_price=current_price,
                current_value=value,
                pnl=pnl,
                pnl_percent=pnl / h.total_cost * 100 if h.total_cost > 0 else 0.0,
                allocation=value / total_value * 100 if total_value > 0 else 0.0,
            )
        )

    total_pnl = total_value - total_cost
    return PortfolioValuation(
        holdings=valued,
        total_value=total_value,
        total_cost=total_cost,
        total_pnl=total_pnl,
        total_pnl_percent=total_pnl / total_cost * 100 if total_cost > 0 else 0.0,
    )
