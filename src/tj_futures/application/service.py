"""Futures application service: maps schemas onto the pure engine.

Stateless: every call is independent and needs no session.
"""

from src.tj_common.enums import BalanceEntryType
from src.tj_futures.application.schemas import (
    BalanceAdjustmentRequest,
    BalanceResponse,
    CalendarDayOut,
    CurrentBalanceRequest,
    EquityPointOut,
    EvaluatePositionRequest,
    PositionSizeRequest,
    PositionSizeResponse,
    StatsRequest,
    StatsResponse,
    TradeResultResponse,
    TradingStatsOut,
)
from src.tj_futures.domain.analytics import compute_trading_stats, daily_pnl
from src.tj_futures.domain.balance import (
    apply_balance_adjustment,
    current_balance,
    equity_curve,
)
from src.tj_futures.domain.calculations import (
    calculate_margin_required,
    calculate_position_size,
    evaluate_position,
)


def evaluate(req: EvaluatePositionRequest) -> TradeResultResponse:
    return TradeResultResponse.from_domain(evaluate_position(req.to_domain()))


def size_position(req: PositionSizeRequest) -> PositionSizeResponse:
    size = calculate_position_size(req.risk_amount, req.stop_loss_percent)
    return PositionSizeResponse(
        position_size=size,
        margin_required=calculate_margin_required(size, req.leverage),
    )


def journal_stats(req: StatsRequest) -> StatsResponse:
    trades = [t.to_domain() for t in req.trades]
    return StatsResponse(
        stats=TradingStatsOut.from_domain(compute_trading_stats(trades)),
        calendar=[CalendarDayOut.from_domain(d) for d in daily_pnl(trades)],
        equity_curve=[
            EquityPointOut.from_domain(p) for p in equity_curve(req.initial_balance, trades)
        ],
    )


def adjust_balance(req: BalanceAdjustmentRequest) -> BalanceResponse:
    return BalanceResponse(
        balance=apply_balance_adjustment(
            req.current_balance, BalanceEntryType(req.entry_type), req.amount
        )
    )


def get_current_balance(req: CurrentBalanceRequest) -> BalanceResponse:
    return BalanceResponse(
        balance=current_balance(
            [e.to_domain() for e in req.history],
            [t.to_domain() for t in req.trades],
        )
    )
