"""Futures P&L engine: closed-form, pure functions.

No function here raises for degenerate input. Ratios guard their
denominators and fall back to 0 or None, which callers read as
"insufficient data", not failure.
"""

from src.tj_common.enums import Direction, TradeOutcome
from src.tj_futures.domain.models import Position, TradeResult

# Fees are charged on both the opening and the closing fill.
FEE_SIDES = 2

# |net P&L| at or below this is breakeven; absorbs float noise.
BREAKEVEN_EPSILON = 0.01


def _percent_move(direction: Direction, entry_price: float, exit_price: float) -> float:
    if entry_price <= 0:
        return 0.0
    if direction == Direction.LONG:
        return (exit_price - entry_price) / entry_price
    return (entry_price - exit_price) / entry_price


def calculate_pnl(
    direction: Direction,
    entry_price: float,
    exit_price: float,
    position_size: float,
    leverage: float,
) -> float:
    """Gross P&L = price move (fraction of entry) x size x leverage.

    Entry price <= 0 yields 0.0 instead of a NaN/inf.
    """
    return _percent_move(direction, entry_price, exit_price) * position_size * leverage


def calculate_pnl_percent(
    direction: Direction,
    entry_price: float,
    exit_price: float,
    leverage: float,
) -> float:
    """ROE in percent: return on margin, so position size does not matter."""
    return _percent_move(direction, entry_price, exit_price) * 100 * leverage


def calculate_fee_amount(position_size: float, fee_percent: float) -> float:
    """Round-trip fee: size x fee% per side x 2 sides."""
    return position_size * (fee_percent / 100) * FEE_SIDES


def calculate_rrr(
    direction: Direction,
    entry_price: float,
    stop_loss: float | None,
    take_profit: float | None,
) -> float | None:
    """Reward distance / risk distance.

    None when SL or TP is missing, or when risk is exactly zero. Distances
    are absolute, so a target on the wrong side of entry still yields a
    positive ratio.
    """
    if stop_loss is None or take_profit is None:
        return None

    if direction == Direction.LONG:
        risk = abs(entry_price - stop_loss)
        reward = abs(take_profit - entry_price)
    else:
        risk = abs(stop_loss - entry_price)
        reward = abs(entry_price - take_profit)

    if risk == 0:
        return None
    return reward / risk


def determine_result(net_pnl: float) -> TradeOutcome:
    if net_pnl > BREAKEVEN_EPSILON:
        return TradeOutcome.WIN
    if net_pnl < -BREAKEVEN_EPSILON:
        return TradeOutcome.LOSS
    return TradeOutcome.BE


def calculate_position_size(risk_amount: float, stop_loss_percent: float) -> float:
    """Notional size that loses exactly risk_amount when the stop is hit.

    Returns 0 for a non-positive stop-loss percent.
    """
    if stop_loss_percent <= 0:
        return 0.0
    return risk_amount / (stop_loss_percent / 100)


def calculate_margin_required(position_size: float, leverage: float) -> float:
    """Collateral needed to open position_size at the given leverage."""
    if leverage <= 0:
        return 0.0
    return position_size / leverage


def evaluate_position(position: Position) -> TradeResult:
    """Compute the full journal record for a closed position."""
    pnl = calculate_pnl(
        position.direction,
        position.entry_price,
        position.exit_price,
        position.position_size,
        position.leverage,
    )
    fee_amount = calculate_fee_amount(position.position_size, position.fee_percent)
    net_pnl = pnl - fee_amount
    return TradeResult(
        pnl=pnl,
        fee_amount=fee_amount,
        net_pnl=net_pnl,
        pnl_percent=calculate_pnl_percent(
            position.direction, position.entry_price, position.exit_price, position.leverage
        ),
        rrr=calculate_rrr(
            position.direction, position.entry_price, position.stop_loss, position.take_profit
        ),
        result=determine_result(net_pnl),
    )
