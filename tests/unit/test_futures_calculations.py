"""Tests for tj_futures.domain.calculations: futures P&L engine."""

import pytest

from src.tj_common.enums import Direction, TradeOutcome
from src.tj_futures.domain.calculations import (
    calculate_fee_amount,
    calculate_margin_required,
    calculate_pnl,
    calculate_pnl_percent,
    calculate_position_size,
    calculate_rrr,
    determine_result,
    evaluate_position,
)
from src.tj_futures.domain.models import Position


class TestCalculatePnl:
    def test_long_profit(self) -> None:
        # +10% move x 1000 notional x 10x
        assert calculate_pnl(Direction.LONG, 100, 110, 1000, 10) == pytest.approx(1000)

    def test_short_profit(self) -> None:
        assert calculate_pnl(Direction.SHORT, 100, 90, 1000, 1) == pytest.approx(100)

    def test_long_loss(self) -> None:
        assert calculate_pnl(Direction.LONG, 50000, 49000, 2000, 5) == pytest.approx(-200)

    @pytest.mark.parametrize(
        "entry,exit_,size,lev",
        [(100, 110, 1000, 10), (50000, 42000, 250, 20), (0.5, 0.73, 3, 1), (3, 3, 10, 2)],
    )
    def test_long_short_symmetry(self, entry, exit_, size, lev) -> None:
        long_pnl = calculate_pnl(Direction.LONG, entry, exit_, size, lev)
        short_pnl = calculate_pnl(Direction.SHORT, entry, exit_, size, lev)
        assert long_pnl == -short_pnl

    def test_zero_entry_returns_zero(self) -> None:
        assert calculate_pnl(Direction.LONG, 0, 100, 1000, 10) == 0.0

    def test_zero_leverage_is_zero(self) -> None:
        assert calculate_pnl(Direction.LONG, 100, 120, 1000, 0) == 0.0


class TestCalculatePnlPercent:
    def test_independent_of_size(self) -> None:
        # ROE: 2% move x 10x = 20%
        assert calculate_pnl_percent(Direction.LONG, 100, 102, 10) == pytest.approx(20)

    def test_short(self) -> None:
        assert calculate_pnl_percent(Direction.SHORT, 100, 105, 3) == pytest.approx(-15)

    def test_zero_entry_returns_zero(self) -> None:
        assert calculate_pnl_percent(Direction.SHORT, 0, 5, 3) == 0.0


class TestCalculateFeeAmount:
    def test_both_legs_charged(self) -> None:
        # 1000 x 0.05% x 2
        assert calculate_fee_amount(1000, 0.05) == pytest.approx(1.0)

    def test_matches_formula(self) -> None:
        for size, fee in [(1234.5, 0.04), (10, 0.1), (99999, 0.075)]:
            assert calculate_fee_amount(size, fee) == pytest.approx(size * fee / 100 * 2)

    def test_zero_fee(self) -> None:
        assert calculate_fee_amount(1000, 0) == 0


class TestCalculateRrr:
    def test_long_two_to_one(self) -> None:
        assert calculate_rrr(Direction.LONG, 50000, 49000, 52000) == 2.0

    def test_short(self) -> None:
        # risk 100, reward 300
        assert calculate_rrr(Direction.SHORT, 1000, 1100, 700) == 3.0

    @pytest.mark.parametrize("direction", [Direction.LONG, Direction.SHORT])
    def test_missing_stop_loss(self, direction) -> None:
        assert calculate_rrr(direction, 100, None, 120) is None

    @pytest.mark.parametrize("direction", [Direction.LONG, Direction.SHORT])
    def test_missing_take_profit(self, direction) -> None:
        assert calculate_rrr(direction, 100, 90, None) is None

    def test_zero_risk(self) -> None:
        assert calculate_rrr(Direction.LONG, 100, 100, 120) is None

    def test_wrong_side_target_still_positive(self) -> None:
        # LONG with TP below entry: absolute distances, no side validation
        assert calculate_rrr(Direction.LONG, 100, 90, 80) == 2.0


class TestDetermineResult:
    def test_epsilon_boundaries(self) -> None:
        assert determine_result(0.01) == TradeOutcome.BE
        assert determine_result(-0.01) == TradeOutcome.BE
        assert determine_result(0.011) == TradeOutcome.WIN
        assert determine_result(-0.011) == TradeOutcome.LOSS

    def test_zero(self) -> None:
        assert determine_result(0) == TradeOutcome.BE

    def test_large(self) -> None:
        assert determine_result(500) == TradeOutcome.WIN
        assert determine_result(-500) == TradeOutcome.LOSS


class TestCalculatePositionSize:
    def test_basic(self) -> None:
        # risk $100 with 2% stop → $5000 notional
        assert calculate_position_size(100, 2) == pytest.approx(5000)

    def test_zero_stop(self) -> None:
        assert calculate_position_size(100, 0) == 0

    def test_negative_stop(self) -> None:
        assert calculate_position_size(100, -1) == 0


class TestCalculateMarginRequired:
    def test_divides_by_leverage(self) -> None:
        assert calculate_margin_required(5000, 10) == pytest.approx(500)

    def test_unleveraged(self) -> None:
        assert calculate_margin_required(5000, 1) == 5000

    def test_non_positive_leverage(self) -> None:
        assert calculate_margin_required(5000, 0) == 0


class TestEvaluatePosition:
    def test_full_record(self) -> None:
        pos = Position(
            direction=Direction.LONG,
            entry_price=50000,
            exit_price=52000,
            position_size=1000,
            leverage=10,
            fee_percent=0.05,
            stop_loss=49000,
            take_profit=52000,
        )
        r = evaluate_position(pos)
        assert r.pnl == pytest.approx(400)
        assert r.fee_amount == pytest.approx(1.0)
        assert r.net_pnl == pytest.approx(399)
        assert r.pnl_percent == pytest.approx(40)
        assert r.rrr == 2.0
        assert r.result == TradeOutcome.WIN

    def test_fees_turn_flat_trade_into_loss(self) -> None:
        pos = Position(Direction.SHORT, 100, 100, 1000, leverage=5, fee_percent=0.05)
        r = evaluate_position(pos)
        assert r.pnl == 0
        assert r.net_pnl == pytest.approx(-1.0)
        assert r.result == TradeOutcome.LOSS
        assert r.rrr is None
