# src/tj_futures/application/schemas.py
"""Pydantic request/response schemas for the futures journal API.

Range checks that the engine deliberately does not perform (positive
prices, leverage >= 1) are enforced here, at the HTTP boundary.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from config.settings import settings
from src.tj_common.datetime_utils import as_utc
from src.tj_common.enums import BalanceEntryType, Direction, TradeOutcome
from src.tj_futures.domain.models import (
    BalanceEntry,
    CalendarDay,
    EquityPoint,
    JournalTrade,
    Position,
    TradeResult,
    TradingStats,
)

# ---------------------------------------------------------------------------
# Position evaluation
# ---------------------------------------------------------------------------


class EvaluatePositionRequest(BaseModel):
    direction: Direction
    entry_price: float = Field(gt=0)
    exit_price: float = Field(gt=0)
    position_size: float = Field(ge=0)
    leverage: float = Field(default=settings.DEFAULT_LEVERAGE, ge=1)
    fee_percent: float = Field(default=settings.DEFAULT_FEE_PERCENT, ge=0)
    stop_loss: float | None = Field(default=None, gt=0)
    take_profit: float | None = Field(default=None, gt=0)

    def to_domain(self) -> Position:
        return Position(
            direction=self.direction,
            entry_price=self.entry_price,
            exit_price=self.exit_price,
            position_size=self.position_size,
            leverage=self.leverage,
            fee_percent=self.fee_percent,
            stop_loss=self.stop_loss,
            take_profit=self.take_profit,
        )


class TradeResultResponse(BaseModel):
    pnl: float
    fee_amount: float
    net_pnl: float
    pnl_percent: float
    rrr: float | None
    result: TradeOutcome

    @classmethod
    def from_domain(cls, r: TradeResult) -> "TradeResultResponse":
        return cls(
            pnl=r.pnl,
            fee_amount=r.fee_amount,
            net_pnl=r.net_pnl,
            pnl_percent=r.pnl_percent,
            rrr=r.rrr,
            result=r.result,
        )


# ---------------------------------------------------------------------------
# Position sizing
# ---------------------------------------------------------------------------


class PositionSizeRequest(BaseModel):
    risk_amount: float = Field(ge=0)
    stop_loss_percent: float
    leverage: float = Field(default=settings.DEFAULT_LEVERAGE, ge=1)


class PositionSizeResponse(BaseModel):
    position_size: float
    margin_required: float


# ---------------------------------------------------------------------------
# Journal analytics
# ---------------------------------------------------------------------------


class JournalTradeIn(BaseModel):
    trade_date: datetime
    net_pnl: float
    result: TradeOutcome
    rrr: float | None = None
    pair: str | None = None

    @field_validator("trade_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Mixed naive/aware timestamps cannot be ordered; naive means UTC.
        return as_utc(v)

    def to_domain(self) -> JournalTrade:
        return JournalTrade(
            trade_date=self.trade_date,
            net_pnl=self.net_pnl,
            result=self.result,
            rrr=self.rrr,
            pair=self.pair,
        )


class StatsRequest(BaseModel):
    trades: list[JournalTradeIn]
    initial_balance: float = 0.0


class TradingStatsOut(BaseModel):
    total_trades: int
    wins: int
    losses: int
    breakevens: int
    win_rate: float
    total_pnl: float
    avg_rrr: float
    profit_factor: float
    avg_win: float
    avg_loss: float
    largest_win: float
    largest_loss: float
    best_streak: int
    worst_streak: int

    @classmethod
    def from_domain(cls, s: TradingStats) -> "TradingStatsOut":
        return cls(
            total_trades=s.total_trades,
            wins=s.wins,
            losses=s.losses,
            breakevens=s.breakevens,
            win_rate=s.win_rate,
            total_pnl=s.total_pnl,
            avg_rrr=s.avg_rrr,
            profit_factor=s.profit_factor,
            avg_win=s.avg_win,
            avg_loss=s.avg_loss,
            largest_win=s.largest_win,
            largest_loss=s.largest_loss,
            best_streak=s.best_streak,
            worst_streak=s.worst_streak,
        )


class CalendarDayOut(BaseModel):
    day: date
    pnl: float
    trades_count: int

    @classmethod
    def from_domain(cls, d: CalendarDay) -> "CalendarDayOut":
        return cls(day=d.day, pnl=d.pnl, trades_count=d.trades_count)


class EquityPointOut(BaseModel):
    day: date
    balance: float

    @classmethod
    def from_domain(cls, p: EquityPoint) -> "EquityPointOut":
        return cls(day=p.day, balance=p.balance)


class StatsResponse(BaseModel):
    stats: TradingStatsOut
    calendar: list[CalendarDayOut]
    equity_curve: list[EquityPointOut]


# ---------------------------------------------------------------------------
# Balance
# ---------------------------------------------------------------------------


class BalanceAdjustmentRequest(BaseModel):
    current_balance: float
    entry_type: Literal["INITIAL", "DEPOSIT", "WITHDRAW"]
    amount: float = Field(ge=0)


class BalanceEntryIn(BaseModel):
    entry_type: BalanceEntryType
    amount: float
    balance_after: float
    entry_date: datetime
    note: str | None = None

    @field_validator("entry_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_domain(self) -> BalanceEntry:
        return BalanceEntry(
            entry_type=self.entry_type,
            amount=self.amount,
            balance_after=self.balance_after,
            entry_date=self.entry_date,
            note=self.note,
        )


class CurrentBalanceRequest(BaseModel):
    history: list[BalanceEntryIn] = []
    trades: list[JournalTradeIn] = []


class BalanceResponse(BaseModel):
    balance: float
