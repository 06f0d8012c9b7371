# src/tj_spot/application/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field

from src.tj_common.enums import LedgerSide
from src.tj_spot.domain.models import (
    CostBasisSummary,
    LedgerEntry,
    PortfolioValuation,
    SpotTransaction,
    ValuedHolding,
)


class LedgerEntryIn(BaseModel):
    side: LedgerSide
    quantity: float = Field(gt=0)
    price: float = Field(gt=0)
    timestamp: datetime | None = None

    def to_domain(self) -> LedgerEntry:
        return LedgerEntry(
            side=self.side, quantity=self.quantity, price=self.price, timestamp=self.timestamp
        )


class CostBasisRequest(BaseModel):
    entries: list[LedgerEntryIn]


class CostBasisResponse(BaseModel):
    avg_price: float
    total_quantity: float
    total_cost: float

    @classmethod
    def from_domain(cls, s: CostBasisSummary) -> "CostBasisResponse":
        return cls(avg_price=s.avg_price, total_quantity=s.total_quantity, total_cost=s.total_cost)


class SpotTransactionIn(LedgerEntryIn):
    symbol: str = Field(min_length=1)
    name: str | None = None

    def to_transaction(self) -> SpotTransaction:
        return SpotTransaction(symbol=self.symbol.upper(), entry=self.to_domain(), name=self.name)


class HoldingsRequest(BaseModel):
    transactions: list[SpotTransactionIn]
    # symbol -> last USD quote; missing symbols are marked at avg buy price
    prices: dict[str, float] = {}


class HoldingOut(BaseModel):
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

    @classmethod
    def from_domain(cls, h: ValuedHolding) -> "HoldingOut":
        return cls(
            symbol=h.symbol,
            name=h.name,
            total_quantity=h.total_quantity,
            avg_buy_price=h.avg_buy_price,
            total_cost=h.total_cost,
            current_price=h.current_price,
            current_value=h.current_value,
            pnl=h.pnl,
            pnl_percent=h.pnl_percent,
            allocation=h.allocation,
        )


class PortfolioResponse(BaseModel):
    holdings: list[HoldingOut]
    total_value: float
    total_cost: float
    total_pnl: float
    total_pnl_percent: float

    @classmethod
    def from_domain(cls, p: PortfolioValuation) -> "PortfolioResponse":
        return cls(
            holdings=[HoldingOut.from_domain(h) for h in p.holdings],
            total_value=p.total_value,
            total_cost=p.total_cost,
            total_pnl=p.total_pnl,
            total_pnl_percent=p.total_pnl_percent,
        )
