"""Global enums shared by the calculation engines and the API layer."""

from enum import Enum


class Direction(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class TradeOutcome(str, Enum):
    WIN = "WIN"
    LOSS = "LOSS"
    BE = "BE"


class LedgerSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class BalanceEntryType(str, Enum):
    INITIAL = "INITIAL"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRADE = "TRADE"


class DiscountKind(str, Enum):
    PERCENT = "PERCENT"
    FIXED = "FIXED"


class DiscountRejection(str, Enum):
    """Why a coupon cannot be applied. Checked in declaration order."""
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"
    USAGE_LIMIT_REACHED = "USAGE_LIMIT_REACHED"
    NOT_FOUND = "NOT_FOUND"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    EXPIRED = "EXPIRED"
    FAILED = "FAILED"


class Currency(str, Enum):
    USD = "USD"
    IDR = "IDR"
