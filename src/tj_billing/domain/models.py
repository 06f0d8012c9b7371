"""Domain models for tj_billing: pure dataclasses, no business logic.

Prices are whole rupiah (int); percent magnitudes may be fractional.
"""

from dataclasses import dataclass
from datetime import datetime

from src.tj_common.enums import DiscountKind, DiscountRejection


@dataclass(frozen=True)
class Discount:
    kind: DiscountKind
    magnitude: float
    is_active: bool = True
    max_uses: int | None = None     # None or 0: uncapped
    used_count: int = 0
    expires_at: datetime | None = None
    code: str | None = None


@dataclass(frozen=True)
class DiscountResult:
    discount_amount: int
    final_amount: int


@dataclass(frozen=True)
class PriceQuote:
    amount_original: int
    discount_amount: int
    amount_final: int
    coupon_applied: bool
    rejection: DiscountRejection | None = None


@dataclass(frozen=True)
class Subscription:
    plan_name: str
    expires_at: datetime
    is_active: bool = True
