# src/tj_billing/application/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.tj_billing.domain.models import Discount, PriceQuote
from src.tj_common.datetime_utils import as_utc
from src.tj_common.enums import DiscountKind, DiscountRejection


class DiscountIn(BaseModel):
    kind: DiscountKind
    magnitude: float = Field(ge=0)
    is_active: bool = True
    max_uses: int | None = Field(default=None, ge=0)
    used_count: int = Field(default=0, ge=0)
    expires_at: datetime | None = None
    code: str | None = None

    @field_validator("expires_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None

    def to_domain(self) -> Discount:
        return Discount(
            kind=self.kind,
            magnitude=self.magnitude,
            is_active=self.is_active,
            max_uses=self.max_uses,
            used_count=self.used_count,
            expires_at=self.expires_at,
            code=self.code,
        )


class QuoteRequest(BaseModel):
    base_price: int = Field(ge=0)
    discount: DiscountIn | None = None


class QuoteResponse(BaseModel):
    amount_original: int
    discount_amount: int
    amount_final: int
    coupon_applied: bool
    rejection: DiscountRejection | None

    @classmethod
    def from_domain(cls, q: PriceQuote) -> "QuoteResponse":
        return cls(
            amount_original=q.amount_original,
            discount_amount=q.discount_amount,
            amount_final=q.amount_final,
            coupon_applied=q.coupon_applied,
            rejection=q.rejection,
        )


class VerifyCouponRequest(BaseModel):
    coupon_code: str
    product_price: int = Field(default=0, ge=0)

    @field_validator("coupon_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("coupon_code is required")
        return v


class CouponOut(BaseModel):
    code: str
    kind: DiscountKind
    magnitude: float
    discount_display: str
    calculated_discount: int
    final_amount: int


class VerifyCouponResponse(BaseModel):
    valid: bool
    reason: DiscountRejection | None = None
    coupon: CouponOut | None = None
