"""Pricing/discount engine: amount charged at order creation."""

import math
from datetime import datetime

from src.tj_billing.domain.models import Discount, DiscountResult, PriceQuote
from src.tj_common.enums import DiscountKind, DiscountRejection
from src.tj_common.money import format_idr


def apply_discount(base_price: int, discount: Discount) -> DiscountResult:
    """Bounded discount: never more than the base price, final never below 0.

    PERCENT floors to whole currency units. Out-of-range magnitudes are
    clamped (percent to [0, 100], fixed to >= 0) rather than rejected.
    """
    if discount.kind == DiscountKind.PERCENT:
        percent = min(max(discount.magnitude, 0), 100)
        discount_amount = math.floor(base_price * percent / 100)
    else:
        discount_amount = min(max(discount.magnitude, 0), base_price)

    discount_amount = int(min(max(discount_amount, 0), max(base_price, 0)))
    return DiscountResult(
        discount_amount=discount_amount,
        final_amount=max(base_price - discount_amount, 0),
    )


def validate_discount(discount: Discount, now: datetime) -> DiscountRejection | None:
    """Return the first failing check, or None when the discount is usable.

    Order: inactive, expired (expiry at or before now), usage cap reached.
    """
    if not discount.is_active:
        return DiscountRejection.INACTIVE
    if discount.expires_at is not None and discount.expires_at <= now:
        return DiscountRejection.EXPIRED
    if discount.max_uses and discount.used_count >= discount.max_uses:
        return DiscountRejection.USAGE_LIMIT_REACHED
    return None


def quote_price(base_price: int, discount: Discount | None, now: datetime) -> PriceQuote:
    """Charge for a new order; an unusable coupon is ignored, not an error."""
    if discount is None:
        return PriceQuote(
            amount_original=base_price,
            discount_amount=0,
            amount_final=base_price,
            coupon_applied=False,
        )

    rejection = validate_discount(discount, now)
    if rejection is not None:
        return PriceQuote(
            amount_original=base_price,
            discount_amount=0,
            amount_final=base_price,
            coupon_applied=False,
            rejection=rejection,
        )

    result = apply_discount(base_price, discount)
    return PriceQuote(
        amount_original=base_price,
        discount_amount=result.discount_amount,
        amount_final=result.final_amount,
        coupon_applied=True,
    )


def discount_display(discount: Discount) -> str:
    """'50%' for percent coupons, 'Rp 25.000' for fixed ones."""
    if discount.kind == DiscountKind.PERCENT:
        return f"{discount.magnitude:g}%"
    return format_idr(discount.magnitude)
