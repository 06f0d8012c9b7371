"""Tests for tj_billing.domain.pricing: coupon arithmetic and validity."""

from datetime import UTC, datetime, timedelta

import pytest

from src.tj_billing.domain.models import Discount, DiscountResult
from src.tj_billing.domain.pricing import (
    apply_discount,
    discount_display,
    quote_price,
    validate_discount,
)
from src.tj_common.enums import DiscountKind, DiscountRejection

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)


def _percent(pct: float, **kwargs) -> Discount:
    return Discount(kind=DiscountKind.PERCENT, magnitude=pct, **kwargs)


def _fixed(amount: float, **kwargs) -> Discount:
    return Discount(kind=DiscountKind.FIXED, magnitude=amount, **kwargs)


class TestApplyDiscount:
    def test_half_off(self) -> None:
        assert apply_discount(100000, _percent(50)) == DiscountResult(50000, 50000)

    def test_percent_floors(self) -> None:
        # 99999 x 15% = 14999.85 → 14999
        assert apply_discount(99999, _percent(15)).discount_amount == 14999

    def test_fixed_capped_at_base(self) -> None:
        assert apply_discount(100000, _fixed(150000)) == DiscountResult(100000, 0)

    def test_fixed_within_base(self) -> None:
        assert apply_discount(100000, _fixed(25000)) == DiscountResult(25000, 75000)

    def test_percent_over_100_clamped(self) -> None:
        assert apply_discount(100000, _percent(150)) == DiscountResult(100000, 0)

    @pytest.mark.parametrize("discount", [_percent(-10), _fixed(-5000)])
    def test_negative_magnitude_clamped_to_zero(self, discount) -> None:
        assert apply_discount(100000, discount) == DiscountResult(0, 100000)

    def test_zero_base(self) -> None:
        assert apply_discount(0, _fixed(5000)) == DiscountResult(0, 0)


class TestValidateDiscount:
    def test_valid(self) -> None:
        assert validate_discount(_percent(10), NOW) is None

    def test_inactive(self) -> None:
        assert validate_discount(_percent(10, is_active=False), NOW) == DiscountRejection.INACTIVE

    def test_expiry_equal_to_now_is_expired(self) -> None:
        assert validate_discount(_percent(10, expires_at=NOW), NOW) == DiscountRejection.EXPIRED

    def test_future_expiry_ok(self) -> None:
        d = _percent(10, expires_at=NOW + timedelta(seconds=1))
        assert validate_discount(d, NOW) is None

    def test_usage_cap_reached(self) -> None:
        d = _fixed(1000, max_uses=5, used_count=5)
        assert validate_discount(d, NOW) == DiscountRejection.USAGE_LIMIT_REACHED

    def test_usage_below_cap(self) -> None:
        assert validate_discount(_fixed(1000, max_uses=5, used_count=4), NOW) is None

    def test_zero_cap_means_uncapped(self) -> None:
        assert validate_discount(_fixed(1000, max_uses=0, used_count=99), NOW) is None

    def test_first_failure_reported(self) -> None:
        d = _percent(10, is_active=False, expires_at=NOW - timedelta(days=1),
                     max_uses=1, used_count=1)
        assert validate_discount(d, NOW) == DiscountRejection.INACTIVE
        d = _percent(10, expires_at=NOW - timedelta(days=1), max_uses=1, used_count=1)
        assert validate_discount(d, NOW) == DiscountRejection.EXPIRED


class TestQuotePrice:
    def test_no_coupon(self) -> None:
        q = quote_price(150000, None, NOW)
        assert (q.amount_final, q.discount_amount, q.coupon_applied) == (150000, 0, False)

    def test_valid_coupon_applied(self) -> None:
        q = quote_price(150000, _percent(20), NOW)
        assert q.amount_final == 120000
        assert q.discount_amount == 30000
        assert q.coupon_applied is True
        assert q.rejection is None

    def test_invalid_coupon_ignored(self) -> None:
        q = quote_price(150000, _percent(20, expires_at=NOW - timedelta(hours=1)), NOW)
        assert q.amount_final == 150000
        assert q.coupon_applied is False
        assert q.rejection == DiscountRejection.EXPIRED


class TestDiscountDisplay:
    def test_percent(self) -> None:
        assert discount_display(_percent(50)) == "50%"
        assert discount_display(_percent(12.5)) == "12.5%"

    def test_fixed_rupiah(self) -> None:
        assert discount_display(_fixed(25000)) == "Rp 25.000"
