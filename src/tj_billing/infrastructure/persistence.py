"""CouponRepository: concrete implementation of CouponRepositoryProtocol.

Read-only lookups against the hosted `coupons` table via raw text() SQL.
Inactive rows are returned too so validation can report INACTIVE.
A coupon row carries either discount_percent or discount_amount; percent
wins when both are set.
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.tj_billing.domain.models import Discount
from src.tj_common.datetime_utils import as_utc
from src.tj_common.enums import DiscountKind

_GET_COUPON_SQL = text("""
    SELECT code, discount_percent, discount_amount,
           max_uses, used_count, valid_until, is_active
    FROM coupons
    WHERE code = :code
""")


def _row_to_discount(row: Any) -> Discount:
    expires_at = as_utc(row.valid_until) if row.valid_until is not None else None
    if row.discount_percent:
        kind, magnitude = DiscountKind.PERCENT, float(row.discount_percent)
    else:
        kind, magnitude = DiscountKind.FIXED, float(row.discount_amount or 0)
    return Discount(
        kind=kind,
        magnitude=magnitude,
        is_active=bool(row.is_active),
        max_uses=row.max_uses,
        used_count=row.used_count or 0,
        expires_at=expires_at,
        code=row.code,
    )


class CouponRepository:
    async def get_coupon_by_code(self, db: AsyncSession, code: str) -> Discount | None:
        result = await db.execute(_GET_COUPON_SQL, {"code": code.upper()})
        row = result.fetchone()
        return _row_to_discount(row) if row is not None else None
