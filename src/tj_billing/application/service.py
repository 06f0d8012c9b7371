"""BillingApplicationService: coupon checks and order pricing.

Coupon lookup is the only I/O; everything else delegates to the pure
pricing engine. Rejected coupons are a normal answer (valid=False), not
an error.

apply_gateway_status and renew_subscription have no route: they are the
entry points for a payment-webhook handler, which this service does not
host.
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.tj_billing.application.schemas import (
    CouponOut,
    QuoteRequest,
    QuoteResponse,
    VerifyCouponRequest,
    VerifyCouponResponse,
)
from src.tj_billing.domain.order_state import extend_subscription, resolve_gateway_callback
from src.tj_billing.domain.pricing import (
    apply_discount,
    discount_display,
    quote_price,
    validate_discount,
)
from src.tj_billing.domain.repository import CouponRepositoryProtocol
from src.tj_billing.infrastructure.persistence import CouponRepository
from src.tj_common.datetime_utils import utc_now
from src.tj_common.enums import DiscountRejection, OrderStatus

logger = logging.getLogger("tj.billing")


class BillingApplicationService:
    def __init__(self, repo: CouponRepositoryProtocol | None = None) -> None:
        self._repo: CouponRepositoryProtocol = repo or CouponRepository()

    async def verify_coupon(
        self,
        db: AsyncSession,
        req: VerifyCouponRequest,
        now: datetime | None = None,
    ) -> VerifyCouponResponse:
        now = now or utc_now()
        discount = await self._repo.get_coupon_by_code(db, req.coupon_code)
        if discount is None:
            logger.info("Coupon %s not found", req.coupon_code)
            return VerifyCouponResponse(valid=False, reason=DiscountRejection.NOT_FOUND)

        rejection = validate_discount(discount, now)
        if rejection is not None:
            logger.info("Coupon %s rejected: %s", req.coupon_code, rejection.value)
            return VerifyCouponResponse(valid=False, reason=rejection)

        result = apply_discount(req.product_price, discount)
        return VerifyCouponResponse(
            valid=True,
            coupon=CouponOut(
                code=discount.code or req.coupon_code,
                kind=discount.kind,
                magnitude=discount.magnitude,
                discount_display=discount_display(discount),
                calculated_discount=result.discount_amount,
                final_amount=result.final_amount,
            ),
        )

    def quote(self, req: QuoteRequest, now: datetime | None = None) -> QuoteResponse:
        discount = req.discount.to_domain() if req.discount is not None else None
        return QuoteResponse.from_domain(quote_price(req.base_price, discount, now or utc_now()))

    def apply_gateway_status(
        self, order_id: str, current: OrderStatus, raw_status: str | None
    ) -> OrderStatus:
        """Status the order should hold after a gateway callback."""
        new_status, changed = resolve_gateway_callback(current, raw_status)
        if changed:
            logger.info("Order %s: %s → %s", order_id, current.value, new_status.value)
        return new_status

    def renew_subscription(
        self,
        current_expiry: datetime | None,
        duration_days: int | None = None,
        now: datetime | None = None,
    ) -> datetime:
        """Expiry after a PAID order; products without a duration get the default."""
        return extend_subscription(
            current_expiry,
            now or utc_now(),
            duration_days or settings.SUBSCRIPTION_DEFAULT_DAYS,
        )
