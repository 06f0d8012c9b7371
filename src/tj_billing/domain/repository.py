# src/tj_billing/domain/repository.py
"""Repository Protocol: dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.tj_billing.domain.models import Discount


class CouponRepositoryProtocol(Protocol):
    async def get_coupon_by_code(
        self,
        db: AsyncSession,
        code: str,
    ) -> Discount | None: ...
