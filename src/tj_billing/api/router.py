"""tj_billing REST endpoints.

POST /billing/coupons/verify  : coupon lookup + validity + discount preview
POST /billing/quote           : final charge for a base price and optional discount
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.tj_billing.application.schemas import QuoteRequest, VerifyCouponRequest
from src.tj_billing.application.service import BillingApplicationService
from src.tj_common.database import get_db_session
from src.tj_common.response import ApiResponse, success_response

router = APIRouter(prefix="/billing", tags=["billing"])

_service = BillingApplicationService()


@router.post("/coupons/verify")
async def verify_coupon(
    req: VerifyCouponRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.verify_coupon(db, req)
    return success_response(result.model_dump(mode="json"), request)


@router.post("/quote")
async def quote(req: QuoteRequest, request: Request) -> ApiResponse:
    return success_response(_service.quote(req).model_dump(mode="json"), request)
