"""tj_futures REST endpoints.

POST /futures/evaluate         : P&L, fee, ROE, RRR and result for one position
POST /futures/position-size    : notional size and margin from risk, stop % and leverage
POST /futures/stats            : journal stats, daily calendar, equity curve
POST /futures/balance/adjust   : balance after a manual INITIAL/DEPOSIT/WITHDRAW
POST /futures/balance          : current balance from history + realized P&L
"""

from fastapi import APIRouter, Request

from src.tj_common.response import ApiResponse, success_response
from src.tj_futures.application import service as svc
from src.tj_futures.application.schemas import (
    BalanceAdjustmentRequest,
    CurrentBalanceRequest,
    EvaluatePositionRequest,
    PositionSizeRequest,
    StatsRequest,
)

router = APIRouter(prefix="/futures", tags=["futures"])


@router.post("/evaluate")
async def evaluate_position(req: EvaluatePositionRequest, request: Request) -> ApiResponse:
    return success_response(svc.evaluate(req).model_dump(mode="json"), request)


@router.post("/position-size")
async def position_size(req: PositionSizeRequest, request: Request) -> ApiResponse:
    return success_response(svc.size_position(req).model_dump(mode="json"), request)


@router.post("/stats")
async def journal_stats(req: StatsRequest, request: Request) -> ApiResponse:
    return success_response(svc.journal_stats(req).model_dump(mode="json"), request)


@router.post("/balance/adjust")
async def adjust_balance(req: BalanceAdjustmentRequest, request: Request) -> ApiResponse:
    return success_response(svc.adjust_balance(req).model_dump(mode="json"), request)


@router.post("/balance")
async def current_balance(req: CurrentBalanceRequest, request: Request) -> ApiResponse:
    return success_response(svc.get_current_balance(req).model_dump(mode="json"), request)
