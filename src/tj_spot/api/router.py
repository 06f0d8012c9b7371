"""tj_spot REST endpoints.

POST /spot/cost-basis  : DCA average, net quantity, cost basis of one ledger
POST /spot/holdings    : per-symbol holdings marked to the supplied prices
"""

from fastapi import APIRouter, Request

from src.tj_common.response import ApiResponse, success_response
from src.tj_spot.application import service as svc
from src.tj_spot.application.schemas import CostBasisRequest, HoldingsRequest

router = APIRouter(prefix="/spot", tags=["spot"])


@router.post("/cost-basis")
async def cost_basis(req: CostBasisRequest, request: Request) -> ApiResponse:
    return success_response(svc.cost_basis(req).model_dump(), request)


@router.post("/holdings")
async def holdings(req: HoldingsRequest, request: Request) -> ApiResponse:
    return success_response(svc.portfolio(req).model_dump(), request)
