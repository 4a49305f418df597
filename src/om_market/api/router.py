"""om_market REST API: evaluate a ledger snapshot and gate single actions.

The caller posts the raw reads it got from the ledger; nothing here talks to
the chain. A denied action comes back as error 2001 with the denial reason
in the message.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from src.om_account.api.dependencies import get_account_store
from src.om_account.infrastructure.redis_store import RedisAccountStateStore
from src.om_common.response import ApiResponse, success_response
from src.om_market.application.schemas import (
    CheckActionRequest,
    EvaluateRequest,
    JuryDrawFailureRequest,
)
from src.om_market.application.service import MarketEvaluationService

router = APIRouter(prefix="/markets", tags=["markets"])


@router.post("/evaluate")
async def evaluate_market(
    body: EvaluateRequest,
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
) -> ApiResponse:
    data = await MarketEvaluationService(store).evaluate(body)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/check-action")
async def check_action(
    body: CheckActionRequest,
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
) -> ApiResponse:
    data = await MarketEvaluationService(store).check(body)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{market_id}/jury-draw-failure")
async def report_jury_draw_failure(
    body: JuryDrawFailureRequest,
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
    market_id: int = Path(..., ge=0),
) -> ApiResponse:
    expired = await MarketEvaluationService(store).record_jury_draw_failure(
        market_id, body.message
    )
    resp = success_response({"market_id": market_id, "market_expired": expired})
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
