"""om_account REST API: per-account flags for one market."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from src.om_account.api.dependencies import get_account_store
from src.om_account.application.service import AccountStateService
from src.om_account.infrastructure.redis_store import RedisAccountStateStore
from src.om_common.response import ApiResponse, success_response

router = APIRouter(prefix="/markets/{market_id}/accounts", tags=["accounts"])


@router.get("/{account}/state")
async def get_account_state(
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
    market_id: int = Path(..., ge=0),
    account: str = Path(..., min_length=1),
) -> ApiResponse:
    data = await AccountStateService(store).get_flags(market_id, account)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{account}/vote-recorded")
async def record_vote(
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
    market_id: int = Path(..., ge=0),
    account: str = Path(..., min_length=1),
) -> ApiResponse:
    data = await AccountStateService(store).record_vote(market_id, account)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/{account}/proposer-claim-recorded")
async def record_proposer_claim(
    store: Annotated[RedisAccountStateStore, Depends(get_account_store)],
    request: Request,
    market_id: int = Path(..., ge=0),
    account: str = Path(..., min_length=1),
) -> ApiResponse:
    data = await AccountStateService(store).record_proposer_claim(market_id, account)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
