"""MarketEvaluationService — joins persisted account flags with the pure core.

The only I/O is the account state store. Expiry of jury selection is
sticky: once a market is seen past the blockhash window (or the ledger
rejects a draw for that reason) it is written to the store and every later
evaluation treats the market as EXPIRED, whatever status the ledger still
reports.
"""

import logging

from config.settings import settings
from src.om_account.domain.models import AccountFlags
from src.om_account.domain.repository import AccountStateStoreProtocol
from src.om_common.datetime_utils import now_ts
from src.om_common.enums import ResolutionStatus, TieBreak
from src.om_gate.domain.gate import check_action
from src.om_gate.domain.models import ActionContext
from src.om_ledger.domain.models import LedgerConstants
from src.om_market.application.schemas import (
    ActionCheckOut,
    CheckActionRequest,
    EvaluateRequest,
    MarketViewOut,
)
from src.om_market.domain.view import MarketView, build_account_state, build_market_view
from src.om_resolution.domain.models import AccountSnapshot, MarketSnapshot
from src.om_resolution.domain.phase import resolve_phase
from src.om_timing.domain.oracle import is_jury_expiry_rejection, is_jury_selection_expired

logger = logging.getLogger(__name__)


class MarketEvaluationService:
    def __init__(
        self,
        store: AccountStateStoreProtocol,
        tie_break: TieBreak | None = None,
        decimals: int | None = None,
    ) -> None:
        self._store = store
        self._tie_break = tie_break or TieBreak(settings.JURY_TIE_BREAK)
        self._decimals = decimals if decimals is not None else settings.TOKEN_DECIMALS

    async def jury_expired(self, snapshot: MarketSnapshot) -> bool | None:
        """Stored flag OR a fresh blockhash-window check; None if unknown while IN_DISPUTE."""
        if await self._store.is_market_expired(snapshot.market_id):
            return True
        resolution = snapshot.resolution
        if resolution is None or resolution.status != ResolutionStatus.IN_DISPUTE:
            return False
        if snapshot.blocks_since_dispute is None:
            return None
        expired = is_jury_selection_expired(snapshot.blocks_since_dispute)
        if expired:
            await self._store.mark_market_expired(snapshot.market_id)
        return expired

    async def _flags(
        self, market_id: int, account_snapshot: AccountSnapshot | None
    ) -> AccountFlags | None:
        if account_snapshot is None:
            return None
        return await self._store.get_flags(market_id, account_snapshot.account)

    async def evaluate_snapshot(
        self,
        snapshot: MarketSnapshot,
        account_snapshot: AccountSnapshot | None,
        constants: LedgerConstants,
        now: int | None = None,
    ) -> MarketView:
        now = now if now is not None else now_ts()
        view = build_market_view(
            snapshot,
            account_snapshot,
            await self._flags(snapshot.market_id, account_snapshot),
            constants,
            now,
            await self.jury_expired(snapshot),
            self._tie_break,
        )
        logger.debug("Market %d evaluated: phase=%s", snapshot.market_id, view.phase.value)
        return view

    async def evaluate(self, req: EvaluateRequest) -> MarketViewOut:
        snapshot = req.to_snapshot()
        view = await self.evaluate_snapshot(
            snapshot, req.to_account_snapshot(), req.constants.to_domain(), req.now
        )
        return MarketViewOut.from_domain(view, snapshot.market, self._decimals)

    async def check(self, req: CheckActionRequest) -> ActionCheckOut:
        """Raises ActionNotAllowedError with the denial reason; never contacts the ledger."""
        now = req.now if req.now is not None else now_ts()
        snapshot = req.to_snapshot()
        account_snapshot = req.to_account_snapshot()
        jury_expired = await self.jury_expired(snapshot)
        phase = resolve_phase(snapshot.market, snapshot.resolution, now, jury_expired)
        state = build_account_state(
            snapshot,
            account_snapshot,
            await self._flags(snapshot.market_id, account_snapshot),
        )
        ctx = ActionContext(
            now=now,
            market=snapshot.market,
            resolution=snapshot.resolution,
            constants=req.constants.to_domain(),
            jury_expired=bool(jury_expired),
            tie_break=self._tie_break,
        )
        check_action(req.action, phase, state, ctx, req.outcome_domain())
        return ActionCheckOut(action=req.action.value, allowed=True)

    async def record_jury_draw_failure(self, market_id: int, message: str) -> bool:
        """Flag the market expired if the ledger refused the draw for want of a blockhash."""
        if not is_jury_expiry_rejection(message):
            logger.info("Jury draw failed for market %d (retryable): %s", market_id, message)
            return False
        await self._store.mark_market_expired(market_id)
        return True
