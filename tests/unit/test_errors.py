"""Tests for om_common.errors and om_common.response."""

from src.om_common.enums import Action, DenialReason
from src.om_common.errors import (
    ActionNotAllowedError,
    AppError,
    InvalidVoteCountError,
    LedgerReadError,
    OutcomeNotWinnableError,
    TieUnresolvedError,
)
from src.om_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_action_not_allowed(self) -> None:
        err = ActionNotAllowedError(Action.SUBMIT_VOTE, DenialReason.ALREADY_VOTED)
        assert err.code == 2001
        assert err.http_status == 422
        assert err.message == "SUBMIT_VOTE not allowed: ALREADY_VOTED"
        assert err.reason == DenialReason.ALREADY_VOTED

    def test_action_not_allowed_detail(self) -> None:
        err = ActionNotAllowedError(
            Action.PROPOSE_OUTCOME, DenialReason.INSUFFICIENT_BALANCE, "required 5, available 1"
        )
        assert err.message.endswith("(required 5, available 1)")

    def test_ledger_read(self) -> None:
        err = LedgerReadError("timeout")
        assert err.code == 1001
        assert err.http_status == 502

    def test_outcome_not_winnable(self) -> None:
        err = OutcomeNotWinnableError(0)
        assert err.code == 3001
        assert err.http_status == 422
        assert "0" in err.message

    def test_tally_errors(self) -> None:
        assert InvalidVoteCountError("x").code == 4001
        tie = TieUnresolvedError(3)
        assert tie.code == 4002
        assert "3-3" in tie.message


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"phase": "FINALIZED"})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"phase": "FINALIZED"}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(2001, "not allowed")
        assert isinstance(resp, ApiResponse)
        assert resp.code == 2001
        assert resp.data is None
