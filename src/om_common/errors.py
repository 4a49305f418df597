"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Ledger read
  2xxx: Action gate
  3xxx: Market state
  4xxx: Settlement / tally
"""

from src.om_common.enums import Action, DenialReason


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Ledger read ---

class LedgerReadError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Ledger read failed: {detail}", 502)


# --- 2xxx: Action gate ---

class ActionNotAllowedError(AppError):
    """Raised locally instead of forwarding an illegal write intent to the ledger."""

    def __init__(self, action: Action, reason: DenialReason, detail: str = "") -> None:
        self.action = action
        self.reason = reason
        message = f"{action.value} not allowed: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(2001, message, 422)


# --- 3xxx: Market ---

class OutcomeNotWinnableError(AppError):
    def __init__(self, outcome: int) -> None:
        super().__init__(3001, f"Outcome {outcome} has no winning side", 422)


# --- 4xxx: Settlement / tally ---

class InvalidVoteCountError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Invalid vote count: {detail}", 422)


class TieUnresolvedError(AppError):
    def __init__(self, votes: int) -> None:
        super().__init__(
            4002, f"Jury vote tied at {votes}-{votes} and no tie-break applies", 422
        )

