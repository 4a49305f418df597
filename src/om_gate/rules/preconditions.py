"""Shared precondition checks. Each raises ActionNotAllowedError on failure."""

from typing import TypeVar

from src.om_common.enums import Action, DenialReason, Phase, ViewerRole
from src.om_common.errors import ActionNotAllowedError
from src.om_gate.domain.models import AccountState

T = TypeVar("T")


def require_account(action: Action, state: AccountState) -> None:
    if not state.account:
        raise ActionNotAllowedError(action, DenialReason.NO_ACCOUNT)


def require_loaded(action: Action, value: T | None, name: str) -> T:
    """A failed or pending read defers the verdict; it is never read as zero."""
    if value is None:
        raise ActionNotAllowedError(action, DenialReason.NOT_LOADED, f"{name} not loaded")
    return value


def require_phase(action: Action, phase: Phase, *allowed: Phase) -> None:
    if phase not in allowed:
        raise ActionNotAllowedError(action, DenialReason.WRONG_PHASE, f"phase={phase.value}")


def require_role(action: Action, state: AccountState, role: ViewerRole) -> None:
    if not state.has_role(role):
        raise ActionNotAllowedError(action, DenialReason.ROLE_MISMATCH, f"requires {role.value}")


def require_before(action: Action, now: int, deadline: int | None) -> None:
    if deadline is None or now >= deadline:
        raise ActionNotAllowedError(action, DenialReason.DEADLINE_PASSED)


def require_after(action: Action, now: int, deadline: int | None) -> None:
    if deadline is None or now < deadline:
        raise ActionNotAllowedError(action, DenialReason.DEADLINE_NOT_REACHED)


def require_balance(action: Action, available: int | None, required: int) -> None:
    available = require_loaded(action, available, "token balance")
    if available < required:
        raise ActionNotAllowedError(
            action,
            DenialReason.INSUFFICIENT_BALANCE,
            f"required {required}, available {available}",
        )
