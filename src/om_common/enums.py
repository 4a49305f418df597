"""Global enums.

Ledger-facing enums (ResolutionStatus, MarketOutcome) are int-valued and must
match the contract's uint8 encoding exactly. Everything else is derived by the
client and uses string values.
"""

from enum import Enum


class ResolutionStatus(int, Enum):
    PENDING = 0
    AWAITING_PROPOSAL = 1
    DISPUTE_WINDOW = 2
    IN_DISPUTE = 3
    JURY_VOTING = 4
    FINALIZED = 5


class MarketOutcome(int, Enum):
    UNRESOLVED = 0
    OPTION_A = 1
    OPTION_B = 2
    INVALID = 3


class Phase(str, Enum):
    """Client-side projection of ledger status plus wall-clock time."""
    TRADING_OPEN = "TRADING_OPEN"
    AWAITING_PROPOSAL = "AWAITING_PROPOSAL"
    DISPUTE_WINDOW = "DISPUTE_WINDOW"
    READY_TO_FINALIZE_UNDISPUTED = "READY_TO_FINALIZE_UNDISPUTED"
    AWAITING_JURY = "AWAITING_JURY"
    EXPIRED = "EXPIRED"
    JURY_VOTING = "JURY_VOTING"
    READY_TO_FINALIZE_DISPUTE = "READY_TO_FINALIZE_DISPUTE"
    FINALIZED = "FINALIZED"
    INDETERMINATE = "INDETERMINATE"


class ViewerRole(str, Enum):
    BETTOR = "BETTOR"
    PROPOSER = "PROPOSER"
    DISPUTER = "DISPUTER"
    JUROR = "JUROR"


class Action(str, Enum):
    """Write intents the client may offer; the ledger executes them."""
    BUY_SHARES = "BUY_SHARES"
    PROPOSE_OUTCOME = "PROPOSE_OUTCOME"
    DISPUTE_OUTCOME = "DISPUTE_OUTCOME"
    FINALIZE_UNDISPUTED = "FINALIZE_UNDISPUTED"
    FETCH_JURY = "FETCH_JURY"
    SUBMIT_VOTE = "SUBMIT_VOTE"
    FINALIZE_DISPUTE = "FINALIZE_DISPUTE"
    CLAIM_WINNINGS = "CLAIM_WINNINGS"
    CLAIM_REFUND = "CLAIM_REFUND"
    CLAIM_PROPOSER_REWARDS = "CLAIM_PROPOSER_REWARDS"
    STAKE_FOR_JURY = "STAKE_FOR_JURY"
    UNSTAKE_FROM_JURY = "UNSTAKE_FROM_JURY"
    CREATE_MARKET = "CREATE_MARKET"


class DenialReason(str, Enum):
    NO_ACCOUNT = "NO_ACCOUNT"
    WRONG_PHASE = "WRONG_PHASE"
    ROLE_MISMATCH = "ROLE_MISMATCH"
    DEADLINE_PASSED = "DEADLINE_PASSED"
    DEADLINE_NOT_REACHED = "DEADLINE_NOT_REACHED"
    ALREADY_VOTED = "ALREADY_VOTED"
    ALREADY_CLAIMED = "ALREADY_CLAIMED"
    ALREADY_STAKED = "ALREADY_STAKED"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INVALID_OUTCOME_CHOICE = "INVALID_OUTCOME_CHOICE"
    NOTHING_TO_CLAIM = "NOTHING_TO_CLAIM"
    STAKE_LOCKED = "STAKE_LOCKED"
    JURY_EXPIRED = "JURY_EXPIRED"
    TIE_UNRESOLVED = "TIE_UNRESOLVED"
    NOT_LOADED = "NOT_LOADED"


class MarketFilter(str, Enum):
    """List tabs of the market browser."""
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    RESOLVED = "RESOLVED"


class TieBreak(str, Enum):
    """What an exact jury tie resolves to."""
    PROPOSER = "PROPOSER"
    INVALID = "INVALID"
    REJECT = "REJECT"


class VoteSide(str, Enum):
    PROPOSER = "PROPOSER"
    DISPUTER = "DISPUTER"


class JurorStanding(str, Enum):
    MAJORITY = "MAJORITY"
    MINORITY = "MINORITY"
    ABSTAINED = "ABSTAINED"


class ClaimKind(str, Enum):
    WINNINGS = "WINNINGS"
    REFUND = "REFUND"
    PROPOSER_REWARDS = "PROPOSER_REWARDS"
    JUROR_STAKE = "JUROR_STAKE"
