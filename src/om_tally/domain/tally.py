"""Jury vote tally.

The ledger keeps only two counters per market, so majority is decided from
counts alone. Individual ballots are not retained; whether a given juror
voted with the majority must be supplied from outside.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from src.om_common.enums import JurorStanding, MarketOutcome, TieBreak, VoteSide
from src.om_common.errors import InvalidVoteCountError, TieUnresolvedError
from src.om_resolution.domain.models import JURY_SIZE


@dataclass(frozen=True)
class TallyResult:
    votes_for_proposer: int
    votes_for_disputer: int
    winner: VoteSide | None     # None on a tie settled by TieBreak.INVALID
    outcome: MarketOutcome
    is_tie: bool

    @property
    def votes_cast(self) -> int:
        return self.votes_for_proposer + self.votes_for_disputer

    @property
    def abstentions(self) -> int:
        return JURY_SIZE - self.votes_cast


def validate_counts(votes_for_proposer: int, votes_for_disputer: int) -> None:
    if votes_for_proposer < 0 or votes_for_disputer < 0:
        raise InvalidVoteCountError(
            f"negative count ({votes_for_proposer}, {votes_for_disputer})"
        )
    if votes_for_proposer + votes_for_disputer > JURY_SIZE:
        raise InvalidVoteCountError(
            f"{votes_for_proposer} + {votes_for_disputer} exceeds jury size {JURY_SIZE}"
        )


def tally(
    votes_for_proposer: int,
    votes_for_disputer: int,
    proposed_outcome: MarketOutcome,
    disputed_outcome: MarketOutcome,
    tie_break: TieBreak = TieBreak.PROPOSER,
) -> TallyResult:
    """Majority outcome of a disputed market.

    The strictly larger side wins. On an exact tie (0-0 included):
      PROPOSER -> the proposal stands, the dispute failed to overturn it
      INVALID  -> the market resolves INVALID
      REJECT   -> TieUnresolvedError
    """
    validate_counts(votes_for_proposer, votes_for_disputer)

    if votes_for_proposer > votes_for_disputer:
        return TallyResult(
            votes_for_proposer, votes_for_disputer, VoteSide.PROPOSER, proposed_outcome, False
        )
    if votes_for_disputer > votes_for_proposer:
        return TallyResult(
            votes_for_proposer, votes_for_disputer, VoteSide.DISPUTER, disputed_outcome, False
        )

    if tie_break == TieBreak.PROPOSER:
        return TallyResult(
            votes_for_proposer, votes_for_disputer, VoteSide.PROPOSER, proposed_outcome, True
        )
    if tie_break == TieBreak.INVALID:
        return TallyResult(
            votes_for_proposer, votes_for_disputer, None, MarketOutcome.INVALID, True
        )
    raise TieUnresolvedError(votes_for_proposer)


def classify_jurors(
    voted_with_majority: Mapping[str, bool | None],
) -> dict[str, JurorStanding]:
    """Map each juror to MAJORITY / MINORITY / ABSTAINED.

    None means the juror did not vote before voting_end. No penalty is
    derived from ABSTAINED; the ledger defines no rule for it.
    """
    standings: dict[str, JurorStanding] = {}
    for juror, with_majority in voted_with_majority.items():
        if with_majority is None:
            standings[juror] = JurorStanding.ABSTAINED
        elif with_majority:
            standings[juror] = JurorStanding.MAJORITY
        else:
            standings[juror] = JurorStanding.MINORITY
    return standings
