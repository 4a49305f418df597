"""Domain models for om_ledger: global constants read from the contract."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerConstants:
    proposal_bond_amount: int           # smallest units, same bond for disputes
    market_creation_stake_amount: int   # smallest units
    min_juror_stake: int                # smallest units
