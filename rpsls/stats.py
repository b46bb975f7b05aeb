"""Per-match statistics computed from a player's ledger."""

from dataclasses import dataclass
from collections import Counter

from .history import Ledger


def move_distribution(ledger: Ledger) -> dict[str, int]:
    return dict(Counter(str(w) for w in ledger.weapons()))


def most_common_move(ledger: Ledger) -> str:
    if not len(ledger):
        return "N/A"
    return Counter(str(w) for w in ledger.weapons()).most_common(1)[0][0]


@dataclass
class LedgerSummary:
    """Aggregated stats for one player across the rounds of a match."""
    name: str
    rounds: int = 0
    wins: int = 0
    most_common: str = "N/A"

    @property
    def win_pct(self) -> float:
        return (self.wins / self.rounds * 100) if self.rounds else 0.0


def summarize(name: str, ledger: Ledger) -> LedgerSummary:
    """Build the end-of-match summary row for one player."""
    return LedgerSummary(
        name=name,
        rounds=len(ledger),
        wins=ledger.wins(),
        most_common=most_common_move(ledger),
    )


def count_ties(ledger_a: Ledger, ledger_b: Ledger) -> int:
    """Rounds where neither side won."""
    return sum(
        1 for entry in ledger_a
        if not entry.won and entry.round_num in ledger_b and not ledger_b.get(entry.round_num).won
    )
