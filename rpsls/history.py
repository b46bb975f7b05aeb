"""Per-player move ledger, keyed by round number."""

from dataclasses import dataclass

from .errors import DuplicateRound, InvariantViolation, RoundNotFound
from .weapons import Weapon


@dataclass
class MoveRecord:
    """One move a player committed in one round."""
    round_num: int
    weapon: Weapon
    won: bool = False


class Ledger:
    """Append-only record of a player's moves for one match.

    Entries are created with ``won=False`` when a move is committed and
    flipped to won once the round resolves in the owner's favour. Nothing
    is removed; a new match gets a new ledger.
    """
    __slots__ = ('_entries',)

    def __init__(self):
        self._entries: dict[int, MoveRecord] = {}

    def record(self, round_num: int, weapon: Weapon) -> MoveRecord:
        if round_num < 1:
            raise InvariantViolation(f"Round numbers start at 1, got {round_num}")
        if round_num in self._entries:
            raise DuplicateRound(round_num)
        entry = MoveRecord(round_num, weapon)
        self._entries[round_num] = entry
        return entry

    def mark_won(self, round_num: int) -> None:
        self.get(round_num).won = True

    def get(self, round_num: int) -> MoveRecord:
        try:
            return self._entries[round_num]
        except KeyError:
            raise RoundNotFound(round_num) from None

    def weapons(self) -> list[Weapon]:
        return [entry.weapon for entry in self]

    def wins(self) -> int:
        return sum(1 for entry in self if entry.won)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(sorted(self._entries.values(), key=lambda e: e.round_num))

    def __contains__(self, round_num):
        return round_num in self._entries

    def __repr__(self):
        return f"Ledger({list(self)!r})"
