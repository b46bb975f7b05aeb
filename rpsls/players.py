"""Players and the computer's move-selection policies."""

from abc import ABC, abstractmethod
from enum import Enum
import random
from typing import Optional

from .history import Ledger
from .weapons import Weapon, WEAPONS


COMPUTER_NAMES = ["R2D2", "Hal", "Chappie", "Sonny", "Number 5", "Marvin", "Data"]


class Policy(Enum):
    """Heuristic the computer follows for a whole match."""
    REPEAT = "repeat"
    MIRROR_OPPONENT_WIN = "mirror opponent win"
    MIRROR_OPPONENT_LOSS = "mirror opponent loss"


POLICIES = list(Policy)


def policy_move(
    policy: Policy,
    own: Ledger,
    opponent: Ledger,
    round_num: int,
    rng: random.Random,
) -> Weapon:
    """Pick the computer's weapon for `round_num`.

    Round 1 is always random. Afterwards the previous round decides:

    - REPEAT replays the computer's own weapon if it won.
    - MIRROR_OPPONENT_WIN plays the opponent's weapon if it won.
    - MIRROR_OPPONENT_LOSS plays the opponent's weapon if it did not win
      (ties included).

    Otherwise the pick is random. A missing previous-round entry raises
    RoundNotFound.
    """
    if round_num <= 1:
        return rng.choice(WEAPONS)

    if policy is Policy.REPEAT:
        prev = own.get(round_num - 1)
        if prev.won:
            return prev.weapon
    elif policy is Policy.MIRROR_OPPONENT_WIN:
        prev = opponent.get(round_num - 1)
        if prev.won:
            return prev.weapon
    elif policy is Policy.MIRROR_OPPONENT_LOSS:
        prev = opponent.get(round_num - 1)
        if not prev.won:
            return prev.weapon
    else:
        raise ValueError(f"Unknown policy: {policy!r}")

    return rng.choice(WEAPONS)


class Player(ABC):
    """Base class for both sides of a match."""

    def __init__(self, name: str):
        self.name = name
        self.score = 0
        self.weapon: Optional[Weapon] = None
        self.ledger = Ledger()

    @abstractmethod
    def choose_move(self, round_num: int, opponent_ledger: Ledger) -> Weapon:
        """Pick a weapon for `round_num` and record it to the own ledger."""
        ...

    def commit(self, round_num: int, weapon: Weapon) -> Weapon:
        self.ledger.record(round_num, weapon)
        self.weapon = weapon
        return weapon

    def reset(self):
        """Start a fresh match: zero score, empty ledger, same name."""
        self.score = 0
        self.weapon = None
        self.ledger = Ledger()

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}: {self.score}>"


class Human(Player):
    """Player whose moves come from the terminal."""

    def __init__(self, name: str, view):
        super().__init__(name)
        self.view = view

    def choose_move(self, round_num, opponent_ledger):
        return self.commit(round_num, self.view.retrieve_user_move(WEAPONS))


class Computer(Player):
    """Player driven by one of the history heuristics."""

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        self.rng: random.Random = rng or random.Random()
        self.policy = Policy.REPEAT
        super().__init__(name)
        self.reset()

    def reset(self):
        super().reset()
        self.policy = self.rng.choice(POLICIES)

    def choose_move(self, round_num, opponent_ledger):
        weapon = policy_move(self.policy, self.ledger, opponent_ledger, round_num, self.rng)
        return self.commit(round_num, weapon)
