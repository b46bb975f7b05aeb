"""Weapon model for Rock-Paper-Scissors-Lizard-Spock."""

from enum import Enum

from .errors import InvariantViolation


class Weapon(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    LIZARD = "lizard"
    SPOCK = "Spock"

    def __str__(self):
        return self.value


WEAPONS = [Weapon.ROCK, Weapon.PAPER, Weapon.SCISSORS, Weapon.LIZARD, Weapon.SPOCK]

# What each weapon beats
BEATS = {
    Weapon.ROCK: frozenset({Weapon.SCISSORS, Weapon.LIZARD}),
    Weapon.PAPER: frozenset({Weapon.ROCK, Weapon.SPOCK}),
    Weapon.SCISSORS: frozenset({Weapon.PAPER, Weapon.LIZARD}),
    Weapon.LIZARD: frozenset({Weapon.SPOCK, Weapon.PAPER}),
    Weapon.SPOCK: frozenset({Weapon.ROCK, Weapon.SCISSORS}),
}

# How the winner finishes off the loser, keyed by (winner, loser)
GORE = {
    (Weapon.SCISSORS, Weapon.PAPER): "scissors cuts paper",
    (Weapon.PAPER, Weapon.ROCK): "paper covers rock",
    (Weapon.ROCK, Weapon.LIZARD): "rock crushes lizard",
    (Weapon.LIZARD, Weapon.SPOCK): "lizard poisons Spock",
    (Weapon.SPOCK, Weapon.SCISSORS): "Spock smashes scissors",
    (Weapon.SCISSORS, Weapon.LIZARD): "scissors decapitates lizard",
    (Weapon.LIZARD, Weapon.PAPER): "lizard eats paper",
    (Weapon.PAPER, Weapon.SPOCK): "paper disproves Spock",
    (Weapon.SPOCK, Weapon.ROCK): "Spock vaporizes rock",
    (Weapon.ROCK, Weapon.SCISSORS): "rock crushes scissors",
}


def beats(a: Weapon, b: Weapon) -> bool:
    """Return True if weapon `a` defeats weapon `b`.

    The relation is cyclic (rock > scissors > paper > rock), so there is no
    ordering behind it. A weapon never beats itself.
    """
    return b in BEATS[a]


# Pre-computed winner table: (weapon_a, weapon_b) → outcome
_WINNER_TABLE = {
    (a, b): 1 if beats(a, b) else -1 if beats(b, a) else 0
    for a in WEAPONS
    for b in WEAPONS
}


def determine_winner(weapon_a: Weapon, weapon_b: Weapon) -> int:
    """Return 1 if A wins, -1 if B wins, 0 for a tie."""
    return _WINNER_TABLE[weapon_a, weapon_b]


def gore_text(winner: Weapon, loser: Weapon) -> str:
    """Describe how `winner` defeats `loser`."""
    try:
        return GORE[winner, loser]
    except KeyError:
        raise InvariantViolation(f"{winner} does not beat {loser}") from None
