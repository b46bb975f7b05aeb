"""Input validation and formatting helpers shared by every view."""

import re
from typing import Optional

from .weapons import Weapon


MAX_NAME_LENGTH = 20

# Keys accepted at the move prompt. Case matters: "s" is scissors, "S" is Spock.
WEAPON_KEYS = {
    "r": Weapon.ROCK,
    "p": Weapon.PAPER,
    "s": Weapon.SCISSORS,
    "l": Weapon.LIZARD,
    "S": Weapon.SPOCK,
}

YES_NO = ["y", "n"]

_NAME_RE = re.compile(r"\w{1,%d}" % MAX_NAME_LENGTH)


def join_choices(options: list[str]) -> str:
    """Render options as "a", "a or b", or "a, b or c"."""
    if not options:
        raise ValueError("No options to join")
    if len(options) == 1:
        return options[0]
    return ", ".join(options[:-1]) + " or " + options[-1]


def keys_for(weapons: list[Weapon]) -> list[str]:
    """Input keys for the given weapons, in the order given."""
    by_weapon = {w: k for k, w in WEAPON_KEYS.items()}
    try:
        return [by_weapon[w] for w in weapons]
    except KeyError as exc:
        raise ValueError(f"No input key for weapon: {exc.args[0]!r}") from None


def move_prompt(weapons: list[Weapon]) -> str:
    """e.g. "Your choice: (r)ock, (p)aper, (s)cissors, (l)izard, (S)pock"."""
    labels = []
    for key, weapon in zip(keys_for(weapons), weapons):
        name = str(weapon)
        labels.append(f"({key}){name[1:]}" if name[0] == key else f"({key}) {name}")
    return "Your choice: " + ", ".join(labels)


def parse_move(text: str, weapons: list[Weapon]) -> Optional[Weapon]:
    """Map a typed key to a weapon, or None if it is not one of `weapons`."""
    weapon = WEAPON_KEYS.get(text.strip())
    return weapon if weapon in weapons else None


def parse_yes_no(text: str) -> Optional[bool]:
    text = text.strip()
    if text not in YES_NO:
        return None
    return text == "y"


def validate_name(text: str) -> Optional[str]:
    """Return the name with its first letter capitalized, or None if invalid.

    Valid names are 1 to MAX_NAME_LENGTH word characters.
    """
    text = text.strip()
    if not _NAME_RE.fullmatch(text):
        return None
    return text[0].upper() + text[1:]


def round_outcome(winner_name: Optional[str], gore: Optional[str]) -> list[str]:
    """Lines describing how a round ended."""
    if winner_name is None:
        return ["Tie!"]
    lines = []
    if gore:
        lines.append(gore[0].upper() + gore[1:] + "!")
    lines.append(f"{winner_name} wins the round!")
    return lines
