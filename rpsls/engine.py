"""Match engine: plays rounds between the human and the computer."""

from dataclasses import dataclass
import random
from typing import Optional

from .errors import InvariantViolation
from .players import Computer, Human, Player, COMPUTER_NAMES
from .weapons import Weapon, determine_winner, gore_text


WIN_THRESHOLD = 10


@dataclass
class RoundResult:
    """What happened in one resolved round."""
    round_num: int
    weapon1: Weapon
    weapon2: Weapon
    winner_name: Optional[str] = None
    gore: Optional[str] = None

    @property
    def is_tie(self) -> bool:
        return self.winner_name is None


class RPSGame:
    """Orchestrates matches between a human and a computer player.

    The view is the only route to the terminal: it supplies the human's
    name and moves and renders everything the engine reports.
    """

    def __init__(self, view, seed: Optional[int] = None, win_threshold: int = WIN_THRESHOLD):
        # Separate seeded RNGs so naming the computer does not shift its moves
        master_rng = random.Random(seed)
        name_rng = random.Random(master_rng.randint(0, 2**31))
        computer_rng = random.Random(master_rng.randint(0, 2**31))

        self._name_rng = name_rng
        self._computer_rng = computer_rng

        self.view = view
        self.win_threshold = win_threshold
        self.round_num = 1
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None

    def setup(self):
        """Ask for the human's name and introduce the computer opponent."""
        self.player1 = Human(self.view.retrieve_user_name(), self.view)
        names = [n for n in COMPUTER_NAMES if n != self.player1.name]
        self.player2 = Computer(self._name_rng.choice(names), rng=self._computer_rng)
        self.view.display_computer_name(self.player2.name)

    # ------------------------------------------------------------------
    # Match state
    # ------------------------------------------------------------------

    @property
    def match_over(self) -> bool:
        return (self.player1.score >= self.win_threshold
                or self.player2.score >= self.win_threshold)

    @property
    def match_winner(self) -> Optional[Player]:
        if not self.match_over:
            return None
        return self.player1 if self.player1.score > self.player2.score else self.player2

    def reset_match(self):
        """Prepare a rematch: fresh scores and ledgers, same players."""
        self.round_num = 1
        self.player1.reset()
        self.player2.reset()

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def resolve(self, weapon1: Weapon, weapon2: Weapon) -> Optional[tuple[Player, Player]]:
        """Return (winner, loser) for the given weapons, or None on a tie."""
        outcome = determine_winner(weapon1, weapon2)
        if outcome == 1:
            return self.player1, self.player2
        if outcome == -1:
            return self.player2, self.player1
        return None

    def play_round(self) -> RoundResult:
        """Play the current round to completion and advance the counter."""
        if self.match_over:
            raise InvariantViolation("Cannot play a round after the match is over")

        round_num = self.round_num
        self.view.display_match_status(round_num, self.player1, self.player2)

        # Policies only read round_num - 1 of the opponent's ledger
        weapon1 = self.player1.choose_move(round_num, self.player2.ledger)
        weapon2 = self.player2.choose_move(round_num, self.player1.ledger)

        result = RoundResult(round_num, weapon1, weapon2)
        decided = self.resolve(weapon1, weapon2)
        if decided is not None:
            winner, loser = decided
            winner.score += 1
            winner.ledger.mark_won(round_num)
            result.winner_name = winner.name
            result.gore = gore_text(winner.weapon, loser.weapon)

        self.view.display_round_info(
            self.player1, self.player2, result.winner_name, round_num, result.gore
        )
        self.view.display_move_history(round_num, self.player1, self.player2, result.winner_name)
        self.round_num += 1
        return result

    def play_match(self) -> Player:
        """Play rounds until one side reaches the win threshold."""
        while not self.match_over:
            self.play_round()

        winner = self.match_winner
        self.view.display_match_results(self.player1, self.player2, winner.name)
        return winner

    def play(self):
        """Run the session: matches back to back while the human wants more."""
        self.view.display_welcome()
        if self.player1 is None:
            self.setup()
        while True:
            self.play_match()
            if not self.view.play_again():
                break
            self.reset_match()
        self.view.display_goodbye()
