"""Shared test doubles for the engine and player tests."""

import itertools

import pytest

from rpsls.views import View
from rpsls.weapons import WEAPONS


class ScriptedView(View):
    """In-memory view that replays canned answers and logs every call."""

    def __init__(self, name="Tester", moves=None, rematches=None):
        self.name = name
        self.moves = iter(moves) if moves is not None else itertools.cycle(WEAPONS)
        self.rematches = iter(rematches or [])
        self.calls: list[tuple] = []
        self.closed = 0
        self.closed_at_goodbye = None

    def _log(self, *call):
        self.calls.append(call)

    def called(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    def close(self):
        self.closed += 1

    def display_welcome(self):
        self._log("display_welcome")

    def display_goodbye(self):
        self._log("display_goodbye")
        self.closed_at_goodbye = self.closed

    def retrieve_user_name(self):
        self._log("retrieve_user_name")
        return self.name

    def retrieve_user_move(self, available_weapons):
        self._log("retrieve_user_move", list(available_weapons))
        return next(self.moves)

    def play_again(self):
        self._log("play_again")
        return next(self.rematches, False)

    def display_match_status(self, round_num, player1, player2):
        self._log("display_match_status", round_num, player1.score, player2.score)

    def display_round_info(self, player1, player2, winner_name, round_num, gore):
        self._log("display_round_info", winner_name, round_num, gore)

    def display_match_results(self, player1, player2, winner_name):
        self._log("display_match_results", player1.score, player2.score, winner_name)

    def display_move_history(self, round_num, player1, player2, winner_name):
        self._log("display_move_history", round_num, winner_name)

    def display_computer_name(self, name):
        self._log("display_computer_name", name)


@pytest.fixture
def view():
    return ScriptedView()
