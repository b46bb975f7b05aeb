"""Full-screen view: game on the left, move history on the right."""

import curses

from .prompts import (
    YES_NO,
    MAX_NAME_LENGTH,
    join_choices,
    keys_for,
    move_prompt,
    parse_move,
    parse_yes_no,
    round_outcome,
    validate_name,
)
from .views import GOODBYE, NAME_HELP, WELCOME, View


# Color pair ids
_WIN, _LOSS, _TIE, _TITLE = 1, 2, 3, 4


class CursesView(View):
    """Split-pane curses view.

    Weapon and yes/no prompts read a single key; the name prompt reads an
    echoed line. The terminal is restored by close(), which every exit path
    in main reaches.
    """

    def __init__(self):
        self.screen = None
        self.game_win = None
        self.history_win = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self):
        if self.screen is not None:
            return
        self.screen = curses.initscr()
        curses.noecho()
        curses.cbreak()
        self.screen.keypad(True)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(_WIN, curses.COLOR_GREEN, -1)
            curses.init_pair(_LOSS, curses.COLOR_RED, -1)
            curses.init_pair(_TIE, curses.COLOR_YELLOW, -1)
            curses.init_pair(_TITLE, curses.COLOR_CYAN, -1)

        height, width = self.screen.getmaxyx()
        split = width * 2 // 3
        self.game_win = curses.newwin(height, split, 0, 0)
        self.history_win = curses.newwin(height, width - split, 0, split)
        for win in (self.game_win, self.history_win):
            win.scrollok(True)
            win.idlok(True)
        self.history_win.addstr("Move history\n", self._attr(_TITLE) | curses.A_BOLD)
        self.screen.refresh()
        self.history_win.refresh()

    def close(self):
        if self.screen is None:
            return
        self.screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.screen = self.game_win = self.history_win = None

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _attr(pair: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else curses.A_NORMAL

    def _write(self, text: str = "", attr: int = curses.A_NORMAL, win=None):
        win = win or self.game_win
        if win is None:
            # Terminal already handed back (e.g. goodbye after close)
            print(text)
            return
        try:
            win.addstr(text + "\n", attr)
        except curses.error:
            # Writing past the bottom-right cell of a full window
            pass
        win.refresh()

    def _read_key(self, valid: list[str], help_text: str) -> str:
        while True:
            key = self.game_win.getkey()
            if key in valid:
                self._write(key)
                return key
            self._write(help_text, self._attr(_LOSS))

    def _read_line(self) -> str:
        curses.echo()
        try:
            raw = self.game_win.getstr(MAX_NAME_LENGTH + 1)
        finally:
            curses.noecho()
        return raw.decode("utf-8", errors="replace")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def retrieve_user_name(self) -> str:
        self._write("What's your name?")
        while True:
            name = validate_name(self._read_line())
            if name is not None:
                return name
            self._write(NAME_HELP, self._attr(_LOSS))

    def retrieve_user_move(self, available_weapons):
        keys = keys_for(available_weapons)
        self._write(move_prompt(available_weapons))
        key = self._read_key(keys, "Please enter " + join_choices(keys))
        return parse_move(key, available_weapons)

    def play_again(self) -> bool:
        self._write("Play again (y/n)?")
        return parse_yes_no(self._read_key(YES_NO, "Please enter " + join_choices(YES_NO)))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def display_welcome(self):
        self._write(WELCOME, self._attr(_TITLE) | curses.A_BOLD)
        self._write()

    def display_goodbye(self):
        self._write(GOODBYE, curses.A_BOLD)
        if self.game_win is not None:
            self._write("Press any key to exit.")
            self.game_win.getkey()

    def display_computer_name(self, name):
        self._write(f"Your opponent today is {name}.")

    def display_match_status(self, round_num, player1, player2):
        self._write()
        self._write(
            f"Round {round_num}  |  {player1.name} {player1.score} : {player2.score} {player2.name}",
            curses.A_BOLD,
        )

    def display_round_info(self, player1, player2, winner_name, round_num, gore):
        self._write(f"{player1.name} plays {player1.weapon}")
        self._write(f"{player2.name} plays {player2.weapon}")
        if winner_name is None:
            attr = self._attr(_TIE)
        elif winner_name == player1.name:
            attr = self._attr(_WIN)
        else:
            attr = self._attr(_LOSS)
        for line in round_outcome(winner_name, gore):
            self._write(line, attr)

    def display_move_history(self, round_num, player1, player2, winner_name):
        line = f"{round_num:>3d}  {str(player1.weapon):<8s} {str(player2.weapon):<8s} {winner_name or 'tie'}"
        self._write(line, win=self.history_win)

    def display_match_results(self, player1, player2, winner_name):
        self._write()
        self._write(f"{player1.name}: {player1.score}  {player2.name}: {player2.score}", curses.A_BOLD)
        self._write(f"Winner: {winner_name}", self._attr(_TITLE) | curses.A_BOLD)
        self._write("-" * 20, win=self.history_win)
