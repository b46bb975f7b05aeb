"""Presentation gateway used by the engine, plus the plain terminal view."""

from abc import ABC, abstractmethod
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

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
from .stats import count_ties, move_distribution, summarize
from .weapons import GORE


WELCOME = "Welcome to Rock Paper Scissors Lizard Spock!"
GOODBYE = "Thanks for playing!"
NAME_HELP = f"Please enter 1 to {MAX_NAME_LENGTH} letters, digits or underscores"


class View(ABC):
    """Everything the engine needs from a terminal front end.

    Views validate all human input themselves: the engine only ever
    receives a weapon from the offered set, a clean name, or a yes/no.
    """

    def open(self):
        """Take over the terminal. No-op for line-oriented views."""

    def close(self):
        """Give the terminal back. Safe to call more than once."""

    def quit(self, status: int = 0):
        """Restore the terminal, say goodbye and end the process."""
        self.close()
        try:
            self.display_goodbye()
        except OSError:
            # The terminal can already be gone, e.g. on SIGHUP
            pass
        sys.exit(status)

    @abstractmethod
    def display_welcome(self): ...

    @abstractmethod
    def display_goodbye(self): ...

    @abstractmethod
    def retrieve_user_name(self) -> str: ...

    @abstractmethod
    def retrieve_user_move(self, available_weapons): ...

    @abstractmethod
    def play_again(self) -> bool: ...

    @abstractmethod
    def display_match_status(self, round_num, player1, player2): ...

    @abstractmethod
    def display_round_info(self, player1, player2, winner_name, round_num, gore): ...

    @abstractmethod
    def display_match_results(self, player1, player2, winner_name): ...

    @abstractmethod
    def display_move_history(self, round_num, player1, player2, winner_name): ...

    @abstractmethod
    def display_computer_name(self, name): ...


class CLIView(View):
    """Line-by-line view printed through a rich console.

    Round history is collected as rounds are played and shown as one table
    with the match results, or at goodbye when the match was cut short.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console(highlight=False)
        self.stdin = stdin
        self._history: list[tuple[int, str, str, str]] = []
        self._history_names = ("", "")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _read(self, prompt: str) -> str:
        line = self.console.input(prompt, stream=self.stdin)
        if self.stdin is not None:
            # readline() returns "" only at end of input
            if line == "":
                raise EOFError
            line = line.rstrip("\n")
        return line

    def _ask(self, prompt: str, parse, help_text: str):
        self.console.print(prompt)
        while True:
            value = parse(self._read("> "))
            if value is not None:
                return value
            self.console.print(f"[red]{help_text}[/]")

    def retrieve_user_name(self) -> str:
        return self._ask("What's your name?", validate_name, NAME_HELP)

    def retrieve_user_move(self, available_weapons):
        return self._ask(
            move_prompt(available_weapons),
            lambda text: parse_move(text, available_weapons),
            "Please enter " + join_choices(keys_for(available_weapons)),
        )

    def play_again(self) -> bool:
        return self._ask("Play again (y/n)?", parse_yes_no, "Please enter " + join_choices(YES_NO))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def display_welcome(self):
        rules = "\n".join(text[0].upper() + text[1:] for text in GORE.values())
        self.console.print(Panel(rules, title=WELCOME, expand=False))

    def display_goodbye(self):
        self._flush_history()
        self.console.print(f"[bold]{GOODBYE}[/]")

    def display_computer_name(self, name):
        self.console.print(f"Your opponent today is [bold magenta]{name}[/].")

    def display_match_status(self, round_num, player1, player2):
        self.console.rule(
            f"Round {round_num}  |  {player1.name} {player1.score} : {player2.score} {player2.name}"
        )

    def display_round_info(self, player1, player2, winner_name, round_num, gore):
        self.console.print(f"{player1.name} plays [cyan]{player1.weapon}[/]")
        self.console.print(f"{player2.name} plays [cyan]{player2.weapon}[/]")
        color = "yellow" if winner_name is None else "green" if winner_name == player1.name else "red"
        for line in round_outcome(winner_name, gore):
            self.console.print(f"[{color}]{line}[/]")

    def display_move_history(self, round_num, player1, player2, winner_name):
        self._history_names = (player1.name, player2.name)
        self._history.append(
            (round_num, str(player1.weapon), str(player2.weapon), winner_name or "tie")
        )

    def _flush_history(self):
        if not self._history:
            return
        history = Table(title="Move history", box=box.SIMPLE)
        history.add_column("#", justify="right")
        history.add_column(self._history_names[0])
        history.add_column(self._history_names[1])
        history.add_column("Winner")
        for round_num, weapon1, weapon2, winner in self._history:
            history.add_row(str(round_num), weapon1, weapon2, winner)
        self.console.print(history)
        self._history = []

    def display_match_results(self, player1, player2, winner_name):
        self._flush_history()

        table = Table(title="Match results", box=box.ROUNDED)
        table.add_column("Player")
        table.add_column("Score", justify="right")
        table.add_column("Win %", justify="right")
        table.add_column("Favourite move")
        table.add_column("Moves")
        for player in (player1, player2):
            summary = summarize(player.name, player.ledger)
            table.add_row(
                summary.name,
                str(player.score),
                f"{summary.win_pct:.1f}%",
                summary.most_common,
                ", ".join(f"{w}: {n}" for w, n in sorted(move_distribution(player.ledger).items())),
            )
        self.console.print(table)
        self.console.print(f"Ties: {count_ties(player1.ledger, player2.ledger)}")
        self.console.print(f"[bold]★ Winner: {winner_name}[/]")
