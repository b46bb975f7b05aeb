"""Tests for the plain terminal view, driven through in-memory streams."""

import io

import pytest
from rich.console import Console

from rpsls.players import Computer, Human
from rpsls.views import CLIView
from rpsls.weapons import WEAPONS, Weapon


# ── helpers ───────────────────────────────────────────────────────────────────


def _cli(typed: str = ""):
    out = io.StringIO()
    view = CLIView(console=Console(file=out, width=120), stdin=io.StringIO(typed))
    return view, out


def _players(view, *rounds):
    """Two players with `rounds` of (human weapon, computer weapon, human won?)."""
    human = Human("Alice", view)
    cpu = Computer("Hal")
    for i, (w1, w2, human_won) in enumerate(rounds, 1):
        human.commit(i, w1)
        cpu.commit(i, w2)
        if human_won is True:
            human.ledger.mark_won(i)
            human.score += 1
        elif human_won is False:
            cpu.ledger.mark_won(i)
            cpu.score += 1
    return human, cpu


# ── input ─────────────────────────────────────────────────────────────────────


class TestInput:
    def test_move(self):
        view, out = _cli("S\n")
        assert view.retrieve_user_move(WEAPONS) is Weapon.SPOCK
        assert "(S)pock" in out.getvalue()

    def test_invalid_move_reprompts(self):
        view, out = _cli("x\nq\nl\n")
        assert view.retrieve_user_move(WEAPONS) is Weapon.LIZARD
        assert out.getvalue().count("Please enter r, p, s, l or S") == 2

    def test_name(self):
        view, out = _cli("bad name\n\nspock_fan\n")
        assert view.retrieve_user_name() == "Spock_fan"
        assert out.getvalue().count("Please enter 1 to 20") == 2

    def test_play_again(self):
        view, out = _cli("maybe\ny\nn\n")
        assert view.play_again() is True
        assert "Please enter y or n" in out.getvalue()
        assert view.play_again() is False

    def test_end_of_input(self):
        view, _ = _cli("x\n")
        with pytest.raises(EOFError):
            view.retrieve_user_move(WEAPONS)


# ── output ────────────────────────────────────────────────────────────────────


class TestOutput:
    def test_welcome_lists_rules(self):
        view, out = _cli()
        view.display_welcome()
        text = out.getvalue()
        assert "Welcome to Rock Paper Scissors Lizard Spock!" in text
        assert "Lizard poisons Spock" in text

    def test_round_info(self):
        view, out = _cli()
        human, cpu = _players(view, (Weapon.ROCK, Weapon.SCISSORS, True))
        view.display_round_info(human, cpu, "Alice", 1, "rock crushes scissors")
        text = out.getvalue()
        assert "Alice plays rock" in text
        assert "Hal plays scissors" in text
        assert "Rock crushes scissors!" in text
        assert "Alice wins the round!" in text

    def test_tie(self):
        view, out = _cli()
        human, cpu = _players(view, (Weapon.PAPER, Weapon.PAPER, None))
        view.display_round_info(human, cpu, None, 1, None)
        assert "Tie!" in out.getvalue()

    def test_results_include_history(self):
        view, out = _cli()
        human, cpu = _players(
            view,
            (Weapon.ROCK, Weapon.SCISSORS, True),
            (Weapon.LIZARD, Weapon.LIZARD, None),
        )
        view.display_move_history(1, human, cpu, "Alice")
        view.display_move_history(2, human, cpu, None)
        view.display_match_results(human, cpu, "Alice")
        text = out.getvalue()
        assert "Move history" in text
        assert "tie" in text
        assert "Ties: 1" in text
        assert "Winner: Alice" in text

    def test_history_cleared_between_matches(self):
        view, _ = _cli()
        human, cpu = _players(view, (Weapon.ROCK, Weapon.PAPER, False))
        view.display_move_history(1, human, cpu, "Hal")
        view.display_match_results(human, cpu, "Hal")
        assert view._history == []

    def test_quit_exits_with_status(self):
        view, out = _cli()
        with pytest.raises(SystemExit) as info:
            view.quit(143)
        assert info.value.code == 143
        assert "Thanks for playing!" in out.getvalue()

    def test_quit_survives_lost_terminal(self):
        class _HungUpView(CLIView):
            def display_goodbye(self):
                raise OSError("terminal gone")

        out = io.StringIO()
        view = _HungUpView(console=Console(file=out, width=120), stdin=io.StringIO(""))
        with pytest.raises(SystemExit) as info:
            view.quit(129)
        assert info.value.code == 129

    def test_goodbye_shows_unfinished_history(self):
        view, out = _cli()
        human, cpu = _players(view, (Weapon.SPOCK, Weapon.ROCK, True))
        view.display_move_history(1, human, cpu, "Alice")
        view.display_goodbye()
        text = out.getvalue()
        assert "Move history" in text
        assert "Spock" in text
        assert text.index("Move history") < text.index("Thanks for playing!")
        assert view._history == []
