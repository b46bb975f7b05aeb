"""CLI entry point for Rock-Paper-Scissors-Lizard-Spock."""

import argparse
import signal
from typing import Optional

from rich.console import Console

from .engine import RPSGame
from .errors import InvariantViolation
from .views import CLIView, View


QUIT_SIGNALS = [
    sig for sig in (
        getattr(signal, name, None) for name in ("SIGINT", "SIGTERM", "SIGHUP")
    ) if sig is not None
]


def make_view(use_curses: bool) -> View:
    if use_curses:
        from .curses_view import CursesView
        return CursesView()
    return CLIView()


def install_signal_handlers(view: View) -> None:
    """Route termination signals to one cleanup callback bound to `view`.

    The process exits with 128 + signal number, the shell convention for
    death by signal.
    """
    def _on_signal(signum, frame):
        view.quit(128 + signum)

    for sig in QUIT_SIGNALS:
        signal.signal(sig, _on_signal)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rpsls",
        description="Rock Paper Scissors Lizard Spock against the computer, first to 10.",
    )
    parser.add_argument("--curses", action="store_true",
                        help="Split-pane full-screen view with a move history pane")
    parser.add_argument("--seed", type=int, default=None,
                        help="RNG seed for a reproducible computer opponent")
    return parser.parse_args(argv)


def run(view: View, seed: Optional[int] = None) -> int:
    """Play a session on `view`; returns the process exit status."""
    input_closed = False
    error = None
    try:
        view.open()
        RPSGame(view, seed=seed).play()
    except EOFError:
        input_closed = True
    except InvariantViolation as exc:
        error = exc
    finally:
        view.close()

    # Both messages go to the restored terminal
    if error is not None:
        Console(stderr=True).print(f"[bold red]Internal error:[/] {error}")
        return 1
    if input_closed:
        view.display_goodbye()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    view = make_view(args.curses)
    install_signal_handlers(view)
    return run(view, seed=args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
