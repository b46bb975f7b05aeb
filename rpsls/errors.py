"""Internal error types raised when the game engine breaks its own rules."""


class InvariantViolation(RuntimeError):
    """An engine invariant was broken. Never caused by user input."""


class RoundNotFound(InvariantViolation):
    """A ledger lookup asked for a round that was never recorded."""

    def __init__(self, round_num: int):
        super().__init__(f"No move recorded for round {round_num}")
        self.round_num = round_num


class DuplicateRound(InvariantViolation):
    """A ledger already holds a move for this round."""

    def __init__(self, round_num: int):
        super().__init__(f"A move is already recorded for round {round_num}")
        self.round_num = round_num
