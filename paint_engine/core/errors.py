"""
Error taxonomy for board generation and grid exploration.
"""

from typing import Optional


class GenerationExhausted(RuntimeError):
    """
    Raised when the board factory used its whole retry budget without
    finding a board that is both well covered and uniquely solvable.
    """

    def __init__(self, message: str = None, *, attempts: int = 0,
                 min_cover_ratio: Optional[float] = None, max_tries: Optional[int] = None):
        if message is None:
            message = (f"No uniquely solvable board after {attempts} attempts "
                       f"(min_cover_ratio={min_cover_ratio}, max_tries={max_tries})")
        super().__init__(message)
        self.attempts = attempts
        self.min_cover_ratio = min_cover_ratio
        self.max_tries = max_tries


class InvariantViolation(AssertionError):
    """A programming defect: grid or explorer state that must never occur."""


class BoardFormatError(ValueError):
    """Malformed row layout handed to board construction."""
