from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple


GameStatus = Literal["playing", "won", "lost"]

PLACEHOLDER = "_"


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome of one accepted guess, as returned by `RoundEngine.submit_guess`.

    Notes
    -----
    - This is plain data: the engine never formats or prints anything, so the
      terminal loop and the Streamlit app render it however they like.
    - `mask` and `guessed` are snapshots (tuples); later guesses do not change
      a result that was already handed out.
    """

    letter: str                 # normalized (upper-case) guessed letter
    correct: bool               # True if the letter occurs in the secret word
    mask: Tuple[str, ...]       # reveal mask after the guess
    guessed: Tuple[str, ...]    # all guessed letters, sorted
    remaining: int              # wrong guesses still allowed
    status: GameStatus          # round outcome after the guess

    @property
    def is_over(self) -> bool:
        return self.status != "playing"
