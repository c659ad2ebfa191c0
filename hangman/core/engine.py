from __future__ import annotations

from typing import List, Set, Tuple

from .errors import (
    DuplicateGuessError,
    InvalidGuessLengthError,
    InvalidWordError,
    NonAlphabeticGuessError,
    RoundAlreadyOverError,
    RoundInProgressError,
)
from .state import PLACEHOLDER, GameStatus, GuessResult

# Wrong guesses allowed per round unless configured otherwise.
MAX_WRONG_GUESSES = 6


def _is_letters(text: str) -> bool:
    return text.isascii() and text.isalpha()


def normalize_word(word: str) -> str:
    """
    Strip and upper-case a candidate secret word.

    Raises
    ------
    InvalidWordError
        If nothing is left, or the word contains anything but letters A-Z.
    """
    w = (word or "").strip().upper()
    if not w or not _is_letters(w):
        raise InvalidWordError(f"secret word must be non-empty and contain letters A-Z only, got {word!r}")
    return w


def mask_word(mask: Tuple[str, ...], sep: str = " ") -> str:
    """Join mask slots for display, e.g. ('_', 'A', '_') -> '_ A _'."""
    return sep.join(mask)


class RoundEngine:
    """
    State machine for a single round of Hangman.

    The engine is created with one secret word and mutated only through
    `submit_guess`. It does no I/O; callers render the returned `GuessResult`
    and the query properties.

    Parameters
    ----------
    secret_word : str
        Word to hide. Case-insensitive; stored upper-case.
    max_wrong : int, optional
        Wrong guesses allowed before the round is lost (default: 6).
    """

    def __init__(self, secret_word: str, max_wrong: int = MAX_WRONG_GUESSES) -> None:
        if max_wrong < 1:
            raise ValueError("`max_wrong` must be >= 1.")
        self._secret = normalize_word(secret_word)
        self._max_wrong = max_wrong
        self._mask: List[str] = [PLACEHOLDER] * len(self._secret)
        self._guessed: Set[str] = set()
        self._wrong_count = 0

    def __repr__(self) -> str:
        return f"RoundEngine(mask={mask_word(self.mask, '')!r}, wrong={self._wrong_count}/{self._max_wrong}, status={self.status!r})"

    # ---- queries ----

    @property
    def mask(self) -> Tuple[str, ...]:
        return tuple(self._mask)

    @property
    def guessed(self) -> Tuple[str, ...]:
        return tuple(sorted(self._guessed))

    @property
    def wrong_count(self) -> int:
        return self._wrong_count

    @property
    def max_wrong(self) -> int:
        return self._max_wrong

    @property
    def remaining(self) -> int:
        return self._max_wrong - self._wrong_count

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def status(self) -> GameStatus:
        """
        Derived outcome.

        Rules
        -----
        - won  : no placeholder left in the mask.
        - lost : `wrong_count == max_wrong` and not won.
        - else : playing.
        """
        if PLACEHOLDER not in self._mask:
            return "won"
        if self._wrong_count >= self._max_wrong:
            return "lost"
        return "playing"

    @property
    def is_over(self) -> bool:
        return self.status != "playing"

    @property
    def secret_word(self) -> str:
        """The secret word, available once the round is won or lost."""
        if not self.is_over:
            raise RoundInProgressError("the secret word is only disclosed after the round ends")
        return self._secret

    # ---- transitions ----

    def _validate(self, raw_input: str) -> str:
        """
        Run the guess checks in their fixed order and return the normalized letter.

        Order
        -----
        over -> length -> alphabetic -> duplicate. The first failing check
        decides which error the caller sees.
        """
        if self.is_over:
            raise RoundAlreadyOverError(f"round is already {self.status}")

        text = (raw_input or "").strip()
        if len(text) != 1:
            raise InvalidGuessLengthError(f"expected exactly one letter, got {len(text)} characters")

        if not _is_letters(text):
            raise NonAlphabeticGuessError(f"{text!r} is not a letter A-Z")

        letter = text.upper()
        if letter in self._guessed:
            raise DuplicateGuessError(letter)
        return letter

    def submit_guess(self, raw_input: str) -> GuessResult:
        """
        Apply a single-letter guess.

        Behavior
        --------
        - Refused guesses raise a `GuessError` subclass and change nothing.
        - A new letter is recorded; every position holding it is revealed.
        - A letter absent from the word costs one wrong guess.
        - Duplicate guesses are not penalized.
        """
        letter = self._validate(raw_input)

        self._guessed.add(letter)
        correct = False
        for i, ch in enumerate(self._secret):
            if ch == letter:
                self._mask[i] = ch
                correct = True
        if not correct:
            self._wrong_count += 1

        return GuessResult(
            letter=letter,
            correct=correct,
            mask=self.mask,
            guessed=self.guessed,
            remaining=self.remaining,
            status=self.status,
        )
