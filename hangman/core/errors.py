from __future__ import annotations


class HangmanError(Exception):
    """Base class for every error raised by the hangman package."""


class InvalidWordError(HangmanError, ValueError):
    """The secret word is empty or contains something other than letters A-Z."""


class GuessError(HangmanError):
    """A guess was refused; the round state is left untouched."""


class RoundAlreadyOverError(GuessError):
    """The round is already won or lost."""


class InvalidGuessLengthError(GuessError):
    """The guess is not exactly one character after trimming whitespace."""


class NonAlphabeticGuessError(GuessError):
    """The guess is a single character, but not a letter A-Z."""


class DuplicateGuessError(GuessError):
    """The letter was already guessed this round (no penalty)."""

    def __init__(self, letter: str) -> None:
        super().__init__(f"'{letter}' was already guessed.")
        self.letter = letter


class RoundInProgressError(HangmanError):
    """The secret word is only disclosed once the round is over."""


class WordListError(HangmanError):
    """The word source is missing, malformed, or cannot serve a pick."""


class UnknownCategoryError(WordListError, KeyError):
    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class EmptyCategoryError(WordListError):
    pass
