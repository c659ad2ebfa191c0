"""
Terminal front-end for Hangman.

Flow per session:
  1) Load the word lists (JSON) and show a numbered category menu.
  2) Pick a word from the chosen category and play one round, guess by guess.
  3) Ask whether to play another round.

All input/output goes through the `read`/`write` callables so the loop can be
driven from tests without a terminal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from hangman.config import configure_logging, llm_enabled, load_settings
from hangman.core.engine import RoundEngine, mask_word
from hangman.core.errors import (
    DuplicateGuessError,
    EmptyCategoryError,
    InvalidGuessLengthError,
    NonAlphabeticGuessError,
    WordListError,
)
from hangman.core.wordlist import WordSource, load_word_source, make_picker

log = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def show_state(engine: RoundEngine, write: Writer) -> None:
    write(f"\nWord: {mask_word(engine.mask)}")
    write(f"Guessed Letters: {', '.join(engine.guessed)}")
    write(f"Guesses Left: {engine.remaining}")


def play_round(engine: RoundEngine, read: Reader, write: Writer) -> bool:
    """
    Drive one round to the end. Returns True if the player won.

    Refused guesses (wrong length, not a letter, repeated) are reported and
    re-prompted; they never cost a guess.
    """
    write("\n--- Hangman Round Started! ---")
    write(f"Your word has {engine.word_length} letters.")

    while not engine.is_over:
        show_state(engine, write)
        raw = read("Guess a letter: ")
        try:
            result = engine.submit_guess(raw)
        except InvalidGuessLengthError:
            write("Invalid input. Please enter exactly one letter.")
            continue
        except NonAlphabeticGuessError:
            write("Invalid input. Please enter an alphabetic character.")
            continue
        except DuplicateGuessError as e:
            write(f"You already guessed '{e.letter}'. Try a new letter.")
            continue

        if result.correct:
            write(f"Good guess! '{result.letter}' is in the word.")
        else:
            write(f"'{result.letter}' is not in the word. You lose a guess.")

    show_state(engine, write)
    if engine.status == "won":
        write("\n--- CONGRATULATIONS! ---")
        write(f"You guessed the word: {engine.secret_word}")
        return True
    write("\n--- GAME OVER! ---")
    write(f"You ran out of guesses. The word was: {engine.secret_word}")
    return False


def choose_category(source: WordSource, read: Reader, write: Writer) -> Optional[str]:
    """Show the category menu until a valid choice is made; None means quit."""
    labels = source.categories
    n = len(labels)
    while True:
        write("\nChoose a word list for Hangman:")
        for i, label in enumerate(labels, start=1):
            write(f"{i}. {source.describe(label)}")
        write(f"Enter your choice (1-{n}, or 'q' to quit):")

        choice = read("").strip()
        if choice.lower() == "q":
            return None
        if choice.isdigit() and 1 <= int(choice) <= n:
            return labels[int(choice) - 1]
        write(f"Invalid choice. Please enter a number from 1 to {n}, or 'q'.")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hangman", description="Play Hangman in the terminal.")
    ap.add_argument("--words", default=None, help="Path to the word-list JSON (default: $HANGMAN_WORDS_PATH)")
    ap.add_argument("--max-wrong", type=int, default=None, help="Wrong guesses allowed per round")
    ap.add_argument("--llm", action="store_true", help="Let an LLM pick words (needs OFFLINE_MODE=false and a key)")
    return ap


def main(argv: Optional[List[str]] = None, read: Reader = input, write: Writer = print) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    max_wrong = args.max_wrong if args.max_wrong is not None else settings.max_wrong
    if max_wrong < 1:
        log.error("--max-wrong must be >= 1, got %d", max_wrong)
        return 2

    words_path = args.words or settings.words_path
    write(f"Attempting to load words from: {words_path}")
    try:
        source = load_word_source(words_path)
    except WordListError as e:
        log.error("Failed to start game due to data loading error: %s", e)
        return 1
    write("Words loaded successfully.")

    use_llm = args.llm and llm_enabled(settings)
    if args.llm and not use_llm:
        log.warning("--llm given but LLM is disabled (OFFLINE_MODE or missing OPENAI_API_KEY); using local lists")
    pick = make_picker(source, use_llm=use_llm, settings=settings)

    try:
        while True:
            category = choose_category(source, read, write)
            if category is None:
                write("Exiting Hangman game. Goodbye!")
                break

            try:
                word = pick(category)
            except EmptyCategoryError:
                write("The selected word list is empty. Please check your JSON file.")
                continue

            play_round(RoundEngine(word, max_wrong=max_wrong), read, write)

            write("\nPlay another round? (yes/no)")
            if read("> ").strip().lower() != "yes":
                write("Thanks for playing!")
                break
    except (EOFError, KeyboardInterrupt):
        write("\nExiting Hangman game. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
