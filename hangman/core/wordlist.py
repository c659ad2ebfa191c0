from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import EmptyCategoryError, UnknownCategoryError, WordListError

if TYPE_CHECKING:
    from hangman.config import Settings

log = logging.getLogger(__name__)

# Labels for the categories shipped in data/hidden_words.json.
_NUMBER_WORDS = {
    "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}


def _clean_words(category: str, words: Iterable[str]) -> List[str]:
    """
    Strip entries and drop anything that is not a plain A-Z word.

    Dropped entries are logged rather than raised, so one bad line in a list
    does not take the whole category down.
    """
    cleaned: List[str] = []
    for raw in words:
        w = raw.strip() if isinstance(raw, str) else ""
        if w and w.isascii() and w.isalpha():
            cleaned.append(w)
        else:
            log.warning("Dropping invalid entry %r from category %r", raw, category)
    return cleaned


class WordSource:
    """
    Ordered categories of candidate words, with uniform random picks.

    Parameters
    ----------
    word_lists : Mapping[str, Iterable[str]]
        Category label -> words. Iteration order of the mapping is the
        category order shown to players.
    rng : random.Random | None
        Source of randomness for `pick`. Pass a seeded `random.Random` for
        reproducible picks in tests; defaults to `random.SystemRandom()`.
    """

    def __init__(self, word_lists: Mapping[str, Iterable[str]], rng: Optional[random.Random] = None) -> None:
        self._lists: Dict[str, Tuple[str, ...]] = {
            label: tuple(_clean_words(label, words)) for label, words in word_lists.items()
        }
        if not self._lists:
            raise WordListError("word source needs at least one category")
        self._rng = rng or random.SystemRandom()

    @property
    def categories(self) -> List[str]:
        return list(self._lists)

    def words(self, category: str) -> Tuple[str, ...]:
        try:
            return self._lists[category]
        except KeyError:
            raise UnknownCategoryError(f"unknown category {category!r}") from None

    def describe(self, category: str) -> str:
        """Human label: 'four_letter_words' -> '4-letter words'."""
        parts = category.split("_")
        if len(parts) == 3 and parts[0] in _NUMBER_WORDS and parts[1:] == ["letter", "words"]:
            return f"{_NUMBER_WORDS[parts[0]]}-letter words"
        return " ".join(parts)

    def pick(self, category: str) -> str:
        """Pick one word from `category`, uniformly at random."""
        words = self.words(category)
        if not words:
            raise EmptyCategoryError(f"category {category!r} has no words")
        return self._rng.choice(words)


def load_word_source(path: Path | str, rng: Optional[random.Random] = None) -> WordSource:
    """
    Load a `WordSource` from a JSON file of the form::

        {"word_lists": {"four_letter_words": ["bird", ...], ...}}

    Raises
    ------
    WordListError
        If the file is missing, is not valid JSON, or has the wrong shape.
    """
    p = Path(path)
    log.info("Loading words from %s", p)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise WordListError(f"word list file not found: {p}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise WordListError(f"could not read word list {p}: {e}") from e

    lists = data.get("word_lists") if isinstance(data, dict) else None
    if not isinstance(lists, dict) or not all(isinstance(v, list) for v in lists.values()):
        raise WordListError(f"{p}: expected an object 'word_lists' mapping category -> list of words")

    source = WordSource(lists, rng=rng)
    for label in source.categories:
        log.info("Category %s: %d words", label, len(source.words(label)))
    return source


def make_picker(source: WordSource, use_llm: bool = False, settings: Optional["Settings"] = None) -> Callable[[str], str]:
    """
    Return the pick capability handed to orchestrators.

    With `use_llm`, the LLM picker is tried first (it returns None when it is
    disabled or fails) and the local list is the fallback. An empty category
    raises `EmptyCategoryError` before the LLM is asked.
    """
    if not use_llm:
        return source.pick

    from hangman.services.llm_picker import pick_with_llm

    def _pick(category: str) -> str:
        words = source.words(category)
        if not words:
            raise EmptyCategoryError(f"category {category!r} has no words")
        lengths = {len(w) for w in words}
        length = lengths.pop() if len(lengths) == 1 else None
        word = pick_with_llm(source.describe(category), length=length, settings=settings)
        if word:
            return word
        return source.pick(category)

    return _pick
