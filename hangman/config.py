from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from hangman.core.engine import MAX_WRONG_GUESSES

DEFAULT_WORDS_PATH = "data/hidden_words.json"
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment (and `.env`, if present)."""

    words_path: str = DEFAULT_WORDS_PATH
    max_wrong: int = MAX_WRONG_GUESSES
    offline: bool = True
    api_key: str = ""
    model_name: str = DEFAULT_MODEL
    log_level: str = "WARNING"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build `Settings` from environment variables.

    Notes
    -----
    - `.env` is loaded first with `override=False`, so real environment
      variables always win.
    - LLM features stay off unless OFFLINE_MODE=false and OPENAI_API_KEY is set.
    """
    if dotenv:
        load_dotenv(override=False)
    return Settings(
        words_path=os.getenv("HANGMAN_WORDS_PATH", DEFAULT_WORDS_PATH),
        max_wrong=_env_positive_int("HANGMAN_MAX_WRONG", MAX_WRONG_GUESSES),
        offline=_env_bool("OFFLINE_MODE", "true"),
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model_name=os.getenv("MODEL_NAME", DEFAULT_MODEL),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )


def llm_enabled(settings: Optional[Settings] = None) -> bool:
    s = settings or load_settings()
    return not s.offline and bool(s.api_key)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
