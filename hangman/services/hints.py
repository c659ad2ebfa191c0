from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from hangman.config import Settings, llm_enabled, load_settings
from hangman.core.engine import mask_word, normalize_word
from hangman.core.state import PLACEHOLDER

log = logging.getLogger(__name__)

_VOWELS = set("AEIOU")


def local_hint(secret: str, mask: tuple) -> str:
    """Always-available hint built from the hidden slots only."""
    hidden = [secret[i].upper() for i, slot in enumerate(mask) if slot == PLACEHOLDER]
    if not hidden:
        return "Every letter is already revealed."
    vowel = "includes a vowel" if _VOWELS & set(hidden) else "has no vowels (A, E, I, O, U)"
    n = len(hidden)
    return f"{n} {'letter is' if n == 1 else 'letters are'} still hidden, and what's hidden {vowel}."


def round_hint(secret: str, mask: tuple, settings: Optional[Settings] = None, temperature: float = 0.8) -> str:
    """
    Return ONE hint for the word behind `mask`; falls back to `local_hint`.

    Rules
    -----
    - The reply is rejected if it contains the secret word (case-insensitive).
    - On any LLM error or rejection the deterministic local hint is returned.
    - Only the caller-owned word and the public mask are used.
    """
    secret = normalize_word(secret)
    s = settings or load_settings()
    if not llm_enabled(s):
        return local_hint(secret, mask)

    client = OpenAI(api_key=s.api_key)
    user = (
        f"The secret word is '{secret.lower()}'. The player currently sees `{mask_word(mask)}`. "
        "Give exactly ONE short, natural-sounding hint that helps them guess it. "
        "Do NOT include the word itself. Reply with the hint only."
    )
    try:
        resp = client.chat.completions.create(
            model=s.model_name,
            messages=[{"role": "system", "content": "You are a helpful Hangman clue-giver."},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=80,
        )
    except Exception as e:
        log.warning("LLM hint failed: %s", e)
        return local_hint(secret, mask)

    text = (resp.choices[0].message.content or "").strip()
    if not text or secret.lower() in text.lower():
        log.info("Discarding LLM hint that was empty or leaked the word")
        return local_hint(secret, mask)
    words = text.split()
    if len(words) > 25:
        text = " ".join(words[:25])
    return text
