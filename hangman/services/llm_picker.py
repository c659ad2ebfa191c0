from __future__ import annotations

import logging
import re
from typing import Optional

from openai import OpenAI

from hangman.config import Settings, llm_enabled, load_settings

log = logging.getLogger(__name__)

# Strict validator: upper-case A-Z only, length policy enforced separately
_UPPER_AZ = re.compile(r"^[A-Z]+$")


def _clean_reply(text: str) -> str:
    return text.replace('"', "").replace("'", "").replace(".", "").strip().upper()


def pick_with_llm(
    label: str,
    length: Optional[int] = None,
    retries: int = 2,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Try to pick ONE valid word for a category via an LLM. Returns None on failure.

    Safety
    ------
    - OFFLINE_MODE=true or missing OPENAI_API_KEY -> returns None immediately.
    - Replies are stripped of quotes, upper-cased, and must be A-Z only (and
      `length` letters long, if given); otherwise the attempt is retried.
    - The caller falls back to the local word list on None.
    """
    s = settings or load_settings()
    if not llm_enabled(s):
        return None

    size = f" with exactly {length} letters" if length else ""
    prompt = (
        f"Generate one random, common English word for a Hangman round ({label}){size}. "
        "It should be different each time. Output only the word."
    )

    client = OpenAI(api_key=s.api_key)
    for attempt in range(1, retries + 2):
        try:
            resp = client.chat.completions.create(
                model=s.model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.9,
                max_tokens=20,
            )
        except Exception as e:  # network/auth errors: retry, then fall back
            log.warning("LLM word pick failed (attempt %d): %s", attempt, e)
            continue
        word = _clean_reply(resp.choices[0].message.content or "")
        if _UPPER_AZ.match(word) and (length is None or len(word) == length):
            return word
        log.warning("LLM returned unusable word %r (attempt %d)", word, attempt)

    return None
