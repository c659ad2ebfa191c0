from __future__ import annotations

import streamlit as st

from hangman.config import configure_logging, llm_enabled, load_settings
from hangman.core.engine import RoundEngine, mask_word
from hangman.core.errors import (
    DuplicateGuessError,
    GuessError,
    InvalidGuessLengthError,
    NonAlphabeticGuessError,
    WordListError,
)
from hangman.core.wordlist import WordSource, load_word_source, make_picker
from hangman.services.hints import round_hint

settings = load_settings()
configure_logging(settings.log_level)


# =======================================
# Session-state helpers & round management
# =======================================

def _get_source() -> WordSource:
    """Load the word lists once per session."""
    if "source" not in st.session_state:
        st.session_state["source"] = load_word_source(settings.words_path)
    return st.session_state["source"]


def _start_new_round(category: str) -> None:
    """
    Start a new round for `category`. Prefers an LLM-picked word when enabled;
    the picker falls back to the local list by itself.
    """
    source = _get_source()
    pick = make_picker(source, use_llm=llm_enabled(settings), settings=settings)
    word = pick(category)
    st.session_state["engine"] = RoundEngine(word, max_wrong=settings.max_wrong)
    st.session_state["secret"] = word
    st.session_state["category"] = category
    st.session_state["hint"] = None
    st.session_state["last_message"] = None


def _guess_message(err: GuessError) -> str:
    if isinstance(err, InvalidGuessLengthError):
        return "Please enter exactly one letter."
    if isinstance(err, NonAlphabeticGuessError):
        return "Please enter a letter A–Z."
    if isinstance(err, DuplicateGuessError):
        return f"You already guessed '{err.letter}'. Try a new letter."
    return "This round is over. Start a new round."


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Hangman", page_icon="🔤", layout="centered")
    st.title("🔤 Hangman")

    try:
        source = _get_source()
    except WordListError as e:
        st.error(f"Failed to load word lists: {e}")
        return

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Settings")
        category = st.selectbox("Word list", source.categories, format_func=source.describe)
        if st.button("🔁 New round", use_container_width=True):
            st.session_state.pop("engine", None)
            st.session_state["category"] = category

    if "engine" not in st.session_state or st.session_state.get("category") != category:
        try:
            _start_new_round(category)
        except WordListError as e:
            st.error(f"{e}. Please check your word-list file.")
            return
    engine: RoundEngine = st.session_state["engine"]

    # ---- Board ----
    st.subheader("Board")
    st.markdown(f"**Word**: `{mask_word(engine.mask)}`")
    st.caption(f"Mistakes: {engine.wrong_count} / {engine.max_wrong}")
    st.progress(engine.wrong_count / engine.max_wrong)
    st.caption(f"Guessed letters: {', '.join(engine.guessed) or '(none)'}")

    # ---- Hint ----
    with st.expander("Need a hint?"):
        if st.button("✨ Hint", disabled=engine.is_over):
            with st.spinner("Thinking..."):
                st.session_state["hint"] = round_hint(st.session_state["secret"], engine.mask, settings=settings)
        st.info(st.session_state.get("hint") or "No hint yet.")

    # ---- Move input ----
    st.subheader("Your move")
    with st.form("guess_form", clear_on_submit=True):
        guess_inp = st.text_input("Enter a single letter (A–Z):", max_chars=4)
        submitted = st.form_submit_button("Submit", disabled=engine.is_over)
        if submitted:
            try:
                result = engine.submit_guess(guess_inp)
            except GuessError as e:
                st.session_state["last_message"] = ("warning", _guess_message(e))
            else:
                if result.correct:
                    st.session_state["last_message"] = ("success", f"Good guess! '{result.letter}' is in the word.")
                else:
                    st.session_state["last_message"] = ("error", f"'{result.letter}' is not in the word.")
            st.rerun()

    msg = st.session_state.get("last_message")
    if msg and not engine.is_over:
        getattr(st, msg[0])(msg[1])

    # ---- Outcome banner ----
    if engine.status == "won":
        st.success(f"🎉 You won! The word was **{engine.secret_word}**.")
    elif engine.status == "lost":
        st.error(f"💀 You lost. The word was: **{engine.secret_word}**")

    if engine.is_over:
        st.button("Play again", on_click=_start_new_round, args=(category,))


if __name__ == "__main__":
    main()
