from types import SimpleNamespace

import pytest

import hangman.services.hints as hints
import hangman.services.llm_picker as llm_picker
from hangman.config import Settings
from hangman.core.engine import RoundEngine

ONLINE = Settings(offline=False, api_key="sk-test", model_name="test-model")
OFFLINE = Settings()


def _fake_openai(replies):
    """Build a stand-in for `openai.OpenAI` that returns `replies` in order."""
    replies = list(replies)
    calls = []

    def create(**kwargs):
        calls.append(kwargs)
        reply = replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        msg = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=msg)])

    class FakeClient:
        def __init__(self, api_key=None):
            self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))

    return FakeClient, calls


# --- word picker ---

def test_picker_offline_returns_none(monkeypatch):
    def boom(*a, **k):
        raise AssertionError("no client should be built offline")

    monkeypatch.setattr(llm_picker, "OpenAI", boom)
    assert llm_picker.pick_with_llm("4-letter words", length=4, settings=OFFLINE) is None


def test_picker_cleans_and_validates(monkeypatch):
    client, calls = _fake_openai(['"Frog."'])
    monkeypatch.setattr(llm_picker, "OpenAI", client)
    assert llm_picker.pick_with_llm("4-letter words", length=4, settings=ONLINE) == "FROG"
    assert calls[0]["model"] == "test-model"


def test_picker_retries_bad_replies(monkeypatch):
    client, calls = _fake_openai(["elephant", RuntimeError("timeout"), "wolf"])
    monkeypatch.setattr(llm_picker, "OpenAI", client)
    assert llm_picker.pick_with_llm("4-letter words", length=4, retries=2, settings=ONLINE) == "WOLF"
    assert len(calls) == 3


def test_picker_gives_up(monkeypatch):
    client, calls = _fake_openai(["two words", "x1", "???"])
    monkeypatch.setattr(llm_picker, "OpenAI", client)
    assert llm_picker.pick_with_llm("animals", retries=2, settings=ONLINE) is None
    assert len(calls) == 3


# --- hints ---

def test_local_hint_counts_hidden_letters():
    e = RoundEngine("planet")
    e.submit_guess("p")
    e.submit_guess("n")
    text = hints.local_hint("planet", e.mask)
    assert text.startswith("4 letters are still hidden")
    assert "includes a vowel" in text


def test_local_hint_without_vowels():
    e = RoundEngine("rhythm")
    for letter in "rhm":
        e.submit_guess(letter)
    text = hints.local_hint("rhythm", e.mask)
    assert text.startswith("2 letters are still hidden")
    assert "no vowels" in text


def test_round_hint_offline_is_local():
    e = RoundEngine("cat")
    assert hints.round_hint("cat", e.mask, settings=OFFLINE) == hints.local_hint("cat", e.mask)


def test_round_hint_uses_llm_text(monkeypatch):
    client, _ = _fake_openai(["A pet that purrs."])
    monkeypatch.setattr(hints, "OpenAI", client)
    e = RoundEngine("cat")
    assert hints.round_hint("cat", e.mask, settings=ONLINE) == "A pet that purrs."


@pytest.mark.parametrize("reply", ["It rhymes with hat: CAT", "", RuntimeError("down")])
def test_round_hint_falls_back(monkeypatch, reply):
    client, _ = _fake_openai([reply])
    monkeypatch.setattr(hints, "OpenAI", client)
    e = RoundEngine("cat")
    assert hints.round_hint("cat", e.mask, settings=ONLINE) == hints.local_hint("cat", e.mask)


def test_round_hint_does_not_touch_engine():
    e = RoundEngine("cat")
    e.submit_guess("c")
    before = (e.mask, e.guessed, e.wrong_count)
    hints.round_hint("cat", e.mask, settings=OFFLINE)
    assert (e.mask, e.guessed, e.wrong_count) == before
