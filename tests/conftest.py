import pytest


@pytest.fixture(autouse=True)
def _offline_env(monkeypatch):
    # Keep every test away from the network and from a developer's .env values.
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("HANGMAN_MAX_WRONG", raising=False)
    monkeypatch.delenv("HANGMAN_WORDS_PATH", raising=False)
