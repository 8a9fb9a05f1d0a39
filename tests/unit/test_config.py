from flightmail.config import (
    DEFAULT_LLM_MODEL,
    DEFAULT_MAX_BODY_CHARS,
    DEFAULT_TIMEOUT_SECONDS,
    load_llm_settings,
)

ENV_NAMES = (
    "OPENAI_API_KEY",
    "FLIGHTMAIL_LLM_MODEL",
    "FLIGHTMAIL_LLM_MAX_BODY_CHARS",
    "FLIGHTMAIL_LLM_TIMEOUT",
)


def _clear_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment(monkeypatch):
    _clear_env(monkeypatch)

    settings = load_llm_settings(use_dotenv=False)

    assert settings.model == DEFAULT_LLM_MODEL
    assert settings.max_body_chars == DEFAULT_MAX_BODY_CHARS
    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.api_key is None
    assert settings.enabled


def test_reads_environment(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("FLIGHTMAIL_LLM_MODEL", "gpt-test")
    monkeypatch.setenv("FLIGHTMAIL_LLM_MAX_BODY_CHARS", "1200")
    monkeypatch.setenv("FLIGHTMAIL_LLM_TIMEOUT", "7.5")

    settings = load_llm_settings(use_dotenv=False)

    assert settings.api_key == "sk-test"
    assert settings.model == "gpt-test"
    assert settings.max_body_chars == 1200
    assert settings.timeout == 7.5


def test_bad_numbers_fall_back_to_defaults(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("FLIGHTMAIL_LLM_MAX_BODY_CHARS", "lots")
    monkeypatch.setenv("FLIGHTMAIL_LLM_TIMEOUT", "")

    settings = load_llm_settings(use_dotenv=False)

    assert settings.max_body_chars == DEFAULT_MAX_BODY_CHARS
    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS


def test_empty_api_key_is_missing(monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "")

    assert load_llm_settings(use_dotenv=False).api_key is None
