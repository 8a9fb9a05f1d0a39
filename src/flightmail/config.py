"""
# src/flightmail/config.py
# Environment-driven settings for the model fallback
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LLM_MODEL = 'gpt-4o-mini'
DEFAULT_MAX_BODY_CHARS = 5000
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_TOKENS = 500


@dataclass
class LlmSettings:
    model: str = DEFAULT_LLM_MODEL
    max_body_chars: Optional[int] = DEFAULT_MAX_BODY_CHARS
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_key: Optional[str] = None
    enabled: bool = True


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _env_int(name: str) -> Optional[int]:
    value = _env_float(name)
    if value is None:
        return None
    return int(value)


def _get_llm_api_key() -> Optional[str]:
    return os.getenv("OPENAI_API_KEY") or None


def load_llm_settings(use_dotenv: bool = True) -> LlmSettings:
    """Build LlmSettings from the environment (and a .env file if present).

    A missing API key is not an error: the model fallback reports itself as
    unavailable and the heuristic stages keep working.
    """
    if use_dotenv:
        load_dotenv()

    max_body_chars = _env_int('FLIGHTMAIL_LLM_MAX_BODY_CHARS')
    timeout = _env_float('FLIGHTMAIL_LLM_TIMEOUT')

    return LlmSettings(
        model=os.getenv('FLIGHTMAIL_LLM_MODEL') or DEFAULT_LLM_MODEL,
        max_body_chars=max_body_chars if max_body_chars is not None else DEFAULT_MAX_BODY_CHARS,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
        api_key=_get_llm_api_key(),
    )
