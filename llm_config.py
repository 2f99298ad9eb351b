"""
Central configuration for the remote LLM used by the decision assistant.

- UI_TEST_MODE: if True, do not call any real LLM, return canned outputs.
- LLM_BASE_URL: base URL of the OpenAI-compatible provider (SiliconFlow by default).
- LLM_MODEL_NAME: model identifier sent with every request.
- LLM_API_KEY: bearer credential (SILICONFLOW_API_KEY is accepted as a fallback).
- LLM_TIMEOUT: optional HTTP timeout in seconds; unset means no explicit timeout.

The values are read once at process start by LLMConfig.from_env() and the
resulting object is passed to the client. Nothing here is mutated at runtime.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.siliconflow.cn/v1"
DEFAULT_MODEL_NAME = "Qwen/QwQ-32B"

# Fixed sampling parameters for every analysis call
TEMPERATURE = 0.7
MAX_TOKENS = 2000


def _bool_env(env: Mapping[str, str], name: str, default: str = "false") -> bool:
    value = env.get(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _timeout_env(env: Mapping[str, str], name: str) -> Optional[float]:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return None


@dataclass(frozen=True)
class LLMConfig:
    base_url: str = DEFAULT_BASE_URL
    model_name: str = DEFAULT_MODEL_NAME
    api_key: Optional[str] = None
    timeout: Optional[float] = None
    ui_test_mode: bool = False

    @property
    def completions_url(self) -> str:
        return self.base_url.rstrip("/") + "/chat/completions"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "LLMConfig":
        """Build the config from environment variables (os.environ by default)."""
        env = os.environ if env is None else env
        api_key = env.get("LLM_API_KEY") or env.get("SILICONFLOW_API_KEY") or None
        return cls(
            base_url=env.get("LLM_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            model_name=env.get("LLM_MODEL_NAME", DEFAULT_MODEL_NAME),
            api_key=api_key,
            timeout=_timeout_env(env, "LLM_TIMEOUT"),
            ui_test_mode=_bool_env(env, "UI_TEST_MODE"),
        )


def warn_if_unconfigured(config: LLMConfig) -> bool:
    """Log a startup warning when no credential is set. Returns True if one was logged."""
    if config.api_key or config.ui_test_mode:
        return False
    logger.warning(
        "No LLM_API_KEY found; requests to %s will be sent without credentials "
        "and will most likely fail.",
        config.completions_url,
    )
    return True
