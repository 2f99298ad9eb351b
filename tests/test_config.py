"""Tests for environment-driven LLM configuration."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from llm_config import DEFAULT_BASE_URL, DEFAULT_MODEL_NAME, LLMConfig, warn_if_unconfigured


class TestFromEnv:
    def test_defaults(self) -> None:
        cfg = LLMConfig.from_env({})
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.model_name == DEFAULT_MODEL_NAME
        assert cfg.api_key is None
        assert cfg.timeout is None
        assert cfg.ui_test_mode is False
        assert cfg.completions_url == "https://api.siliconflow.cn/v1/chat/completions"

    def test_overrides(self) -> None:
        cfg = LLMConfig.from_env(
            {
                "LLM_BASE_URL": "http://127.0.0.1:8000/v1/",
                "LLM_MODEL_NAME": "local-model",
                "LLM_API_KEY": "sk-abc",
                "LLM_TIMEOUT": "30",
                "UI_TEST_MODE": "yes",
            }
        )
        assert cfg.completions_url == "http://127.0.0.1:8000/v1/chat/completions"
        assert cfg.model_name == "local-model"
        assert cfg.api_key == "sk-abc"
        assert cfg.timeout == 30.0
        assert cfg.ui_test_mode is True

    def test_siliconflow_key_fallback(self) -> None:
        assert LLMConfig.from_env({"SILICONFLOW_API_KEY": "sk-sf"}).api_key == "sk-sf"
        both = LLMConfig.from_env({"SILICONFLOW_API_KEY": "sk-sf", "LLM_API_KEY": "sk-llm"})
        assert both.api_key == "sk-llm"

    def test_invalid_timeout_ignored(self) -> None:
        assert LLMConfig.from_env({"LLM_TIMEOUT": "soon"}).timeout is None

    def test_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("LLM_MODEL_NAME", "from-env")
        assert LLMConfig.from_env().model_name == "from-env"

    def test_frozen(self) -> None:
        cfg = LLMConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.api_key = "changed"  # type: ignore[misc]


class TestStartupWarning:
    def test_missing_key_warns(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="llm_config"):
            assert warn_if_unconfigured(LLMConfig()) is True
        assert "LLM_API_KEY" in caplog.text

    def test_no_warning_with_key_or_test_mode(self) -> None:
        assert warn_if_unconfigured(LLMConfig(api_key="sk")) is False
        assert warn_if_unconfigured(LLMConfig(ui_test_mode=True)) is False
