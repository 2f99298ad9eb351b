"""Tests for turning chat-completion envelopes into panel records."""

from __future__ import annotations

import json
import logging

from agents.parser import (
    ADVICE_KEYS,
    DEFAULT_ADVICE,
    DEFAULT_FINDINGS,
    FINDINGS_KEYS,
    PANEL_DEFAULTS,
    RECOMMENDATION_PLACEHOLDER,
    extract_content,
    fill_panel_defaults,
    parse_advice,
    parse_findings,
    parse_structured_response,
    parse_text_response,
)


def _envelope(content):
    return {
        "id": "cmpl-1",
        "choices": [{"message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
        "created": 0,
        "model": "Qwen/QwQ-32B",
        "object": "chat.completion",
    }


class TestExtractContent:
    def test_reads_first_choice(self) -> None:
        assert extract_content(_envelope("hello")) == "hello"

    def test_missing_parts(self) -> None:
        assert extract_content({}) is None
        assert extract_content({"choices": []}) is None
        assert extract_content({"choices": [{}]}) is None
        assert extract_content({"choices": [{"message": {"content": ""}}]}) is None
        assert extract_content(None) is None


class TestTextVariant:
    def test_returns_content_unmodified(self) -> None:
        text = "  I believe you should seize this opportunity.\n"
        assert parse_text_response(_envelope(text), "en") == text

    def test_placeholder_without_choices(self) -> None:
        assert parse_text_response({"choices": []}, "zh") == RECOMMENDATION_PLACEHOLDER["zh"]
        assert parse_text_response({}, "en") == RECOMMENDATION_PLACEHOLDER["en"]


class TestStructuredVariant:
    def test_valid_json_returned_as_is(self) -> None:
        record = {k: f"text for {k}" for k in FINDINGS_KEYS}
        assert parse_findings(_envelope(json.dumps(record)), "en") == record

    def test_missing_keys_stay_absent(self) -> None:
        parsed = parse_advice(_envelope('{"personalGrowth": "grow"}'), "en")
        assert parsed == {"personalGrowth": "grow"}

    def test_malformed_json_gives_full_default(self) -> None:
        parsed = parse_findings(_envelope("Here is my analysis: ..."), "zh")
        assert parsed == DEFAULT_FINDINGS["zh"]
        assert set(parsed) == set(FINDINGS_KEYS)
        assert all(parsed.values())

    def test_non_object_gives_full_default(self) -> None:
        assert parse_advice(_envelope('["a", "b"]'), "en") == DEFAULT_ADVICE["en"]
        assert parse_advice(_envelope("42"), "en") == DEFAULT_ADVICE["en"]

    def test_default_is_a_copy(self) -> None:
        parsed = parse_advice(_envelope("oops"), "en")
        parsed["mentalHealth"] = "changed"
        assert DEFAULT_ADVICE["en"]["mentalHealth"] != "changed"

    def test_no_content_parses_as_empty_object(self) -> None:
        assert parse_findings({"choices": []}, "en") == {}

    def test_code_fence_stripped(self) -> None:
        body = '```json\n{"careerPlanning": "lead"}\n```'
        assert parse_advice(_envelope(body), "en") == {"careerPlanning": "lead"}

    def test_failure_logged_on_injected_logger(self, caplog) -> None:
        log = logging.getLogger("test.parser")
        with caplog.at_level(logging.WARNING, logger="test.parser"):
            parse_structured_response(_envelope("{not json"), {"a": "b"}, log)
        assert any(r.name == "test.parser" for r in caplog.records)


class TestPanelDefaults:
    def test_fills_falsy_fields(self) -> None:
        filled = fill_panel_defaults({"coreTraits": "bold", "behaviorPatterns": ""}, "findings", "en")
        assert filled["coreTraits"] == "bold"
        assert filled["behaviorPatterns"] == PANEL_DEFAULTS["findings"]["en"]["behaviorPatterns"]
        assert list(filled) == list(FINDINGS_KEYS)

    def test_none_record(self) -> None:
        filled = fill_panel_defaults(None, "advice", "zh")
        assert filled == PANEL_DEFAULTS["advice"]["zh"]
        assert list(filled) == list(ADVICE_KEYS)
