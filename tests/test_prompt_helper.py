"""Tests for prompt assembly."""

from __future__ import annotations

from agents.prompt_decision import SYSTEM_PROMPTS
from agents.prompt_helper import (
    build_prompts,
    format_sliders,
    normalize_language,
    render_user_summary,
)
from logic.tags import build_selected_tags


def _tags(**extra):
    return build_selected_tags(
        age="26-35",
        gender="Female",
        emotions=[("Calm", 3), ("Anxious", 8)],
        decision_factors=[("Urgency Level", 9), ("Skills Possessed", 4)],
        **extra,
    )


class TestSummary:
    def test_contains_every_slider_with_value(self) -> None:
        summary = render_user_summary("Should I change jobs?", _tags(), "en")
        for part in ("Calm: 3/10", "Anxious: 8/10", "Urgency Level: 9/10", "Skills Possessed: 4/10"):
            assert part in summary
        assert "Should I change jobs?" in summary
        assert "26-35" in summary
        assert "Female" in summary

    def test_slider_delimiter(self) -> None:
        assert format_sliders([{"label": "A", "value": 1}, {"label": "B", "value": 2}]) == "A: 1/10, B: 2/10"

    def test_missing_fields_render_empty(self) -> None:
        summary = render_user_summary("", {}, "en")
        assert summary.splitlines() == [
            "User question: ",
            "Age: ",
            "Gender: ",
            "Emotional state: ",
            "Decision factors: ",
        ]

    def test_none_tags_do_not_raise(self) -> None:
        assert "用户问题: 换工作?" in render_user_summary("换工作?", None, "zh")

    def test_optional_lines_only_when_present(self) -> None:
        tags = _tags(mbti="INTJ", self_perception=["curious"], custom_factors=[("Commute", 6)])
        summary = render_user_summary("q", tags, "en", options=["Stay", "Leave"])
        assert "Options: Stay / Leave" in summary
        assert "Personality: INTJ" in summary
        assert "Self-perception: curious" in summary
        assert "Custom factors: Commute: 6/10" in summary

        plain = render_user_summary("q", _tags(), "en", options=["", ""])
        assert "Options" not in plain
        assert "Personality" not in plain


class TestBuildPrompts:
    def test_three_calls_with_system_then_user(self) -> None:
        prompts = build_prompts("q", _tags(), "en")
        assert set(prompts) == {"recommendation", "findings", "advice"}
        for msgs in prompts.values():
            assert [m["role"] for m in msgs] == ["system", "user"]

    def test_summary_shared_verbatim(self) -> None:
        prompts = build_prompts("q", _tags(), "zh")
        users = {msgs[1]["content"] for msgs in prompts.values()}
        assert len(users) == 1

    def test_localized_system_prompts(self) -> None:
        zh = build_prompts("q", _tags(), "zh")
        en = build_prompts("q", _tags(), "en")
        assert zh["recommendation"][0]["content"] == SYSTEM_PROMPTS["recommendation"]["zh"].strip()
        assert "150 words" in en["recommendation"][0]["content"]
        assert "150字" in zh["recommendation"][0]["content"]

    def test_structured_prompts_name_their_keys(self) -> None:
        prompts = build_prompts("q", _tags(), "en")
        for key in ("coreTraits", "behaviorPatterns", "emotionalPatterns", "socialCharacteristics"):
            assert key in prompts["findings"][0]["content"]
        for key in ("personalGrowth", "interpersonalRelations", "careerPlanning", "mentalHealth"):
            assert key in prompts["advice"][0]["content"]

    def test_unknown_language_falls_back_to_english(self) -> None:
        assert normalize_language("fr") == "en"
        assert normalize_language(None) == "en"
        assert normalize_language("ZH") == "zh"
        prompts = build_prompts("q", _tags(), "fr")
        assert prompts["advice"][0]["content"].startswith("As a professional life planner")
