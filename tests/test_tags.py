"""Tests for building the in-memory tag records."""

from __future__ import annotations

import pandas as pd

from logic.tags import (
    build_selected_tags,
    build_user_input,
    clamp_slider,
    custom_factors_from_frame,
    default_decision_factors,
    default_emotions,
    default_selected_tags,
    make_slider_group,
    parse_self_perception,
)


class TestClampSlider:
    def test_in_range_unchanged(self) -> None:
        assert clamp_slider(7) == 7

    def test_clamps_both_ends(self) -> None:
        assert clamp_slider(0) == 1
        assert clamp_slider(-3) == 1
        assert clamp_slider(11) == 10

    def test_coerces_floats_and_strings(self) -> None:
        assert clamp_slider(6.0) == 6
        assert clamp_slider("8") == 8

    def test_halves_round_up(self) -> None:
        assert clamp_slider(5.5) == 6
        assert clamp_slider(6.5) == 7
        assert clamp_slider("2.5") == 3
        assert clamp_slider(9.5) == 10

    def test_halves_round_up_in_table(self) -> None:
        frame = pd.DataFrame({"label": ["Commute"], "value": [6.5]})
        assert custom_factors_from_frame(frame) == [{"label": "Commute", "value": 7}]

    def test_unreadable_becomes_default(self) -> None:
        assert clamp_slider(None) == 5
        assert clamp_slider("abc") == 5
        assert clamp_slider(float("nan")) == 5
        assert clamp_slider(float("inf")) == 5


class TestSliderGroup:
    def test_pairs_and_dicts(self) -> None:
        group = make_slider_group([("Calm", 3), {"label": "Anxious", "value": 12}])
        assert group == [{"label": "Calm", "value": 3}, {"label": "Anxious", "value": 10}]

    def test_duplicate_labels_keep_first(self) -> None:
        group = make_slider_group([("Calm", 3), ("Calm", 9)])
        assert group == [{"label": "Calm", "value": 3}]

    def test_blank_labels_skipped(self) -> None:
        assert make_slider_group([("  ", 3), (None, 4)]) == []

    def test_defaults_per_language(self) -> None:
        assert [e["label"] for e in default_emotions("zh")][-1] == "平静"
        assert [f["label"] for f in default_decision_factors("en")][0] == "Urgency Level"
        assert all(e["value"] == 5 for e in default_emotions("en"))


class TestSelectedTags:
    def test_empty_record_shape(self) -> None:
        tags = default_selected_tags()
        assert set(tags) == {"basicInfo", "selfPerception", "currentSituation", "optionEvaluation"}

    def test_unselected_basic_info_absent(self) -> None:
        tags = build_selected_tags(age="18-25", gender="", zodiac=None)
        assert tags["basicInfo"] == {"age": "18-25"}

    def test_situation_groups(self) -> None:
        tags = build_selected_tags(
            emotions=[("Calm", 4)],
            decision_factors=[("Urgency Level", 15)],
            custom_factors=[("Commute", 0)],
        )
        situation = tags["currentSituation"]
        assert situation["emotions"] == [{"label": "Calm", "value": 4}]
        assert situation["decisionFactors"] == [{"label": "Urgency Level", "value": 10}]
        assert situation["customFactors"] == [{"label": "Commute", "value": 1}]

    def test_user_input_truncated(self) -> None:
        ui = build_user_input("x" * 80, ["a ", None])
        assert len(ui["question"]) == 50
        assert ui["options"] == ["a", ""]

    def test_self_perception_split(self) -> None:
        assert parse_self_perception("calm, curious，stubborn\nshy") == ["calm", "curious", "stubborn", "shy"]
        assert parse_self_perception("") == []


class TestCustomFactorFrame:
    def test_reads_rows(self) -> None:
        df = pd.DataFrame({"label": ["Commute", "Salary", None], "value": [3, 20, 4]})
        assert custom_factors_from_frame(df) == [
            {"label": "Commute", "value": 3},
            {"label": "Salary", "value": 10},
        ]

    def test_empty_or_missing(self) -> None:
        assert custom_factors_from_frame(None) == []
        assert custom_factors_from_frame(pd.DataFrame(columns=["label", "value"])) == []

    def test_missing_value_defaults(self) -> None:
        df = pd.DataFrame({"label": ["Commute"], "value": [float("nan")]})
        assert custom_factors_from_frame(df) == [{"label": "Commute", "value": 5}]
