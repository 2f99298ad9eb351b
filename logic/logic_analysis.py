import logging
from typing import Any, Dict, List, Tuple

import gradio as gr
import plotly.graph_objects as go

from agents.analyst import DecisionAnalyst
from agents.base import InferenceError
from agents.parser import ADVICE_KEYS, FINDINGS_KEYS, fill_panel_defaults
from agents.prompt_helper import normalize_language
from logic.scoring import compute_scores, radar_frame
from logic.tags import (
    CONSTELLATION_CHOICES,
    DECISION_FACTOR_LABELS,
    EMOTION_LABELS,
    ZODIAC_CHOICES,
    build_selected_tags,
    build_user_input,
    custom_factors_from_frame,
    parse_self_perception,
)

logger = logging.getLogger(__name__)

N_EMOTIONS = len(EMOTION_LABELS["en"])
N_FACTORS = len(DECISION_FACTOR_LABELS["en"])

UI_TEXTS = {
    "en": {
        "need_question": "Please describe your dilemma first.",
        "need_basic_info": "Please select your age bracket and gender.",
        "analyzing": "Analyzing...",
        "failed": "Analysis generation failed, please try again",
        "score": "Comprehensive Assessment",
        "chart_name": "Overall Score",
        "thanks_like": "Thanks! Glad this was helpful.",
        "thanks_dislike": "Thanks for the feedback, we'll keep improving.",
    },
    "zh": {
        "need_question": "请先描述你的困境。",
        "need_basic_info": "请选择年龄段和性别。",
        "analyzing": "分析中...",
        "failed": "分析生成失败，请稍后重试",
        "score": "综合评估",
        "chart_name": "综合评分",
        "thanks_like": "谢谢！很高兴对你有帮助。",
        "thanks_dislike": "感谢反馈，我们会继续改进。",
    },
}


def _texts(language: str) -> Dict[str, str]:
    return UI_TEXTS[normalize_language(language)]


# ================== Language switch ==================


def relabel_inputs_action(language: str):
    """Relabel the default sliders and localized dropdowns when the language changes."""
    lang = normalize_language(language)
    emotion_updates = [gr.update(label=label) for label in EMOTION_LABELS[lang]]
    factor_updates = [gr.update(label=label) for label in DECISION_FACTOR_LABELS[lang]]
    return (
        *emotion_updates,
        *factor_updates,
        gr.update(choices=CONSTELLATION_CHOICES[lang], value=None),
        gr.update(choices=ZODIAC_CHOICES[lang], value=None),
    )


# ================== Radar chart ==================


def build_radar_figure(dimensions: List[Dict[str, Any]], language: str = "en") -> go.Figure:
    df = radar_frame(dimensions)
    # close the polygon
    theta = list(df["name"]) + [df["name"].iloc[0]]
    r = list(df["value"]) + [int(df["value"].iloc[0])]
    fig = go.Figure(
        go.Scatterpolar(
            r=r,
            theta=theta,
            fill="toself",
            name=_texts(language)["chart_name"],
            line_color="#3B82F6",
        )
    )
    fig.update_layout(
        polar={"radialaxis": {"visible": True, "range": [0, 100]}},
        showlegend=True,
        margin={"l": 40, "r": 40, "t": 30, "b": 30},
    )
    return fig


# ================== Start analysis ==================


def collect_request(
    language: str,
    question: str,
    option_a: str,
    option_b: str,
    age: str,
    gender: str,
    mbti: str,
    disc: str,
    enneagram: str,
    constellation: str,
    zodiac: str,
    self_perception_text: str,
    custom_frame,
    custom_emotion_frame,
    slider_values: Tuple[Any, ...],
) -> Dict[str, Any]:
    """Build the immutable request snapshot (user input + tags + language)."""
    lang = normalize_language(language)
    emotion_values = slider_values[:N_EMOTIONS]
    factor_values = slider_values[N_EMOTIONS:N_EMOTIONS + N_FACTORS]
    # user-added emotions follow the defaults; a repeated label keeps the default slider
    emotions = [*zip(EMOTION_LABELS[lang], emotion_values), *custom_factors_from_frame(custom_emotion_frame)]
    tags = build_selected_tags(
        age=age,
        gender=gender,
        emotions=emotions,
        decision_factors=zip(DECISION_FACTOR_LABELS[lang], factor_values),
        custom_factors=custom_factors_from_frame(custom_frame),
        constellation=constellation,
        zodiac=zodiac,
        mbti=mbti,
        disc=disc,
        enneagram=enneagram,
        self_perception=parse_self_perception(self_perception_text),
    )
    return {
        "userInput": build_user_input(question, [option_a, option_b]),
        "selectedTags": tags,
        "language": lang,
    }


def _results_outputs(
    request: Dict[str, Any],
    status: str,
    recommendation: str,
    findings: List[str],
    advice: List[str],
    score_md: str,
    figure,
    show_results: bool,
):
    return (
        request,
        gr.update(visible=not show_results),  # home panel
        gr.update(visible=show_results),      # results panel
        status,
        f"### {request.get('userInput', {}).get('question', '')}" if request else "",
        recommendation,
        *findings,
        score_md,
        figure,
        *advice,
    )


def prepare_results_action(language, question, option_a, option_b, age, gender, mbti, disc,
                           enneagram, constellation, zodiac, self_perception_text, custom_frame,
                           custom_emotion_frame, *slider_values):
    """
    Gradio callback: validate the form, compute the local scores and switch to
    the results panel with placeholders. The network calls run in the next step.
    """
    texts = _texts(language)
    blank_findings = [""] * len(FINDINGS_KEYS)
    blank_advice = [""] * len(ADVICE_KEYS)

    if not (question or "").strip():
        return _results_outputs({}, texts["need_question"], "", blank_findings, blank_advice, "", None, False)
    if not age or not gender:
        return _results_outputs({}, texts["need_basic_info"], "", blank_findings, blank_advice, "", None, False)

    request = collect_request(
        language, question, option_a, option_b, age, gender, mbti, disc, enneagram,
        constellation, zodiac, self_perception_text, custom_frame, custom_emotion_frame,
        slider_values,
    )
    scores = compute_scores(request["selectedTags"], request["language"])
    request["scores"] = scores

    analyzing = texts["analyzing"]
    score_md = f"## {texts['score']}: {scores['compositeScore']}"
    figure = build_radar_figure(scores["radarDimensions"], request["language"])
    return _results_outputs(
        request,
        analyzing,
        analyzing,
        [analyzing] * len(FINDINGS_KEYS),
        [analyzing] * len(ADVICE_KEYS),
        score_md,
        figure,
        True,
    )


def run_analysis(analyst: DecisionAnalyst, request: Dict[str, Any]) -> Dict[str, Any]:
    """Run the three remote calls and merge them with the local scores into an AnalysisResult."""
    user_input = request["userInput"]
    tags = request["selectedTags"]
    language = request["language"]
    remote = analyst.analyze_all(user_input["question"], tags, language, options=user_input["options"])
    scores = request.get("scores") or compute_scores(tags, language)
    return {
        "recommendationText": remote["recommendationText"],
        "traitFindings": remote["traitFindings"],
        "advice": remote["advice"],
        "compositeScore": scores["compositeScore"],
        "radarDimensions": scores["radarDimensions"],
    }


def fetch_analysis_action(analyst: DecisionAnalyst, request: Dict[str, Any]):
    """
    Gradio callback: fill the three network panels.

    Returns (status, recommendation, *findings, *advice). On any failure one
    shared error message is shown and no panel is populated.
    """
    if not request:
        return (gr.update(),) * (2 + len(FINDINGS_KEYS) + len(ADVICE_KEYS))

    language = request["language"]
    try:
        result = run_analysis(analyst, request)
    except InferenceError:
        logger.exception("Analysis request failed")
        error = _texts(language)["failed"]
        return (error, error, *([""] * len(FINDINGS_KEYS)), *([""] * len(ADVICE_KEYS)))

    findings = fill_panel_defaults(result["traitFindings"], "findings", language)
    advice = fill_panel_defaults(result["advice"], "advice", language)
    return (
        "",
        result["recommendationText"],
        *[findings[k] for k in FINDINGS_KEYS],
        *[advice[k] for k in ADVICE_KEYS],
    )


# ================== Feedback / restart ==================


def feedback_action(choice: str, language: str) -> str:
    """Session-only feedback acknowledgement; nothing is stored."""
    texts = _texts(language)
    return texts["thanks_like"] if choice == "like" else texts["thanks_dislike"]


def restart_action():
    return {}, gr.update(visible=True), gr.update(visible=False), "", ""
