import argparse
import logging
import os
import sys
from functools import partial

import gradio as gr

from agents.analyst import build_analyst
from dash_board import DASHBOARD_TXT
from llm_config import LLMConfig, warn_if_unconfigured
from logic.logic_analysis import (
    feedback_action,
    fetch_analysis_action,
    prepare_results_action,
    relabel_inputs_action,
    restart_action,
)
from logic.tags import (
    AGE_CHOICES,
    CONSTELLATION_CHOICES,
    DECISION_FACTOR_LABELS,
    DISC_CHOICES,
    EMOTION_LABELS,
    ENNEAGRAM_CHOICES,
    GENDER_CHOICES,
    MBTI_CHOICES,
    QUESTION_MAX_LEN,
    SLIDER_DEFAULT,
    SLIDER_MAX,
    SLIDER_MIN,
    ZODIAC_CHOICES,
    empty_custom_factor_frame,
)

_parser = argparse.ArgumentParser(add_help=False)
_parser.add_argument("--mode", type=str, default=None)
_args, _unknown = _parser.parse_known_args(sys.argv[1:])
if _args.mode == "test":
    os.environ["UI_TEST_MODE"] = "true"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

CONFIG = LLMConfig.from_env()
warn_if_unconfigured(CONFIG)
analyst = build_analyst(CONFIG)


def switch_page(page_name: str):
    """Return visibility updates for the main pages based on the active page name."""
    return (
        gr.update(visible=(page_name == "analysis")),
        gr.update(visible=(page_name == "about")),
    )


with gr.Blocks(title="LifeChoice AI") as demo:
    analysis_state = gr.State({})

    # ========== Header ==========
    with gr.Row():
        gr.Markdown("# 🧭 LifeChoice AI")
        language_radio = gr.Radio(
            label="Language / 语言",
            choices=[("EN", "en"), ("中", "zh")],
            value="en",
        )
        btn_analysis = gr.Button("💡 Analysis")
        btn_about = gr.Button("📖 About")

    with gr.Column(visible=True) as page_analysis:
        # ========== Home panel ==========
        with gr.Column(visible=True) as home_panel:
            gr.Markdown("## Describe your dilemma / 描述你的困境")
            question_input = gr.Textbox(
                label=f"Your question (max {QUESTION_MAX_LEN} characters)",
                placeholder="e.g., Should I change jobs?",
                max_length=QUESTION_MAX_LEN,
                lines=2,
            )
            with gr.Row():
                option_a = gr.Textbox(label="Option A (optional)")
                option_b = gr.Textbox(label="Option B (optional)")

            gr.Markdown("### Basic information / 基础信息")
            with gr.Row():
                age_input = gr.Radio(label="Age (required)", choices=AGE_CHOICES)
                gender_input = gr.Radio(label="Gender (required)", choices=GENDER_CHOICES)

            gr.Markdown("### Personality type / 性格类型")
            with gr.Row():
                mbti_input = gr.Dropdown(label="MBTI", choices=MBTI_CHOICES)
                disc_input = gr.Dropdown(label="DISC", choices=DISC_CHOICES)
                enneagram_input = gr.Dropdown(label="Enneagram", choices=ENNEAGRAM_CHOICES)
            with gr.Row():
                constellation_input = gr.Dropdown(
                    label="Constellation", choices=CONSTELLATION_CHOICES["en"]
                )
                zodiac_input = gr.Dropdown(label="Chinese zodiac", choices=ZODIAC_CHOICES["en"])
            self_perception_input = gr.Textbox(
                label="How would you describe yourself? (comma separated, optional)"
            )

            gr.Markdown("### Emotional state (1-10) / 情绪状态")
            with gr.Row():
                emotion_sliders = [
                    gr.Slider(
                        minimum=SLIDER_MIN,
                        maximum=SLIDER_MAX,
                        step=1,
                        value=SLIDER_DEFAULT,
                        label=label,
                    )
                    for label in EMOTION_LABELS["en"]
                ]
            custom_emotion_table = gr.Dataframe(
                label="Custom emotions (label, value 1-10) / 自定义情绪",
                headers=["label", "value"],
                datatype=["str", "number"],
                value=empty_custom_factor_frame(),
                type="pandas",
                interactive=True,
            )

            gr.Markdown("### Decision factors (1-10) / 决策因子")
            with gr.Row():
                factor_sliders = [
                    gr.Slider(
                        minimum=SLIDER_MIN,
                        maximum=SLIDER_MAX,
                        step=1,
                        value=SLIDER_DEFAULT,
                        label=label,
                    )
                    for label in DECISION_FACTOR_LABELS["en"]
                ]

            custom_factor_table = gr.Dataframe(
                label="Custom factors (label, value 1-10) / 自定义因素",
                headers=["label", "value"],
                datatype=["str", "number"],
                value=empty_custom_factor_frame(),
                type="pandas",
                interactive=True,
            )

            start_btn = gr.Button("Start analysis / 开始分析", variant="primary")

        status_md = gr.Markdown("")

        # ========== Results panel ==========
        with gr.Column(visible=False) as results_panel:
            gr.Markdown("## AI Analysis Results / AI分析结果")
            question_recap = gr.Markdown("")

            gr.Markdown("### 💡 Expert Recommendation / 专家建议")
            recommendation_box = gr.Textbox(show_label=False, lines=5, interactive=False)

            gr.Markdown("### Analysis & Findings / 分析与发现")
            with gr.Row():
                core_traits_box = gr.Textbox(label="Core Traits Analysis", lines=4, interactive=False)
                behavior_box = gr.Textbox(label="Behavior Patterns", lines=4, interactive=False)
            with gr.Row():
                emotional_box = gr.Textbox(label="Emotional Patterns", lines=4, interactive=False)
                social_box = gr.Textbox(label="Social Characteristics", lines=4, interactive=False)

            score_md = gr.Markdown("")
            radar_plot = gr.Plot(label="Radar")

            gr.Markdown("### Advice & Outlook / 建议与展望")
            with gr.Row():
                growth_box = gr.Textbox(label="Personal Growth", lines=4, interactive=False)
                relations_box = gr.Textbox(label="Interpersonal Relations", lines=4, interactive=False)
            with gr.Row():
                career_box = gr.Textbox(label="Career Planning", lines=4, interactive=False)
                mental_box = gr.Textbox(label="Mental Health", lines=4, interactive=False)

            gr.Markdown("Was this advice helpful? / 这个建议对你有帮助吗？")
            with gr.Row():
                like_btn = gr.Button("👍 Helpful")
                dislike_btn = gr.Button("👎 Not Helpful")
            feedback_md = gr.Markdown("")

            restart_btn = gr.Button("Start Over / 重新开始", variant="secondary")

    with gr.Column(visible=False) as page_about:
        gr.Markdown(DASHBOARD_TXT)

    # ====== Event bindings ======

    findings_boxes = [core_traits_box, behavior_box, emotional_box, social_box]
    advice_boxes = [growth_box, relations_box, career_box, mental_box]

    btn_analysis.click(
        lambda: switch_page("analysis"),
        inputs=None,
        outputs=[page_analysis, page_about],
    )

    btn_about.click(
        lambda: switch_page("about"),
        inputs=None,
        outputs=[page_analysis, page_about],
    )

    language_radio.change(
        relabel_inputs_action,
        inputs=[language_radio],
        outputs=[*emotion_sliders, *factor_sliders, constellation_input, zodiac_input],
    )

    # scores render first, then the three remote calls fill their panels
    start_btn.click(
        prepare_results_action,
        inputs=[
            language_radio,
            question_input,
            option_a,
            option_b,
            age_input,
            gender_input,
            mbti_input,
            disc_input,
            enneagram_input,
            constellation_input,
            zodiac_input,
            self_perception_input,
            custom_factor_table,
            custom_emotion_table,
            *emotion_sliders,
            *factor_sliders,
        ],
        outputs=[
            analysis_state,
            home_panel,
            results_panel,
            status_md,
            question_recap,
            recommendation_box,
            *findings_boxes,
            score_md,
            radar_plot,
            *advice_boxes,
        ],
    ).then(
        partial(fetch_analysis_action, analyst),
        inputs=[analysis_state],
        outputs=[status_md, recommendation_box, *findings_boxes, *advice_boxes],
    )

    like_btn.click(
        lambda lang: feedback_action("like", lang),
        inputs=[language_radio],
        outputs=[feedback_md],
    )

    dislike_btn.click(
        lambda lang: feedback_action("dislike", lang),
        inputs=[language_radio],
        outputs=[feedback_md],
    )

    restart_btn.click(
        restart_action,
        inputs=None,
        outputs=[analysis_state, home_panel, results_panel, status_md, feedback_md],
    )

if __name__ == "__main__":
    demo.launch()
