# prompt_helper.py
# Message-based builders for the three analysis calls (recommendation, findings, advice).

from typing import Any, Dict, List, Optional

from agents.prompt_decision import SUMMARY_LABELS, SYSTEM_PROMPTS

SUPPORTED_LANGUAGES = ("en", "zh")
ANALYSIS_KINDS = ("recommendation", "findings", "advice")

PERSONALITY_KEYS = ("mbti", "disc", "enneagram", "constellation", "zodiac")


def normalize_language(language: Optional[str]) -> str:
    lang = (language or "").strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else "en"


# ---------------- Summary rendering ----------------

def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def format_sliders(group: Optional[List[Dict[str, Any]]]) -> str:
    """Render a slider group as 'label: value/10' joined by ', '."""
    parts = []
    for item in group or []:
        if not isinstance(item, dict):
            continue
        parts.append(f"{_text(item.get('label'))}: {_text(item.get('value'))}/10")
    return ", ".join(parts)


def render_user_summary(
    question: str,
    selected_tags: Optional[Dict[str, Any]],
    language: str = "en",
    options: Optional[List[str]] = None,
) -> str:
    """
    Human-readable summary block shared verbatim by all three calls.

    Question, age, gender, emotions and decision factors are always present
    (empty when missing). Options, personality, self-perception and custom
    factors are only added when the user filled them in.
    """
    labels = SUMMARY_LABELS[normalize_language(language)]
    tags = selected_tags or {}
    basic = tags.get("basicInfo") or {}
    situation = tags.get("currentSituation") or {}

    lines = [
        f"{labels['question']}: {_text(question)}",
        f"{labels['age']}: {_text(basic.get('age'))}",
        f"{labels['gender']}: {_text(basic.get('gender'))}",
        f"{labels['emotions']}: {format_sliders(situation.get('emotions'))}",
        f"{labels['decision_factors']}: {format_sliders(situation.get('decisionFactors'))}",
    ]

    filled_options = [o.strip() for o in (options or []) if o and o.strip()]
    if filled_options:
        lines.insert(1, f"{labels['options']}: {' / '.join(filled_options)}")

    personality = [_text(basic.get(k)) for k in PERSONALITY_KEYS if _text(basic.get(k))]
    if personality:
        lines.append(f"{labels['personality']}: {', '.join(personality)}")

    self_perception = [_text(s) for s in tags.get("selfPerception") or [] if _text(s)]
    if self_perception:
        lines.append(f"{labels['self_perception']}: {', '.join(self_perception)}")

    custom = format_sliders(situation.get("customFactors"))
    if custom:
        lines.append(f"{labels['custom_factors']}: {custom}")

    return "\n".join(lines)


# ---------------- Message lists ----------------

def build_messages(kind: str, summary: str, language: str = "en") -> List[Dict[str, str]]:
    system_text = SYSTEM_PROMPTS[kind][normalize_language(language)]
    return [
        {"role": "system", "content": system_text.strip()},
        {"role": "user", "content": summary},
    ]


def build_prompts(
    question: str,
    selected_tags: Optional[Dict[str, Any]],
    language: str = "en",
    options: Optional[List[str]] = None,
) -> Dict[str, List[Dict[str, str]]]:
    """Return {'recommendation': msgs, 'findings': msgs, 'advice': msgs}."""
    summary = render_user_summary(question, selected_tags, language, options=options)
    return {kind: build_messages(kind, summary, language) for kind in ANALYSIS_KINDS}
