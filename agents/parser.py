"""
Response parsing for the three analysis calls.

The recommendation call is free text. The findings and advice calls are
expected to return a JSON object with four fixed keys; anything that does not
parse to an object is replaced by a complete localized default record.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from agents.prompt_helper import normalize_language

logger = logging.getLogger(__name__)

FINDINGS_KEYS = ("coreTraits", "behaviorPatterns", "emotionalPatterns", "socialCharacteristics")
ADVICE_KEYS = ("personalGrowth", "interpersonalRelations", "careerPlanning", "mentalHealth")

RECOMMENDATION_PLACEHOLDER = {
    "zh": "无法生成建议，请稍后重试",
    "en": "Unable to generate a recommendation, please try again later",
}

# Returned when the model reply cannot be parsed at all
DEFAULT_FINDINGS = {
    "zh": {
        "coreTraits": "您的性格展现出良好的平衡性，在决策中表现出理性和情感的结合。",
        "behaviorPatterns": "您采用系统化的决策方法，在压力下能够保持冷静和客观。",
        "emotionalPatterns": "您的情绪调节能力良好，能够有效管理压力和焦虑情绪。",
        "socialCharacteristics": "您具有良好的社交技能和沟通能力，善于与他人协作。",
    },
    "en": {
        "coreTraits": "Your personality shows good balance, combining rationality and emotion in decision-making.",
        "behaviorPatterns": "You use systematic decision-making methods and remain calm and objective under pressure.",
        "emotionalPatterns": "Your emotional regulation is well-developed, effectively managing stress and anxiety.",
        "socialCharacteristics": "You have good social skills and communication abilities, skilled at collaboration.",
    },
}

DEFAULT_ADVICE = {
    "zh": {
        "personalGrowth": "专注于发展你的分析优势，同时建立情商。练习正念技巧以增强决策清晰度。",
        "interpersonalRelations": "利用你天生的沟通技巧建立更牢固的关系。练习积极倾听和同理心回应。",
        "careerPlanning": "你的系统化方法适合分析领域的领导角色。考虑将战略思维与人员管理相结合。",
        "mentalHealth": "通过定期反思和压力管理技巧保持情绪平衡。练习感恩日记，建立健康界限。",
    },
    "en": {
        "personalGrowth": "Focus on developing your analytical strengths while building emotional intelligence. Practice mindfulness techniques.",
        "interpersonalRelations": "Leverage your natural communication skills to build stronger relationships. Practice active listening.",
        "careerPlanning": "Your systematic approach suits leadership roles in analytical fields. Consider strategic thinking with people management.",
        "mentalHealth": "Maintain emotional balance through regular reflection and stress management techniques. Practice gratitude journaling.",
    },
}

# Shown by the results panel for a single absent or empty field
PANEL_DEFAULTS = {
    "findings": {
        "zh": {
            "coreTraits": "你的性格展现出强烈的外向特质，对新体验保持高度开放性。在决策过程中表现出优秀的情绪稳定性和责任心。",
            "behaviorPatterns": "你展现出分析型决策风格，采用系统化的问题解决方法。在压力下能够保持冷静，依赖逻辑推理。",
            "emotionalPatterns": "你的情绪调节能力发展良好，表达模式平衡。展现出健康的压力反应机制和积极的情绪韧性。",
            "socialCharacteristics": "你展现出强大的社交技能和有效的沟通模式。你的协作方法和同理心使你成为团队中的宝贵成员。",
        },
        "en": {
            "coreTraits": "Your personality shows strong extroversion traits with high openness to new experiences. You demonstrate excellent emotional stability and conscientiousness in decision-making processes.",
            "behaviorPatterns": "You exhibit analytical decision-making style with systematic approach to problem-solving. Under pressure, you maintain composure and rely on logical reasoning.",
            "emotionalPatterns": "Your emotional regulation is well-developed with balanced expression patterns. You show healthy stress response mechanisms and positive emotional resilience.",
            "socialCharacteristics": "You demonstrate strong social skills with effective communication patterns. Your collaborative approach and empathy make you a valuable team member.",
        },
    },
    "advice": {
        "zh": {
            "personalGrowth": "专注于发展你的分析优势，同时建立情商。练习正念技巧以增强决策清晰度，减少压力反应。",
            "interpersonalRelations": "利用你天生的沟通技巧建立更牢固的关系。练习积极倾听和同理心回应，改善团队动态和家庭关系。",
            "careerPlanning": "你的系统化方法适合分析领域的领导角色。考虑将战略思维与人员管理相结合的角色，以最大化你的潜力。",
            "mentalHealth": "通过定期反思和压力管理技巧保持情绪平衡。练习感恩日记，在职业关系中建立健康的界限。",
        },
        "en": {
            "personalGrowth": "Focus on developing your analytical strengths while building emotional intelligence. Practice mindfulness techniques to enhance decision-making clarity and reduce stress responses.",
            "interpersonalRelations": "Leverage your natural communication skills to build stronger relationships. Practice active listening and empathetic responses to improve team dynamics and family connections.",
            "careerPlanning": "Your systematic approach suits leadership roles in analytical fields. Consider roles that combine strategic thinking with people management to maximize your potential.",
            "mentalHealth": "Maintain your emotional balance through regular reflection and stress management techniques. Practice gratitude journaling and establish healthy boundaries in professional relationships.",
        },
    },
}


# ---------------- Content extraction ----------------

def extract_content(response: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return choices[0].message.content, or None when any part is missing."""
    if not isinstance(response, dict):
        return None
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content


def parse_text_response(response: Optional[Dict[str, Any]], language: str = "en") -> str:
    content = extract_content(response)
    if content is None:
        return RECOMMENDATION_PLACEHOLDER[normalize_language(language)]
    return content


# ---------------- Structured variant ----------------

FENCE_RE = re.compile(r"^\s*```(?:json)?\s*(?P<body>.*?)\s*```\s*$", re.DOTALL | re.IGNORECASE)


def _strip_code_fence(text: str) -> str:
    m = FENCE_RE.match(text)
    if m:
        return m.group("body")
    return text


def parse_structured_response(
    response: Optional[Dict[str, Any]],
    default_record: Dict[str, str],
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    """
    Parse the reply content as a JSON object.

    A parsed object is returned as-is, so keys the model left out stay absent.
    Malformed JSON or a non-object falls back to a copy of default_record and
    the failure is logged. Never raises.
    """
    log = log or logger
    content = extract_content(response) or "{}"
    try:
        parsed = json.loads(_strip_code_fence(content))
    except ValueError as e:
        log.warning("Failed to parse structured reply as JSON: %s", e)
        return dict(default_record)

    if not isinstance(parsed, dict):
        log.warning("Structured reply is %s, expected a JSON object", type(parsed).__name__)
        return dict(default_record)
    return parsed


def parse_findings(
    response: Optional[Dict[str, Any]],
    language: str = "en",
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    return parse_structured_response(response, DEFAULT_FINDINGS[normalize_language(language)], log)


def parse_advice(
    response: Optional[Dict[str, Any]],
    language: str = "en",
    log: Optional[logging.Logger] = None,
) -> Dict[str, Any]:
    return parse_structured_response(response, DEFAULT_ADVICE[normalize_language(language)], log)


def fill_panel_defaults(record: Optional[Dict[str, Any]], panel: str, language: str = "en") -> Dict[str, str]:
    """Return all four fields of a panel, substituting the display default for falsy values."""
    defaults = PANEL_DEFAULTS[panel][normalize_language(language)]
    record = record or {}
    return {key: (str(record.get(key)) if record.get(key) else fallback) for key, fallback in defaults.items()}
