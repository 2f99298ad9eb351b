"""
Local scoring for the results page: the composite badge and the six radar
dimensions. Pure functions over the slider values, no network.

Sliders are looked up by exact label. LABEL_ALIASES lists, per canonical key,
every label that counts as that slider (one per supported language). A slider
that is not found counts as 5.
"""

import math
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from agents.prompt_helper import normalize_language

DEFAULT_SLIDER_VALUE = 5

LABEL_ALIASES: Dict[str, tuple] = {
    "calm": ("平静", "Calm"),
    "confident": ("自信", "Confident"),
    "anxious": ("焦虑", "Anxious"),
    "urgency": ("急迫程度", "Urgency Level"),
    "skills": ("具备技能", "Skills Possessed"),
}

COMPOSITE_MIN = 20
COMPOSITE_MAX = 95

# (key, en name, zh name, cap), in chart order
RADAR_SPEC = [
    ("successRate", "Success Rate", "成功概率", 95),
    ("riskControl", "Risk Control", "风险控制", 90),
    ("developmentPotential", "Development Potential", "发展潜力", 95),
    ("adaptability", "Adaptability", "适应能力", 90),
    ("executionPower", "Execution Power", "执行力度", 95),
    ("mentalPreparation", "Mental Preparation", "心理准备", 90),
]
RADAR_CAPS = {key: cap for key, _, _, cap in RADAR_SPEC}


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def lookup(
    group: Optional[Iterable[Dict[str, Any]]],
    candidates: Iterable[str],
    default: int = DEFAULT_SLIDER_VALUE,
) -> int:
    """Value of the first slider whose label equals any candidate, else default."""
    accepted = set(candidates)
    for item in group or []:
        if isinstance(item, dict) and item.get("label") in accepted:
            value = item.get("value")
            # a 0 or missing value counts as unset
            return int(value) if value else default
    return default


def lookup_alias(group: Optional[Iterable[Dict[str, Any]]], key: str) -> int:
    return lookup(group, LABEL_ALIASES[key])


def _slider_inputs(tags: Optional[Dict[str, Any]]) -> Dict[str, int]:
    situation = (tags or {}).get("currentSituation") or {}
    emotions = situation.get("emotions") or []
    factors = situation.get("decisionFactors") or []
    return {
        "calm": lookup_alias(emotions, "calm"),
        "confident": lookup_alias(emotions, "confident"),
        "anxious": lookup_alias(emotions, "anxious"),
        "urgency": lookup_alias(factors, "urgency"),
        "skills": lookup_alias(factors, "skills"),
    }


def composite_score(tags: Optional[Dict[str, Any]]) -> int:
    """Composite badge score, always in [20, 95]."""
    s = _slider_inputs(tags)
    emotional_stability = (10 - s["anxious"]) * 8
    decision_readiness = (s["confident"] + s["skills"] + s["urgency"]) * 6
    score = round_half_up((emotional_stability + decision_readiness) / 3)
    return min(COMPOSITE_MAX, max(COMPOSITE_MIN, score))


def match_score(tags: Optional[Dict[str, Any]]) -> int:
    # Separate from composite_score: uses the Calm slider and a flat 2.5 weight.
    s = _slider_inputs(tags)
    return round_half_up((s["calm"] + s["confident"] + s["skills"] + s["urgency"]) * 2.5)


def radar_values(tags: Optional[Dict[str, Any]]) -> Dict[str, int]:
    s = _slider_inputs(tags)
    raw = {
        "successRate": match_score(tags) + 10,
        "riskControl": s["calm"] * 8 + 20,
        "developmentPotential": s["confident"] * 8 + 15,
        "adaptability": s["skills"] * 7 + 25,
        "executionPower": s["urgency"] * 8 + 10,
        "mentalPreparation": (10 - s["anxious"]) * 7 + 20,
    }
    return {key: max(0, min(RADAR_CAPS[key], value)) for key, value in raw.items()}


def radar_dimensions(tags: Optional[Dict[str, Any]], language: str = "en") -> List[Dict[str, Any]]:
    """The six named radar dimensions in chart order."""
    lang = normalize_language(language)
    values = radar_values(tags)
    return [
        {"name": zh if lang == "zh" else en, "value": values[key]}
        for key, en, zh, _ in RADAR_SPEC
    ]


def radar_frame(dimensions: List[Dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(dimensions, columns=["name", "value"])


def compute_scores(tags: Optional[Dict[str, Any]], language: str = "en") -> Dict[str, Any]:
    return {
        "compositeScore": composite_score(tags),
        "matchScore": match_score(tags),
        "radarDimensions": radar_dimensions(tags, language),
    }
