from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from agents.prompt_helper import normalize_language
from logic.scoring import round_half_up

QUESTION_MAX_LEN = 50
SLIDER_MIN = 1
SLIDER_MAX = 10
SLIDER_DEFAULT = 5

AGE_CHOICES = ["18-25", "26-35", "36-45", "45-55", "55+"]
GENDER_CHOICES = ["Male", "Female"]
MBTI_CHOICES = [
    "INTJ", "INTP", "ENTJ", "ENTP", "INFJ", "INFP", "ENFJ", "ENFP",
    "ISTJ", "ISFJ", "ESTJ", "ESFJ", "ISTP", "ISFP", "ESTP", "ESFP",
]
DISC_CHOICES = ["D", "I", "S", "C"]
ENNEAGRAM_CHOICES = [str(i) for i in range(1, 10)]
CONSTELLATION_CHOICES = {
    "en": [
        "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
        "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
    ],
    "zh": [
        "白羊座", "金牛座", "双子座", "巨蟹座", "狮子座", "处女座",
        "天秤座", "天蝎座", "射手座", "摩羯座", "水瓶座", "双鱼座",
    ],
}
ZODIAC_CHOICES = {
    "en": ["Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake", "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig"],
    "zh": ["鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪"],
}

EMOTION_LABELS = {
    "en": ["Confused", "Anxious", "Hesitant", "Confident", "Excited", "Calm"],
    "zh": ["迷茫", "焦虑", "犹豫", "自信", "兴奋", "平静"],
}
DECISION_FACTOR_LABELS = {
    "en": ["Urgency Level", "Expected Return", "Skills Possessed", "Family Resistance", "Economic Pressure"],
    "zh": ["急迫程度", "收益预期", "具备技能", "家庭阻力", "经济压力"],
}

CUSTOM_FACTOR_COLUMNS = ["label", "value"]


def clamp_slider(value: Any) -> int:
    """Coerce a slider value to an int in [1, 10], rounding halves up; unreadable values become 5."""
    try:
        v = round_half_up(float(value))
    except (TypeError, ValueError, OverflowError):
        return SLIDER_DEFAULT
    return max(SLIDER_MIN, min(SLIDER_MAX, v))


def make_slider_group(items: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Normalize (label, value) pairs or {'label', 'value'} dicts into a slider group.
    Blank labels are skipped and a repeated label keeps its first value.
    """
    group: List[Dict[str, Any]] = []
    seen = set()
    for item in items or []:
        if isinstance(item, dict):
            label, value = item.get("label"), item.get("value")
        else:
            label, value = item
        label = "" if label is None else str(label).strip()
        if not label or label in seen:
            continue
        seen.add(label)
        group.append({"label": label, "value": clamp_slider(value)})
    return group


def default_emotions(language: str = "en") -> List[Dict[str, Any]]:
    labels = EMOTION_LABELS[normalize_language(language)]
    return [{"label": label, "value": SLIDER_DEFAULT} for label in labels]


def default_decision_factors(language: str = "en") -> List[Dict[str, Any]]:
    labels = DECISION_FACTOR_LABELS[normalize_language(language)]
    return [{"label": label, "value": SLIDER_DEFAULT} for label in labels]


def default_selected_tags() -> Dict[str, Any]:
    return {
        "basicInfo": {},
        "selfPerception": [],
        "currentSituation": {},
        "optionEvaluation": [],
    }


def build_user_input(question: Optional[str], options: Optional[List[str]] = None) -> Dict[str, Any]:
    q = (question or "").strip()[:QUESTION_MAX_LEN]
    return {"question": q, "options": [(o or "").strip() for o in (options or [])]}


def parse_self_perception(text: Optional[str]) -> List[str]:
    """Split free-form self-perception text on commas (ASCII or full-width) and newlines."""
    if not text:
        return []
    parts = text.replace("，", ",").replace("\n", ",").split(",")
    return [p.strip() for p in parts if p.strip()]


def custom_factors_from_frame(frame: Optional[pd.DataFrame]) -> List[Dict[str, Any]]:
    """Read the editable label/value table from the home panel."""
    if frame is None or len(frame) == 0:
        return []
    df = pd.DataFrame(frame)
    if not set(CUSTOM_FACTOR_COLUMNS).issubset(df.columns):
        df = df.iloc[:, :2]
        df.columns = CUSTOM_FACTOR_COLUMNS
    df = df.dropna(subset=["label"])
    return make_slider_group(zip(df["label"], df["value"]))


def empty_custom_factor_frame() -> pd.DataFrame:
    return pd.DataFrame(columns=CUSTOM_FACTOR_COLUMNS)


def build_selected_tags(
    age: Optional[str] = None,
    gender: Optional[str] = None,
    emotions: Optional[Iterable[Any]] = None,
    decision_factors: Optional[Iterable[Any]] = None,
    custom_factors: Optional[Iterable[Any]] = None,
    constellation: Optional[str] = None,
    zodiac: Optional[str] = None,
    mbti: Optional[str] = None,
    disc: Optional[str] = None,
    enneagram: Optional[str] = None,
    self_perception: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Assemble the SelectedTags record. Unselected basic-info keys are left out."""
    tags = default_selected_tags()
    basic = {
        "age": age,
        "gender": gender,
        "constellation": constellation,
        "zodiac": zodiac,
        "mbti": mbti,
        "disc": disc,
        "enneagram": enneagram,
    }
    tags["basicInfo"] = {k: str(v) for k, v in basic.items() if v}
    tags["selfPerception"] = list(self_perception or [])
    tags["currentSituation"] = {
        "emotions": make_slider_group(emotions or []),
        "decisionFactors": make_slider_group(decision_factors or []),
        "customFactors": make_slider_group(custom_factors or []),
    }
    return tags
