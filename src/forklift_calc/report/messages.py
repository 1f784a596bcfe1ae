"""Message catalogue — turns engine :class:`Message` records into text.

Lookup order for a key: requested language → English → the key itself.
Placeholders are written ``{name}``; a parameter whose value is an enum
member (machine type, load state) is replaced by that member's label, and
whole-number floats print without a trailing ``.0``.
"""

from __future__ import annotations

from typing import Literal

from forklift_calc.models.results import Message

Language = Literal["en", "zh"]

CATALOGUE: dict[str, dict[str, str]] = {
    "en": {
        # Gradeability
        "gradeWarningTitle": "Grade limit exceeded",
        "gradeWarningText": "The ramp grade of {grade}% exceeds the {limit}% limit for a {load} {type}.",
        "clearanceWarning": "Ground clearance",
        "clearanceWarningText": (
            "Grades above 15% can ground the chassis or fork tips at the ramp transition. "
            "Check underclearance and approach angles before use."
        ),
        "statusGo": "SAFE TO OPERATE",
        "statusCaution": "CAUTION",
        "statusStop": "DO NOT OPERATE",
        # Load capacity
        "forkWarningTitle": "Fork length",
        "forkWarningText": (
            "A {loadLen} mm long load needs forks of at least {minLen} mm; "
            "the selected {forkLen} mm forks are too short."
        ),
        "statusSafe": "WITHIN CAPACITY",
        "statusOverload": "OVERLOAD",
        "recommendationTitle": "Recommendation",
        "recommendationStacker": (
            "Even a 2.0 t stacker only handles about {cap} kg at this load center. "
            "A counterbalance forklift is required."
        ),
        "recommendationUpgrade": "Use a {ton} t {type}: about {cap} kg safe capacity at this load center.",
        "recommendationFail": (
            "No standard machine up to 10 t handles this load at this load center. "
            "Consult the manufacturer for a special-purpose unit."
        ),
        # Enum labels
        "loaded": "loaded",
        "empty": "empty",
        "forklift": "electric forklift",
        "ic_forklift": "IC forklift",
        "stacker": "stacker",
        "reach_truck": "reach truck",
        "three_wheel": "3-wheel electric forklift",
    },
    "zh": {
        "gradeWarningTitle": "超出爬坡极限",
        "gradeWarningText": "坡度 {grade}% 超过{load}{type}的 {limit}% 极限。",
        "clearanceWarning": "离地间隙",
        "clearanceWarningText": "坡度超过 15% 时，车体或货叉尖可能在坡道过渡处触地。使用前请检查离地间隙和接近角。",
        "statusGo": "可以作业",
        "statusCaution": "注意",
        "statusStop": "禁止作业",
        "forkWarningTitle": "货叉长度",
        "forkWarningText": "{loadLen} mm 长的货物至少需要 {minLen} mm 的货叉，所选 {forkLen} mm 货叉过短。",
        "statusSafe": "在额定能力内",
        "statusOverload": "超载",
        "recommendationTitle": "建议",
        "recommendationStacker": "即使 2.0 吨堆高车在此载荷中心也只能承载约 {cap} kg，需要使用平衡重叉车。",
        "recommendationUpgrade": "建议使用 {ton} 吨{type}：此载荷中心下安全承载约 {cap} kg。",
        "recommendationFail": "10 吨以内的标准车型均无法在此载荷中心承载该货物，请咨询厂家定制车型。",
        "loaded": "满载",
        "empty": "空载",
        "forklift": "电动叉车",
        "ic_forklift": "内燃叉车",
        "stacker": "堆高车",
        "reach_truck": "前移式叉车",
        "three_wheel": "三支点电动叉车",
    },
}

_ENUM_PARAMS = ("load", "type")


def translate(key: str, language: Language = "en") -> str:
    """Look up one catalogue entry with English and then the key as fallbacks."""
    for lang in (language, "en"):
        text = CATALOGUE.get(lang, {}).get(key)
        if text is not None:
            return text
    return key


def render_message(message: Message, language: Language = "en") -> str:
    """Fill a message template with its parameters."""
    text = translate(message.key, language)
    for name, value in message.params.items():
        if name in _ENUM_PARAMS and isinstance(value, str):
            value = translate(value, language)
        elif isinstance(value, float) and value.is_integer():
            value = int(value)
        text = text.replace(f"{{{name}}}", str(value))
    return text
