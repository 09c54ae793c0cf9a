from enum import Enum
from typing import Iterable, List, Dict

from healthapp.errors import ValidationError


class Classification(str, Enum):
    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"


# 동점일 때 앞쪽이 이김 (vata > pitta > kapha)
PRIORITY = (Classification.VATA, Classification.PITTA, Classification.KAPHA)

QUIZ_QUESTIONS: List[Dict] = [
    {
        "question": "My body frame is typically...",
        "options": [
            {"text": "Thin, light, and tall or short", "value": "vata"},
            {"text": "Medium build and muscular", "value": "pitta"},
            {"text": "Large, heavy, and well-built", "value": "kapha"},
        ],
    },
    {
        "question": "My skin is generally...",
        "options": [
            {"text": "Dry, rough, and thin", "value": "vata"},
            {"text": "Oily, warm, and sensitive (prone to rashes/acne)", "value": "pitta"},
            {"text": "Thick, oily, cool, and smooth", "value": "kapha"},
        ],
    },
    {
        "question": "My appetite is...",
        "options": [
            {"text": "Irregular, I get variable hunger", "value": "vata"},
            {"text": "Strong, I get irritable if I miss a meal", "value": "pitta"},
            {"text": "Steady, I can skip meals easily", "value": "kapha"},
        ],
    },
    {
        "question": "My digestion tends to be...",
        "options": [
            {"text": "Variable, gassy, and prone to constipation", "value": "vata"},
            {"text": "Fast, strong, and prone to acidity or loose stools", "value": "pitta"},
            {"text": "Slow, heavy, and sluggish", "value": "kapha"},
        ],
    },
    {
        "question": "My temperament is...",
        "options": [
            {"text": "Enthusiastic, lively, and moody", "value": "vata"},
            {"text": "Intelligent, focused, and irritable", "value": "pitta"},
            {"text": "Calm, steady, and sometimes possessive", "value": "kapha"},
        ],
    },
]


def parse_classification(value) -> Classification:
    """Exact, case-sensitive match against the three categories."""
    if isinstance(value, Classification):
        return value
    if not isinstance(value, str):
        raise ValidationError("Invalid analysis result.")
    try:
        return Classification(value)
    except ValueError:
        raise ValidationError("Invalid analysis result.")


def tally(answers: Iterable) -> Dict[Classification, int]:
    counts = {c: 0 for c in PRIORITY}
    for answer in answers:
        counts[parse_classification(answer)] += 1
    return counts


def classify(answers: Iterable) -> Classification:
    """
    퀴즈 답변(각각 vata/pitta/kapha)을 세어 우세한 체질을 반환합니다.
    vata 에서 시작해 pitta, kapha 순서로 '더 클 때만' 교체하므로
    동점은 항상 우선순위가 높은 쪽이 가져갑니다.
    """
    counts = tally(answers)
    leader = PRIORITY[0]
    for candidate in PRIORITY[1:]:
        if counts[candidate] > counts[leader]:
            leader = candidate
    return leader
