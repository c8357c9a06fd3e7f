"""
Quiz scoring.

Each answer adds one point to the sub-score whose name matches its category
(case-insensitive). Categories outside cognitive / physical / digital do not
contribute to any sub-score, so they never raise the balance score.
"""
from dataclasses import dataclass
from typing import Iterable

from wellness.helpers.enums import MoodResult, QuizCategory

BALANCED_THRESHOLD = 15
NEEDS_ATTENTION_THRESHOLD = 8


@dataclass(frozen=True)
class QuizScore:
    cognitive_score: int = 0
    physical_score: int = 0
    digital_score: int = 0

    @property
    def balance_score(self) -> int:
        return self.cognitive_score + self.physical_score + self.digital_score

    @property
    def mood_result(self) -> MoodResult:
        return mood_for_balance(self.balance_score)


def mood_for_balance(balance_score: int) -> MoodResult:
    if balance_score >= BALANCED_THRESHOLD:
        return MoodResult.BALANCED
    if balance_score >= NEEDS_ATTENTION_THRESHOLD:
        return MoodResult.NEEDS_ATTENTION
    return MoodResult.OVERLOADED


def score_categories(categories: Iterable[str]) -> QuizScore:
    tally = {category: 0 for category in QuizCategory}
    for category in categories:
        try:
            tally[QuizCategory(category.strip().lower())] += 1
        except ValueError:
            continue
    return QuizScore(
        cognitive_score=tally[QuizCategory.COGNITIVE],
        physical_score=tally[QuizCategory.PHYSICAL],
        digital_score=tally[QuizCategory.DIGITAL],
    )
