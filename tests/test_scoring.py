import pytest

from wellness.helpers.enums import MoodResult
from wellness.helpers.scoring import QuizScore, mood_for_balance, score_categories


@pytest.mark.parametrize('balance, expected', [
    (0, MoodResult.OVERLOADED),
    (7, MoodResult.OVERLOADED),
    (8, MoodResult.NEEDS_ATTENTION),
    (14, MoodResult.NEEDS_ATTENTION),
    (15, MoodResult.BALANCED),
    (40, MoodResult.BALANCED),
])
def test_mood_thresholds(balance, expected):
    assert mood_for_balance(balance) == expected


def test_score_categories_counts_each_answer_once():
    score = score_categories(['cognitive', 'physical', 'digital', 'Physical', ' DIGITAL '])
    assert score == QuizScore(cognitive_score=1, physical_score=2, digital_score=2)
    assert score.balance_score == 5
    assert score.mood_result == MoodResult.OVERLOADED


def test_unknown_categories_do_not_score():
    score = score_categories(['emotional', 'social', 'cognitive'])
    assert score.balance_score == 1


def test_empty_answers_are_overloaded():
    score = score_categories([])
    assert score.balance_score == 0
    assert score.mood_result == MoodResult.OVERLOADED


def test_fifteen_answers_are_balanced():
    score = score_categories(['cognitive'] * 5 + ['physical'] * 5 + ['digital'] * 5)
    assert score.balance_score == 15
    assert score.mood_result == MoodResult.BALANCED
