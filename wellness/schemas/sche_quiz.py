from datetime import datetime
from typing import List, Optional

from pydantic import Field, NonNegativeInt

from wellness.helpers.enums import MoodResult
from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class QuizAnswer(CamelModel):
    question_id: RequiredText
    answer_index: NonNegativeInt
    category: RequiredText


class QuizSubmitRequest(CamelModel):
    user_id: int
    responses: List[QuizAnswer] = Field(..., min_length=1)


class QuizResponseCreateRequest(QuizAnswer):
    user_id: int


class QuizResponseUpdateRequest(UpdateRequestBase):
    question_id: Optional[UpdateText] = None
    answer_index: Optional[NonNegativeInt] = None
    category: Optional[UpdateText] = None


class QuizResponseItem(CamelModel):
    id: int
    user_id: int
    question_id: str
    answer_index: int
    category: str
    created_at: datetime


class QuizResultCreateRequest(CamelModel):
    user_id: int
    balance_score: NonNegativeInt
    mood_result: MoodResult
    cognitive_score: NonNegativeInt
    physical_score: NonNegativeInt
    digital_score: NonNegativeInt


class QuizResultUpdateRequest(UpdateRequestBase):
    balance_score: Optional[NonNegativeInt] = None
    mood_result: Optional[MoodResult] = None
    cognitive_score: Optional[NonNegativeInt] = None
    physical_score: Optional[NonNegativeInt] = None
    digital_score: Optional[NonNegativeInt] = None


class QuizResultResponse(CamelModel):
    id: int
    user_id: int
    balance_score: int
    mood_result: str
    cognitive_score: int
    physical_score: int
    digital_score: int
    created_at: datetime


class QuizSubmitResponse(CamelModel):
    result: QuizResultResponse
    responses: List[QuizResponseItem]
