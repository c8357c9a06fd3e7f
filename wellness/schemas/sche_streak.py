from datetime import date, datetime
from typing import Optional

from pydantic import NonNegativeInt

from wellness.schemas.sche_base import CamelModel, UpdateRequestBase


class UserStreakCreateRequest(CamelModel):
    user_id: int
    current_streak: NonNegativeInt = 0
    longest_streak: NonNegativeInt = 0
    last_activity_date: Optional[date] = None


class UserStreakUpdateRequest(UpdateRequestBase):
    current_streak: Optional[NonNegativeInt] = None
    longest_streak: Optional[NonNegativeInt] = None
    last_activity_date: Optional[date] = None


class UserStreakResponse(CamelModel):
    id: int
    user_id: int
    current_streak: int
    longest_streak: int
    last_activity_date: Optional[date] = None
    updated_at: datetime
