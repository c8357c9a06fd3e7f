from datetime import date
from typing import Optional

from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class DailyTaskCreateRequest(CamelModel):
    user_id: int
    task_name: RequiredText
    task_time: RequiredText
    completed: bool = False
    completion_date: Optional[date] = None


class DailyTaskUpdateRequest(UpdateRequestBase):
    task_name: Optional[UpdateText] = None
    task_time: Optional[UpdateText] = None
    completed: Optional[bool] = None
    completion_date: Optional[date] = None


class DailyTaskResponse(CamelModel):
    id: int
    user_id: int
    task_name: str
    task_time: str
    completed: bool
    completion_date: Optional[date] = None
