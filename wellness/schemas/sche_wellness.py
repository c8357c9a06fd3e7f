from datetime import datetime
from typing import Any, Dict, List, Optional

from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class WellnessGoalCreateRequest(CamelModel):
    user_id: int
    goal_id: RequiredText
    goal_title: RequiredText


class WellnessGoalUpdateRequest(UpdateRequestBase):
    goal_id: Optional[UpdateText] = None
    goal_title: Optional[UpdateText] = None


class WellnessGoalResponse(CamelModel):
    id: int
    user_id: int
    goal_id: str
    goal_title: str
    selected_at: datetime


class WellnessPlanCreateRequest(CamelModel):
    user_id: int
    plan_data: Dict[str, Any]


class WellnessPlanUpdateRequest(UpdateRequestBase):
    plan_data: Optional[Dict[str, Any]] = None


class WellnessPlanResponse(CamelModel):
    id: int
    user_id: int
    plan_data: Dict[str, Any]
    created_at: datetime
    updated_at: datetime


class WellnessPlanView(CamelModel):
    user_id: int
    plan: WellnessPlanResponse
    goals: List[WellnessGoalResponse]
