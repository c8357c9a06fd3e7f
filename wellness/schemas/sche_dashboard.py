from typing import List, Optional

from wellness.schemas.sche_base import CamelModel
from wellness.schemas.sche_badge import BadgeResponse
from wellness.schemas.sche_metric import UserMetricResponse
from wellness.schemas.sche_streak import UserStreakResponse
from wellness.schemas.sche_task import DailyTaskResponse


class DashboardResponse(CamelModel):
    user_id: int
    metrics: List[UserMetricResponse]
    streaks: Optional[UserStreakResponse] = None
    badges: List[BadgeResponse]
    tasks: List[DailyTaskResponse]
