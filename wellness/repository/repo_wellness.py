from typing import Optional

from wellness.models.model_wellness_goal import WellnessGoal
from wellness.models.model_wellness_plan import WellnessPlan
from wellness.repository.repo_base import BaseRepository


class WellnessGoalRepository(BaseRepository[WellnessGoal]):
    model = WellnessGoal


class WellnessPlanRepository(BaseRepository[WellnessPlan]):
    model = WellnessPlan

    def get_latest_by_user(self, user_id: int) -> Optional[WellnessPlan]:
        return self.db.query(WellnessPlan).filter(
            WellnessPlan.user_id == user_id
        ).order_by(WellnessPlan.created_at.desc(), WellnessPlan.id.desc()).first()
