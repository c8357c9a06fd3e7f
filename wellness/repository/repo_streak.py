from typing import Dict, List, Optional

from wellness.models.model_user_streak import UserStreak
from wellness.repository.repo_base import BaseRepository


class UserStreakRepository(BaseRepository[UserStreak]):
    model = UserStreak

    def get_by_user_id(self, user_id: int) -> Optional[UserStreak]:
        return self.db.query(UserStreak).filter(UserStreak.user_id == user_id).first()

    def get_by_users(self, user_ids: List[int]) -> Dict[int, UserStreak]:
        if not user_ids:
            return {}
        rows = self.db.query(UserStreak).filter(UserStreak.user_id.in_(user_ids)).all()
        return {row.user_id: row for row in rows}
