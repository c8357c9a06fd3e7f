from typing import Dict, List, Optional

from sqlalchemy import func

from wellness.models.model_badge import Badge
from wellness.repository.repo_base import BaseRepository


class BadgeRepository(BaseRepository[Badge]):
    model = Badge

    def get_by_user_and_badge(self, user_id: int, badge_id: str) -> Optional[Badge]:
        return self.db.query(Badge).filter(Badge.user_id == user_id, Badge.badge_id == badge_id).first()

    def count_by_users(self, user_ids: List[int]) -> Dict[int, int]:
        if not user_ids:
            return {}
        rows = self.db.query(Badge.user_id, func.count(Badge.id)).filter(
            Badge.user_id.in_(user_ids)
        ).group_by(Badge.user_id).all()
        return {user_id: count for user_id, count in rows}
