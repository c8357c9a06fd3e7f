from typing import Dict, List, Optional

from sqlalchemy import func

from wellness.models.model_quiz_response import QuizResponse
from wellness.models.model_quiz_result import QuizResult
from wellness.repository.repo_base import BaseRepository


class QuizResponseRepository(BaseRepository[QuizResponse]):
    model = QuizResponse


class QuizResultRepository(BaseRepository[QuizResult]):
    model = QuizResult

    def get_latest_by_user(self, user_id: int) -> Optional[QuizResult]:
        return self.db.query(QuizResult).filter(
            QuizResult.user_id == user_id
        ).order_by(QuizResult.created_at.desc(), QuizResult.id.desc()).first()

    def get_latest_by_users(self, user_ids: List[int]) -> Dict[int, QuizResult]:
        if not user_ids:
            return {}
        # highest id per user breaks ties between results sharing a timestamp
        latest = self.db.query(
            QuizResult.user_id, func.max(QuizResult.created_at).label('created_at')
        ).filter(QuizResult.user_id.in_(user_ids)).group_by(QuizResult.user_id).subquery()
        rows = self.db.query(QuizResult).join(
            latest,
            (QuizResult.user_id == latest.c.user_id) & (QuizResult.created_at == latest.c.created_at)
        ).order_by(QuizResult.id.asc()).all()
        return {row.user_id: row for row in rows}
