import logging
from datetime import date
from typing import Any, Dict

from fastapi import Depends

from wellness.db.base import atomic
from wellness.models.model_daily_task import DailyTask
from wellness.repository.repo_task import DailyTaskRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_task import DailyTaskCreateRequest, DailyTaskUpdateRequest, DailyTaskResponse
from wellness.services.srv_base import CrudService
from wellness.services.srv_streak import UserStreakService

logger = logging.getLogger(__name__)


class DailyTaskService(CrudService):
    label = 'Daily task'
    response_schema = DailyTaskResponse

    def __init__(
        self,
        repo: DailyTaskRepository = Depends(),
        user_repo: UserRepository = Depends(),
        streak_service: UserStreakService = Depends()
    ):
        self.repo = repo
        self.user_repo = user_repo
        self.streak_service = streak_service

    def create(self, data: DailyTaskCreateRequest) -> DailyTask:
        self.ensure_user_exists(data.user_id)
        values = data.model_dump()
        if values['completed']:
            values['completion_date'] = values['completion_date'] or date.today()
        else:
            values['completion_date'] = None
        with atomic(self.repo.db):
            task = self.repo.create(DailyTask(**values), commit=False)
            if task.completed:
                self.streak_service.record_activity(task.user_id, task.completion_date)
        return task

    def update(self, record_id: int, data: DailyTaskUpdateRequest) -> DailyTask:
        """
        Completing a task counts as activity for the owner's streak.
        """
        task = self.get(record_id)
        changes = self._completion_changes(task, data.changes())
        if not changes:
            return task
        newly_completed = changes.get('completed') is True and not task.completed
        with atomic(self.repo.db):
            task = self.repo.update(task, changes, commit=False)
            if newly_completed:
                self.streak_service.record_activity(task.user_id, task.completion_date)
                logger.info(f"Task {task.id} completed by user {task.user_id}")
        return task

    @staticmethod
    def _completion_changes(task: DailyTask, changes: Dict[str, Any]) -> Dict[str, Any]:
        if 'completed' not in changes:
            return changes
        if changes['completed'] and not task.completed:
            changes.setdefault('completion_date', task.completion_date or date.today())
        elif not changes['completed']:
            changes.setdefault('completion_date', None)
        return changes
