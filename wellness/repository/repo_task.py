from wellness.models.model_daily_task import DailyTask
from wellness.repository.repo_base import BaseRepository


class DailyTaskRepository(BaseRepository[DailyTask]):
    model = DailyTask
