from wellness.models.model_user_metric import UserMetric
from wellness.repository.repo_base import BaseRepository


class UserMetricRepository(BaseRepository[UserMetric]):
    model = UserMetric
