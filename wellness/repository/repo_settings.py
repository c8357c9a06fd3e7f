from wellness.models.model_user_settings import UserSettings
from wellness.repository.repo_base import BaseRepository


class UserSettingsRepository(BaseRepository[UserSettings]):
    model = UserSettings
