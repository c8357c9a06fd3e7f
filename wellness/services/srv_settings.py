from fastapi import Depends

from wellness.repository.repo_settings import UserSettingsRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_settings import UserSettingsResponse
from wellness.services.srv_base import CrudService


class UserSettingsService(CrudService):
    label = 'User settings'
    response_schema = UserSettingsResponse

    def __init__(self, repo: UserSettingsRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo
