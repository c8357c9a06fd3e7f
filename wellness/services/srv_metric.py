from fastapi import Depends

from wellness.repository.repo_metric import UserMetricRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_metric import UserMetricResponse
from wellness.services.srv_base import CrudService


class UserMetricService(CrudService):
    label = 'User metric'
    response_schema = UserMetricResponse

    def __init__(self, repo: UserMetricRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo
