from fastapi import Depends

from wellness.repository.repo_user import UserRepository
from wellness.repository.repo_wellness import WellnessGoalRepository, WellnessPlanRepository
from wellness.schemas.sche_wellness import WellnessGoalResponse, WellnessPlanResponse
from wellness.services.srv_base import CrudService


class WellnessGoalService(CrudService):
    label = 'Wellness goal'
    response_schema = WellnessGoalResponse

    def __init__(self, repo: WellnessGoalRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo


class WellnessPlanService(CrudService):
    label = 'Wellness plan'
    response_schema = WellnessPlanResponse

    def __init__(self, repo: WellnessPlanRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo
