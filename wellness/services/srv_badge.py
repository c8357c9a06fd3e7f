from fastapi import Depends

from wellness.repository.repo_badge import BadgeRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_badge import BadgeResponse
from wellness.services.srv_base import CrudService


class BadgeService(CrudService):
    label = 'Badge'
    not_found_code = 'BADGE_NOT_FOUND'
    response_schema = BadgeResponse

    def __init__(self, repo: BadgeRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo
