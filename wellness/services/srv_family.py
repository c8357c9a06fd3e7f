from fastapi import Depends

from wellness.repository.repo_family import FamilyMemberRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_family import FamilyMemberResponse
from wellness.services.srv_base import CrudService


class FamilyMemberService(CrudService):
    label = 'Family member'
    response_schema = FamilyMemberResponse

    def __init__(self, repo: FamilyMemberRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo
