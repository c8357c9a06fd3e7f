import logging

from fastapi import Depends

from wellness.db.base import atomic
from wellness.helpers.exception_handler import CustomException
from wellness.models.model_user import User
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_user import UserCreateRequest, UserUpdateRequest, UserResponse
from wellness.services.srv_base import CrudService
from wellness.services.srv_community import CounterService

logger = logging.getLogger(__name__)


class UserService(CrudService):
    label = 'User'
    not_found_code = 'USER_NOT_FOUND'
    response_schema = UserResponse

    def __init__(self, repo: UserRepository = Depends(), counters: CounterService = Depends()):
        self.repo = repo
        self.counters = counters

    def create(self, data: UserCreateRequest) -> User:
        email = data.email.strip().lower()
        if self.repo.get_by_email(email):
            raise CustomException(http_code=409, code='EMAIL_EXISTS', message='Email already exists')
        values = data.model_dump()
        values['email'] = email
        return self.repo.create(User(**values))

    def update(self, record_id: int, data: UserUpdateRequest) -> User:
        user = self.get(record_id)
        changes = data.changes()
        if 'email' in changes:
            changes['email'] = changes['email'].strip().lower()
            existing = self.repo.get_by_email(changes['email'])
            if existing and existing.id != user.id:
                raise CustomException(http_code=409, code='EMAIL_EXISTS', message='Email already exists')
        if not changes:
            return user
        return self.repo.update(user, changes)

    def delete(self, record_id: int) -> UserResponse:
        """
        Owned rows go with the user via ON DELETE CASCADE; counters of posts
        that lose likes or comments are recomputed in the same transaction.
        """
        user = self.get(record_id)
        snapshot = UserResponse.model_validate(user)
        with atomic(self.repo.db):
            touched_posts = self.counters.posts_touched_by(user.id)
            self.repo.delete(user, commit=False)
            self.repo.db.expire_all()
            self.counters.recount(touched_posts)
        logger.info(f"Deleted user {record_id}, recounted {len(touched_posts)} posts")
        return snapshot
