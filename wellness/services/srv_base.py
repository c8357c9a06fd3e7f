import logging
from typing import Any, List, Optional, Type

from pydantic import BaseModel

from wellness.helpers.exception_handler import NotFoundException
from wellness.helpers.paging import PaginationParams
from wellness.repository.repo_base import BaseRepository
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_base import UpdateRequestBase

logger = logging.getLogger(__name__)


class CrudService:
    """
    Generic record store contract: get / list / create / update / delete.

    Subclasses set ``repo`` (and ``user_repo`` when rows are owned by a user)
    in their ``__init__`` and override the hooks they need.
    """
    label: str = 'Record'
    not_found_code: str = 'NOT_FOUND'
    response_schema: Type[BaseModel]

    repo: BaseRepository
    user_repo: Optional[UserRepository] = None

    def get(self, record_id: int) -> Any:
        record = self.repo.get_by_id(record_id)
        if not record:
            raise NotFoundException(f'{self.label} not found', self.not_found_code)
        return record

    def list(self, params: PaginationParams, **filters: Any) -> List[Any]:
        return self.repo.list(params, **filters)

    def create(self, data: BaseModel) -> Any:
        values = data.model_dump()
        if 'user_id' in values:
            self.ensure_user_exists(values['user_id'])
        record = self.repo.create(self.repo.model(**values))
        logger.info(f"Created {self.label.lower()} {record.id}")
        return record

    def update(self, record_id: int, data: UpdateRequestBase) -> Any:
        record = self.get(record_id)
        changes = data.changes()
        if not changes:
            return record
        return self.repo.update(record, changes)

    def delete(self, record_id: int) -> BaseModel:
        record = self.get(record_id)
        snapshot = self.response_schema.model_validate(record)
        self.repo.delete(record)
        logger.info(f"Deleted {self.label.lower()} {record_id}")
        return snapshot

    def ensure_user_exists(self, user_id: int) -> None:
        if self.user_repo is not None and not self.user_repo.exists(user_id):
            raise NotFoundException('User not found', 'USER_NOT_FOUND')
