from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Query, Session

from wellness.db.base import get_db
from wellness.helpers.paging import PaginationParams, paginate

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Single-table CRUD shared by every resource repository.

    Write methods commit by default; pass ``commit=False`` to only flush so the
    caller can group several writes into one transaction.
    """
    model: Type[ModelType]

    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_by_id(self, record_id: int) -> Optional[ModelType]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def query(self, **filters: Any) -> Query:
        conditions = {key: value for key, value in filters.items() if value is not None}
        return self.db.query(self.model).filter_by(**conditions)

    def list(self, params: PaginationParams, *order_by, **filters: Any) -> List[ModelType]:
        return paginate(self.query(**filters), params, *(order_by or (self.model.id.asc(),)))

    def list_by_user(self, user_id: int) -> List[ModelType]:
        return self.db.query(self.model).filter(self.model.user_id == user_id).order_by(self.model.id.asc()).all()

    def create(self, record: ModelType, commit: bool = True) -> ModelType:
        self.db.add(record)
        self._save(commit)
        self.db.refresh(record)
        return record

    def update(self, record: ModelType, changes: Dict[str, Any], commit: bool = True) -> ModelType:
        for field, value in changes.items():
            setattr(record, field, value)
        self._save(commit)
        self.db.refresh(record)
        return record

    def delete(self, record: ModelType, commit: bool = True) -> None:
        self.db.delete(record)
        self._save(commit)

    def _save(self, commit: bool) -> None:
        if commit:
            self.db.commit()
        else:
            self.db.flush()
