from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_task import (
    DailyTaskResponse, DailyTaskCreateRequest, DailyTaskUpdateRequest
)
from wellness.services.srv_task import DailyTaskService

router = APIRouter()


@router.get('', response_model=Union[DailyTaskResponse, List[DailyTaskResponse]])
def get_tasks(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    completed: Optional[bool] = Query(None),
    params: PaginationParams = Depends(pagination_params),
    task_service: DailyTaskService = Depends()
) -> Any:
    if id is not None:
        return task_service.get(id)
    return task_service.list(params, user_id=user_id, completed=completed)


@router.post('', status_code=201, response_model=DailyTaskResponse)
def create_task(data: DailyTaskCreateRequest, task_service: DailyTaskService = Depends()) -> Any:
    return task_service.create(data)


@router.put('', response_model=DailyTaskResponse)
def update_task(
    data: DailyTaskUpdateRequest,
    id: int = Query(...),
    task_service: DailyTaskService = Depends()
) -> Any:
    return task_service.update(id, data)


@router.delete('')
def delete_task(id: int = Query(...), task_service: DailyTaskService = Depends()) -> Any:
    return deleted_response('Daily task', 'deletedTask', task_service.delete(id))
