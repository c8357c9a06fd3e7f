from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_streak import (
    UserStreakResponse, UserStreakCreateRequest, UserStreakUpdateRequest
)
from wellness.services.srv_streak import UserStreakService

router = APIRouter()


@router.get('', response_model=Union[UserStreakResponse, List[UserStreakResponse]])
def get_streaks(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    streak_service: UserStreakService = Depends()
) -> Any:
    if id is not None:
        return streak_service.get(id)
    return streak_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=UserStreakResponse)
def create_streak(data: UserStreakCreateRequest, streak_service: UserStreakService = Depends()) -> Any:
    return streak_service.create(data)


@router.put('', response_model=UserStreakResponse)
def update_streak(
    data: UserStreakUpdateRequest,
    id: int = Query(...),
    streak_service: UserStreakService = Depends()
) -> Any:
    return streak_service.update(id, data)


@router.delete('')
def delete_streak(id: int = Query(...), streak_service: UserStreakService = Depends()) -> Any:
    return deleted_response('User streak', 'deletedStreak', streak_service.delete(id))
