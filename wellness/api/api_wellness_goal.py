from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_wellness import (
    WellnessGoalResponse, WellnessGoalCreateRequest, WellnessGoalUpdateRequest
)
from wellness.services.srv_wellness import WellnessGoalService

router = APIRouter()


@router.get('', response_model=Union[WellnessGoalResponse, List[WellnessGoalResponse]])
def get_goals(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    goal_service: WellnessGoalService = Depends()
) -> Any:
    if id is not None:
        return goal_service.get(id)
    return goal_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=WellnessGoalResponse)
def create_goal(data: WellnessGoalCreateRequest, goal_service: WellnessGoalService = Depends()) -> Any:
    return goal_service.create(data)


@router.put('', response_model=WellnessGoalResponse)
def update_goal(
    data: WellnessGoalUpdateRequest,
    id: int = Query(...),
    goal_service: WellnessGoalService = Depends()
) -> Any:
    return goal_service.update(id, data)


@router.delete('')
def delete_goal(id: int = Query(...), goal_service: WellnessGoalService = Depends()) -> Any:
    return deleted_response('Wellness goal', 'deletedGoal', goal_service.delete(id))
