from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_wellness import (
    WellnessPlanResponse, WellnessPlanCreateRequest, WellnessPlanUpdateRequest
)
from wellness.services.srv_wellness import WellnessPlanService

router = APIRouter()


@router.get('', response_model=Union[WellnessPlanResponse, List[WellnessPlanResponse]])
def get_plans(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    plan_service: WellnessPlanService = Depends()
) -> Any:
    if id is not None:
        return plan_service.get(id)
    return plan_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=WellnessPlanResponse)
def create_plan(data: WellnessPlanCreateRequest, plan_service: WellnessPlanService = Depends()) -> Any:
    return plan_service.create(data)


@router.put('', response_model=WellnessPlanResponse)
def update_plan(
    data: WellnessPlanUpdateRequest,
    id: int = Query(...),
    plan_service: WellnessPlanService = Depends()
) -> Any:
    return plan_service.update(id, data)


@router.delete('')
def delete_plan(id: int = Query(...), plan_service: WellnessPlanService = Depends()) -> Any:
    return deleted_response('Wellness plan', 'deletedPlan', plan_service.delete(id))
