from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_dashboard import DashboardResponse
from wellness.schemas.sche_user import UserResponse, UserCreateRequest, UserUpdateRequest
from wellness.schemas.sche_wellness import WellnessPlanView
from wellness.services.srv_aggregate import AggregateService
from wellness.services.srv_user import UserService

router = APIRouter()


@router.get("", response_model=Union[UserResponse, List[UserResponse]])
def get(
    id: Optional[int] = Query(None),
    params: PaginationParams = Depends(pagination_params),
    user_service: UserService = Depends()
) -> Any:
    """
    API Get list User, or one User with ?id=
    """
    if id is not None:
        return user_service.get(id)
    return user_service.list(params)


@router.post("", status_code=201, response_model=UserResponse)
def create(user_data: UserCreateRequest, user_service: UserService = Depends()) -> Any:
    """
    API Create User
    """
    return user_service.create(user_data)


@router.put("", response_model=UserResponse)
def update(user_data: UserUpdateRequest, id: int = Query(...), user_service: UserService = Depends()) -> Any:
    """
    API Update User
    """
    return user_service.update(id, user_data)


@router.delete("")
def delete(id: int = Query(...), user_service: UserService = Depends()) -> Any:
    """
    API Delete User together with everything the user owns
    """
    return deleted_response('User', 'deletedUser', user_service.delete(id))


@router.get("/{user_id}/dashboard", response_model=DashboardResponse)
def dashboard(user_id: int, aggregate_service: AggregateService = Depends()) -> Any:
    """
    API Dashboard: metrics, streak, badges and tasks of one User
    """
    return aggregate_service.get_user_dashboard(user_id)


@router.get("/{user_id}/wellness-plan", response_model=WellnessPlanView)
def wellness_plan(user_id: int, aggregate_service: AggregateService = Depends()) -> Any:
    """
    API Active wellness plan and selected goals of one User
    """
    return aggregate_service.get_user_wellness_plan(user_id)
