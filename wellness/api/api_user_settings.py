from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_settings import (
    UserSettingsResponse, UserSettingsCreateRequest, UserSettingsUpdateRequest
)
from wellness.services.srv_settings import UserSettingsService

router = APIRouter()


@router.get('', response_model=Union[UserSettingsResponse, List[UserSettingsResponse]])
def get_settings(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    settings_service: UserSettingsService = Depends()
) -> Any:
    if id is not None:
        return settings_service.get(id)
    return settings_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=UserSettingsResponse)
def create_settings(data: UserSettingsCreateRequest, settings_service: UserSettingsService = Depends()) -> Any:
    return settings_service.create(data)


@router.put('', response_model=UserSettingsResponse)
def update_settings(
    data: UserSettingsUpdateRequest,
    id: int = Query(...),
    settings_service: UserSettingsService = Depends()
) -> Any:
    return settings_service.update(id, data)


@router.delete('')
def delete_settings(id: int = Query(...), settings_service: UserSettingsService = Depends()) -> Any:
    return deleted_response('User settings', 'deletedSettings', settings_service.delete(id))
