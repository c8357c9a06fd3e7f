from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_badge import BadgeResponse, BadgeCreateRequest, BadgeUpdateRequest
from wellness.services.srv_badge import BadgeService

router = APIRouter()


@router.get('', response_model=Union[BadgeResponse, List[BadgeResponse]])
def get_badges(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    badge_service: BadgeService = Depends()
) -> Any:
    if id is not None:
        return badge_service.get(id)
    return badge_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=BadgeResponse)
def create_badge(data: BadgeCreateRequest, badge_service: BadgeService = Depends()) -> Any:
    return badge_service.create(data)


@router.put('', response_model=BadgeResponse)
def update_badge(
    data: BadgeUpdateRequest,
    id: int = Query(...),
    badge_service: BadgeService = Depends()
) -> Any:
    return badge_service.update(id, data)


@router.delete('')
def delete_badge(id: int = Query(...), badge_service: BadgeService = Depends()) -> Any:
    return deleted_response('Badge', 'deletedBadge', badge_service.delete(id))
