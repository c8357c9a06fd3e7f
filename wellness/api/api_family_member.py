from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_family import (
    FamilyMemberResponse, FamilyMemberCreateRequest, FamilyMemberUpdateRequest
)
from wellness.services.srv_family import FamilyMemberService

router = APIRouter()


@router.get('', response_model=Union[FamilyMemberResponse, List[FamilyMemberResponse]])
def get_members(
    id: Optional[int] = Query(None),
    family_group_id: Optional[str] = Query(None, alias='familyGroupId'),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    member_service: FamilyMemberService = Depends()
) -> Any:
    if id is not None:
        return member_service.get(id)
    return member_service.list(params, family_group_id=family_group_id, user_id=user_id)


@router.post('', status_code=201, response_model=FamilyMemberResponse)
def create_member(data: FamilyMemberCreateRequest, member_service: FamilyMemberService = Depends()) -> Any:
    return member_service.create(data)


@router.put('', response_model=FamilyMemberResponse)
def update_member(
    data: FamilyMemberUpdateRequest,
    id: int = Query(...),
    member_service: FamilyMemberService = Depends()
) -> Any:
    return member_service.update(id, data)


@router.delete('')
def delete_member(id: int = Query(...), member_service: FamilyMemberService = Depends()) -> Any:
    return deleted_response('Family member', 'deletedRecord', member_service.delete(id))
