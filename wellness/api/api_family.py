from typing import Any

from fastapi import APIRouter, Depends

from wellness.schemas.sche_family import FamilyGroupView
from wellness.services.srv_aggregate import AggregateService

router = APIRouter()


@router.get('/{group_id}/members', response_model=FamilyGroupView)
def get_family_group_members(group_id: str, aggregate_service: AggregateService = Depends()) -> Any:
    return aggregate_service.get_family_group(group_id)
