from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.enums import MetricType
from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_metric import (
    UserMetricResponse, UserMetricCreateRequest, UserMetricUpdateRequest
)
from wellness.services.srv_metric import UserMetricService

router = APIRouter()


@router.get('', response_model=Union[UserMetricResponse, List[UserMetricResponse]])
def get_metrics(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    metric_type: Optional[MetricType] = Query(None, alias='metricType'),
    date: Optional[str] = Query(None),
    params: PaginationParams = Depends(pagination_params),
    metric_service: UserMetricService = Depends()
) -> Any:
    if id is not None:
        return metric_service.get(id)
    return metric_service.list(
        params, user_id=user_id, metric_type=metric_type.value if metric_type else None, date=date
    )


@router.post('', status_code=201, response_model=UserMetricResponse)
def create_metric(data: UserMetricCreateRequest, metric_service: UserMetricService = Depends()) -> Any:
    return metric_service.create(data)


@router.put('', response_model=UserMetricResponse)
def update_metric(
    data: UserMetricUpdateRequest, id: int = Query(...), metric_service: UserMetricService = Depends()
) -> Any:
    return metric_service.update(id, data)


@router.delete('')
def delete_metric(id: int = Query(...), metric_service: UserMetricService = Depends()) -> Any:
    return deleted_response('User metric', 'deletedRecord', metric_service.delete(id))
