from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_quiz import (
    QuizResultResponse, QuizResultCreateRequest, QuizResultUpdateRequest
)
from wellness.services.srv_quiz import QuizResultService

router = APIRouter()


@router.get('', response_model=Union[QuizResultResponse, List[QuizResultResponse]])
def get_results(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    result_service: QuizResultService = Depends()
) -> Any:
    if id is not None:
        return result_service.get(id)
    return result_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=QuizResultResponse)
def create_result(data: QuizResultCreateRequest, result_service: QuizResultService = Depends()) -> Any:
    return result_service.create(data)


@router.put('', response_model=QuizResultResponse)
def update_result(
    data: QuizResultUpdateRequest,
    id: int = Query(...),
    result_service: QuizResultService = Depends()
) -> Any:
    return result_service.update(id, data)


@router.delete('')
def delete_result(id: int = Query(...), result_service: QuizResultService = Depends()) -> Any:
    return deleted_response('Quiz result', 'deletedRecord', result_service.delete(id))
