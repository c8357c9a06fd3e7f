from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_quiz import (
    QuizResponseItem, QuizResponseCreateRequest, QuizResponseUpdateRequest
)
from wellness.services.srv_quiz import QuizResponseService

router = APIRouter()


@router.get('', response_model=Union[QuizResponseItem, List[QuizResponseItem]])
def get_responses(
    id: Optional[int] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    response_service: QuizResponseService = Depends()
) -> Any:
    if id is not None:
        return response_service.get(id)
    return response_service.list(params, user_id=user_id)


@router.post('', status_code=201, response_model=QuizResponseItem)
def create_response(data: QuizResponseCreateRequest, response_service: QuizResponseService = Depends()) -> Any:
    return response_service.create(data)


@router.put('', response_model=QuizResponseItem)
def update_response(
    data: QuizResponseUpdateRequest,
    id: int = Query(...),
    response_service: QuizResponseService = Depends()
) -> Any:
    return response_service.update(id, data)


@router.delete('')
def delete_response(id: int = Query(...), response_service: QuizResponseService = Depends()) -> Any:
    return deleted_response('Quiz response', 'deletedRecord', response_service.delete(id))
