from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_community import (
    CommentResponse, CommentCreateRequest, CommentUpdateRequest
)
from wellness.services.srv_community import PostCommentService

router = APIRouter()


@router.get('', response_model=Union[CommentResponse, List[CommentResponse]])
def get_comments(
    id: Optional[int] = Query(None),
    post_id: Optional[int] = Query(None, alias='postId'),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    comment_service: PostCommentService = Depends()
) -> Any:
    if id is not None:
        return comment_service.get(id)
    return comment_service.list(params, post_id=post_id, user_id=user_id)


@router.post('', status_code=201, response_model=CommentResponse)
def create_comment(data: CommentCreateRequest, comment_service: PostCommentService = Depends()) -> Any:
    return comment_service.create(data)


@router.put('', response_model=CommentResponse)
def update_comment(
    data: CommentUpdateRequest,
    id: int = Query(...),
    comment_service: PostCommentService = Depends()
) -> Any:
    return comment_service.update(id, data)


@router.delete('')
def delete_comment(id: int = Query(...), comment_service: PostCommentService = Depends()) -> Any:
    return deleted_response('Post comment', 'deletedComment', comment_service.delete(id))
