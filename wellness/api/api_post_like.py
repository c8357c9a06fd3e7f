from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_community import PostLikeResponse, PostLikeCreateRequest
from wellness.services.srv_community import PostLikeService

router = APIRouter()


@router.get('', response_model=Union[PostLikeResponse, List[PostLikeResponse]])
def get_likes(
    id: Optional[int] = Query(None),
    post_id: Optional[int] = Query(None, alias='postId'),
    user_id: Optional[int] = Query(None, alias='userId'),
    params: PaginationParams = Depends(pagination_params),
    like_service: PostLikeService = Depends()
) -> Any:
    if id is not None:
        return like_service.get(id)
    return like_service.list(params, post_id=post_id, user_id=user_id)


@router.post('', status_code=201, response_model=PostLikeResponse)
def create_like(data: PostLikeCreateRequest, like_service: PostLikeService = Depends()) -> Any:
    """
    API add a like; the post's likesCount follows
    """
    return like_service.create(data)


@router.delete('')
def delete_like(id: int = Query(...), like_service: PostLikeService = Depends()) -> Any:
    return deleted_response('Post like', 'deletedPostLike', like_service.delete(id))
