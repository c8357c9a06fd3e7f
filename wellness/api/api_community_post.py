from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, pagination_params
from wellness.schemas.sche_base import deleted_response
from wellness.schemas.sche_community import PostResponse, PostCreateRequest, PostUpdateRequest
from wellness.services.srv_community import CommunityPostService

router = APIRouter()


@router.get('', response_model=Union[PostResponse, List[PostResponse]])
def get_posts(
    id: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    author_id: Optional[int] = Query(None, alias='authorId'),
    category: Optional[str] = Query(None),
    params: PaginationParams = Depends(pagination_params),
    post_service: CommunityPostService = Depends()
) -> Any:
    if id is not None:
        return post_service.get(id)
    return post_service.list(params, search=search, author_id=author_id, category=category)


@router.post('', status_code=201, response_model=PostResponse)
def create_post(data: PostCreateRequest, post_service: CommunityPostService = Depends()) -> Any:
    return post_service.create(data)


@router.put('', response_model=PostResponse)
def update_post(
    data: PostUpdateRequest,
    id: int = Query(...),
    post_service: CommunityPostService = Depends()
) -> Any:
    return post_service.update(id, data)


@router.delete('')
def delete_post(id: int = Query(...), post_service: CommunityPostService = Depends()) -> Any:
    return deleted_response('Community post', 'deletedPost', post_service.delete(id))
