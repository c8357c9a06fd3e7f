from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from wellness.helpers.paging import PaginationParams, feed_pagination_params
from wellness.schemas.sche_community import (
    FeedResponse, PaginationMetadata, LikeToggleRequest, LikeToggleResponse
)
from wellness.services.srv_community import CommunityPostService, PostLikeService

router = APIRouter()


@router.get('/feed', response_model=FeedResponse)
def get_feed(
    category: Optional[str] = Query(None),
    user_id: Optional[int] = Query(None, alias='userId', ge=1),
    params: PaginationParams = Depends(feed_pagination_params),
    post_service: CommunityPostService = Depends()
) -> Any:
    """
    Newest posts first, optionally narrowed to one category and/or author.
    """
    posts, total = post_service.feed(params, category=category, author_id=user_id)
    return FeedResponse(
        posts=posts,
        pagination=PaginationMetadata(limit=params.limit, offset=params.offset, total=total)
    )


@router.post('/posts/{post_id}/like', response_model=LikeToggleResponse)
def toggle_like(post_id: int, data: LikeToggleRequest, like_service: PostLikeService = Depends()) -> Any:
    return like_service.toggle(post_id, data.user_id)
