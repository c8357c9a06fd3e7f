from datetime import datetime
from typing import List, Optional

from wellness.helpers.enums import LikeAction
from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase


class PostCreateRequest(CamelModel):
    author_id: Optional[int] = None
    author_name: RequiredText
    content: RequiredText
    category: RequiredText
    is_anonymous: bool = False


class PostUpdateRequest(UpdateRequestBase):
    # likesCount / commentsCount are maintained by the server only
    content: Optional[UpdateText] = None
    category: Optional[UpdateText] = None


class PostResponse(CamelModel):
    id: int
    author_id: Optional[int] = None
    author_name: str
    content: str
    category: str
    is_anonymous: bool
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime


class PaginationMetadata(CamelModel):
    limit: int
    offset: int
    total: int


class FeedResponse(CamelModel):
    posts: List[PostResponse]
    pagination: PaginationMetadata


class LikeToggleRequest(CamelModel):
    user_id: int


class LikeToggleResponse(CamelModel):
    action: LikeAction
    post_id: int
    user_id: int
    likes_count: int


class PostLikeCreateRequest(CamelModel):
    post_id: int
    user_id: int


class PostLikeResponse(CamelModel):
    id: int
    post_id: int
    user_id: int
    created_at: datetime


class CommentCreateRequest(CamelModel):
    post_id: int
    user_id: int
    comment_text: RequiredText


class CommentUpdateRequest(UpdateRequestBase):
    comment_text: Optional[UpdateText] = None


class CommentResponse(CamelModel):
    id: int
    post_id: int
    user_id: int
    comment_text: str
    created_at: datetime
