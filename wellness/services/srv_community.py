import logging
from typing import Any, List, Optional, Set, Tuple

from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from wellness.db.base import atomic
from wellness.helpers.enums import LikeAction
from wellness.helpers.exception_handler import CustomException, NotFoundException
from wellness.helpers.paging import PaginationParams, paginate_with_total
from wellness.models.model_community_post import CommunityPost
from wellness.models.model_post_comment import PostComment
from wellness.models.model_post_like import PostLike
from wellness.repository.repo_community import (
    CommunityPostRepository, PostLikeRepository, PostCommentRepository
)
from wellness.repository.repo_user import UserRepository
from wellness.schemas.sche_community import (
    PostCreateRequest, PostResponse, PostLikeCreateRequest, PostLikeResponse,
    CommentCreateRequest, CommentResponse, LikeToggleResponse
)
from wellness.services.srv_base import CrudService

logger = logging.getLogger(__name__)


class CounterService:
    """
    Keeps ``likes_count`` / ``comments_count`` equal to the number of child rows.

    Counts are recomputed from the child tables after every mutation instead of
    being incremented, so they can never drift or go negative.
    """

    def __init__(
        self,
        post_repo: CommunityPostRepository = Depends(),
        like_repo: PostLikeRepository = Depends(),
        comment_repo: PostCommentRepository = Depends()
    ):
        self.post_repo = post_repo
        self.like_repo = like_repo
        self.comment_repo = comment_repo

    def get_post(self, post_id: int) -> CommunityPost:
        post = self.post_repo.get_by_id(post_id)
        if not post:
            raise NotFoundException('Post not found', 'POST_NOT_FOUND')
        return post

    def recount_likes(self, post: CommunityPost) -> int:
        self.post_repo.db.flush()
        post.likes_count = self.like_repo.count_by_post(post.id)
        return post.likes_count

    def recount_comments(self, post: CommunityPost) -> int:
        self.post_repo.db.flush()
        post.comments_count = self.comment_repo.count_by_post(post.id)
        return post.comments_count

    def posts_touched_by(self, user_id: int) -> Set[int]:
        return self.like_repo.post_ids_for_user(user_id) | self.comment_repo.post_ids_for_user(user_id)

    def recount(self, post_ids: Set[int]) -> None:
        for post in self.post_repo.get_by_ids(post_ids):
            self.recount_likes(post)
            self.recount_comments(post)


class CommunityPostService(CrudService):
    label = 'Community post'
    response_schema = PostResponse

    def __init__(self, repo: CommunityPostRepository = Depends(), user_repo: UserRepository = Depends()):
        self.repo = repo
        self.user_repo = user_repo

    def list(self, params: PaginationParams, search: Optional[str] = None, **filters: Any) -> List[CommunityPost]:
        query = self.repo.search(search, **filters)
        return query.order_by(CommunityPost.id.asc()).limit(params.limit).offset(params.offset).all()

    def create(self, data: PostCreateRequest) -> CommunityPost:
        if data.author_id is not None:
            self.ensure_user_exists(data.author_id)
        post = CommunityPost(**data.model_dump(), likes_count=0, comments_count=0)
        return self.repo.create(post)

    def feed(self, params: PaginationParams, category: Optional[str] = None,
             author_id: Optional[int] = None) -> Tuple[List[CommunityPost], int]:
        query = self.repo.query(category=category, author_id=author_id)
        return paginate_with_total(
            query, params, CommunityPost.created_at.desc(), CommunityPost.id.desc()
        )


class PostLikeService(CrudService):
    label = 'Post like'
    response_schema = PostLikeResponse

    def __init__(
        self,
        repo: PostLikeRepository = Depends(),
        user_repo: UserRepository = Depends(),
        counters: CounterService = Depends()
    ):
        self.repo = repo
        self.user_repo = user_repo
        self.counters = counters

    def create(self, data: PostLikeCreateRequest) -> PostLike:
        post = self.counters.get_post(data.post_id)
        self.ensure_user_exists(data.user_id)
        if self.repo.get_by_post_and_user(data.post_id, data.user_id):
            raise CustomException(http_code=409, code='ALREADY_LIKED', message='User has already liked this post')
        try:
            with atomic(self.repo.db):
                like = self.repo.create(PostLike(post_id=data.post_id, user_id=data.user_id), commit=False)
                self.counters.recount_likes(post)
        except IntegrityError:
            raise CustomException(http_code=409, code='ALREADY_LIKED', message='User has already liked this post')
        return like

    def delete(self, record_id: int) -> PostLikeResponse:
        like = self.get(record_id)
        snapshot = PostLikeResponse.model_validate(like)
        post = self.counters.get_post(like.post_id)
        with atomic(self.repo.db):
            self.repo.delete(like, commit=False)
            self.counters.recount_likes(post)
        return snapshot

    def toggle(self, post_id: int, user_id: int) -> LikeToggleResponse:
        """
        Like the post if ``user_id`` has not liked it yet, otherwise unlike it.

        The unique (post_id, user_id) constraint rejects a concurrent duplicate
        like; that request gets 409 instead of a second row.
        """
        post = self.counters.get_post(post_id)
        self.ensure_user_exists(user_id)
        try:
            with atomic(self.repo.db):
                existing = self.repo.get_by_post_and_user(post_id, user_id)
                if existing:
                    self.repo.delete(existing, commit=False)
                    action = LikeAction.UNLIKED
                else:
                    self.repo.create(PostLike(post_id=post_id, user_id=user_id), commit=False)
                    action = LikeAction.LIKED
                likes_count = self.counters.recount_likes(post)
        except IntegrityError:
            raise CustomException(
                http_code=409, code='LIKE_CONFLICT', message='Like is being updated by another request'
            )
        logger.info(f"Post {post_id} {action.value} by user {user_id}, likes={likes_count}")
        return LikeToggleResponse(action=action, post_id=post_id, user_id=user_id, likes_count=likes_count)


class PostCommentService(CrudService):
    label = 'Post comment'
    not_found_code = 'COMMENT_NOT_FOUND'
    response_schema = CommentResponse

    def __init__(
        self,
        repo: PostCommentRepository = Depends(),
        user_repo: UserRepository = Depends(),
        counters: CounterService = Depends()
    ):
        self.repo = repo
        self.user_repo = user_repo
        self.counters = counters

    def list(self, params: PaginationParams, **filters: Any) -> List[PostComment]:
        return self.repo.list(params, PostComment.created_at.desc(), PostComment.id.desc(), **filters)

    def create(self, data: CommentCreateRequest) -> PostComment:
        post = self.counters.get_post(data.post_id)
        self.ensure_user_exists(data.user_id)
        with atomic(self.repo.db):
            comment = self.repo.create(PostComment(**data.model_dump()), commit=False)
            self.counters.recount_comments(post)
        return comment

    def delete(self, record_id: int) -> CommentResponse:
        comment = self.get(record_id)
        snapshot = CommentResponse.model_validate(comment)
        post = self.counters.get_post(comment.post_id)
        with atomic(self.repo.db):
            self.repo.delete(comment, commit=False)
            self.counters.recount_comments(post)
        return snapshot
