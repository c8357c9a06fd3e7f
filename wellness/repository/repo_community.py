from typing import List, Optional, Set

from sqlalchemy import or_
from sqlalchemy.orm import Query

from wellness.models.model_community_post import CommunityPost
from wellness.models.model_post_comment import PostComment
from wellness.models.model_post_like import PostLike
from wellness.repository.repo_base import BaseRepository


class CommunityPostRepository(BaseRepository[CommunityPost]):
    model = CommunityPost

    def search(self, search: Optional[str] = None, **filters) -> Query:
        query = self.query(**filters)
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(CommunityPost.content.like(pattern), CommunityPost.author_name.like(pattern)))
        return query

    def get_by_ids(self, post_ids: Set[int]) -> List[CommunityPost]:
        if not post_ids:
            return []
        return self.db.query(CommunityPost).filter(CommunityPost.id.in_(post_ids)).all()


class PostLikeRepository(BaseRepository[PostLike]):
    model = PostLike

    def get_by_post_and_user(self, post_id: int, user_id: int) -> Optional[PostLike]:
        return self.db.query(PostLike).filter(PostLike.post_id == post_id, PostLike.user_id == user_id).first()

    def count_by_post(self, post_id: int) -> int:
        return self.db.query(PostLike).filter(PostLike.post_id == post_id).count()

    def post_ids_for_user(self, user_id: int) -> Set[int]:
        return {row.post_id for row in self.db.query(PostLike.post_id).filter(PostLike.user_id == user_id)}


class PostCommentRepository(BaseRepository[PostComment]):
    model = PostComment

    def count_by_post(self, post_id: int) -> int:
        return self.db.query(PostComment).filter(PostComment.post_id == post_id).count()

    def post_ids_for_user(self, user_id: int) -> Set[int]:
        return {row.post_id for row in self.db.query(PostComment.post_id).filter(PostComment.user_id == user_id)}
