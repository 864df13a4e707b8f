# blogapi/storage/like_post/SQLAlchemyLikePostRepository.py

from typing import List

from sqlalchemy.orm import Session

from blogapi.core.db import transaction
from blogapi.models.like_post import LikePost
from blogapi.schemas.like_post import LikePostOut, LikeWithUserOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.like_post.like_post_interface import ILikePostRepository
from blogapi.storage.query_builder import eager, sort_allow_list


class SQLAlchemyLikePostRepository(SQLAlchemyRepository, ILikePostRepository):
    """
    使用 SQLAlchemy 实现的点赞仓库
    业务层依赖 ILikePostRepository 接口，而不是这个具体实现
    """

    model = LikePost
    out_schema = LikePostOut
    sortable = sort_allow_list(LikePost.id, LikePost.created_at)

    def __init__(self, db: Session):
        super().__init__(db)

    def _user_likes(self, post_id: int, user_id: int):
        return self._query().filter(LikePost.post_id == post_id, LikePost.user_id == user_id)

    def like(self, post_id: int, user_id: int) -> LikePostOut:
        like = LikePost(post_id=post_id, user_id=user_id)

        with transaction(self.db):
            self.db.add(like)

        self.db.refresh(like)
        return self._to_out(like)

    def list_by_post(self, post_id: int) -> List[LikeWithUserOut]:
        """按点赞时间倒序"""
        likes: List[LikePost] = (
            self._query()
            .options(*eager(LikePost, ("user",)))
            .filter(LikePost.post_id == post_id)
            .order_by(LikePost.id.desc())
            .all()
        )
        return [self._to_out(like, LikeWithUserOut, ("user",)) for like in likes]

    def count_by_post(self, post_id: int) -> int:
        return self._query().filter(LikePost.post_id == post_id).count()

    def has_liked(self, post_id: int, user_id: int) -> bool:
        return self._user_likes(post_id, user_id).first() is not None

    def unlike(self, post_id: int, user_id: int) -> int:
        likes = self._user_likes(post_id, user_id).all()
        if not likes:
            return 0

        with transaction(self.db):
            for like in likes:
                self.db.delete(like)

        return len(likes)
