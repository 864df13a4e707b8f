from typing import Optional, Protocol

from blogapi.schemas.comment import CommentCreate, CommentUpdate, CommentOut, CommentThreadOut
from blogapi.storage.query_builder import ListParams, PageResult


class ICommentRepository(Protocol):
    """评论仓库接口"""

    def get_by_id(self, comment_id: int) -> Optional[CommentOut]:
        ...

    def get_thread(self, comment_id: int) -> Optional[CommentThreadOut]:
        """评论 + 作者 + 全部楼中楼"""
        ...

    def list_by_post(self, post_id: int, params: ListParams) -> PageResult:
        ...

    def create(self, data: CommentCreate, **extra) -> CommentOut:
        ...

    def update(self, comment_id: int, data: CommentUpdate) -> Optional[CommentOut]:
        ...

    def delete(self, comment_id: int) -> bool:
        ...
