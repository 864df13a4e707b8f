from typing import Optional, Protocol

from blogapi.schemas.comment import CommentCreate, CommentUpdate, ChildCommentOut
from blogapi.storage.query_builder import ListParams, PageResult


class IChildCommentRepository(Protocol):
    """子评论（楼中楼）仓库接口"""

    def get_by_id(self, child_comment_id: int) -> Optional[ChildCommentOut]:
        ...

    def list_by_comment(self, comment_id: int, params: ListParams) -> PageResult:
        ...

    def create(self, data: CommentCreate, **extra) -> ChildCommentOut:
        ...

    def update(self, child_comment_id: int, data: CommentUpdate) -> Optional[ChildCommentOut]:
        ...

    def delete(self, child_comment_id: int) -> bool:
        ...
