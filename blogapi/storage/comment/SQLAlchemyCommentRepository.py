from typing import Optional

from sqlalchemy.orm import Session

from blogapi.models.comment import Comment
from blogapi.schemas.comment import CommentOut, CommentThreadOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.comment.comment_interface import ICommentRepository
from blogapi.storage.query_builder import ListParams, PageResult, eager, sort_allow_list

THREAD_INCLUDES = ("user", "child_comments")


class SQLAlchemyCommentRepository(SQLAlchemyRepository, ICommentRepository):

    model = Comment
    out_schema = CommentOut
    sortable = sort_allow_list(Comment.id, Comment.created_at, Comment.updated_at)

    def __init__(self, db: Session):
        super().__init__(db)

    def get_thread(self, comment_id: int) -> Optional[CommentThreadOut]:
        comment: Optional[Comment] = (
            self._query()
            .options(*eager(Comment, THREAD_INCLUDES))
            .filter(Comment.id == comment_id)
            .first()
        )
        if not comment:
            return None
        return self._to_out(comment, CommentThreadOut, THREAD_INCLUDES)

    def list_by_post(self, post_id: int, params: ListParams) -> PageResult:
        return self._page(params, Comment.post_id == post_id, includes=THREAD_INCLUDES, schema=CommentThreadOut)
