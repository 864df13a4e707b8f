from sqlalchemy.orm import Session

from blogapi.models.child_comment import ChildComment
from blogapi.schemas.comment import ChildCommentOut, ChildCommentWithUserOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.child_comment.child_comment_interface import IChildCommentRepository
from blogapi.storage.query_builder import ListParams, PageResult, sort_allow_list


class SQLAlchemyChildCommentRepository(SQLAlchemyRepository, IChildCommentRepository):

    model = ChildComment
    out_schema = ChildCommentOut
    sortable = sort_allow_list(ChildComment.id, ChildComment.created_at, ChildComment.updated_at)

    def __init__(self, db: Session):
        super().__init__(db)

    def list_by_comment(self, comment_id: int, params: ListParams) -> PageResult:
        return self._page(
            params,
            ChildComment.comment_id == comment_id,
            includes=("user",),
            schema=ChildCommentWithUserOut,
        )
