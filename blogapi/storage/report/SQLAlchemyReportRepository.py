from typing import Sequence

from sqlalchemy.orm import Session

from blogapi.models.report import ReportTarget, ReportPost, ReportComment, ReportChildComment
from blogapi.schemas.report import ReportOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.report.report_interface import IReportRepository
from blogapi.storage.query_builder import ListParams, PageResult, snapshot, sort_allow_list

# 举报类型 -> (模型, 目标外键列名)
REPORT_MODELS = {
    ReportTarget.POST: (ReportPost, "post_id"),
    ReportTarget.COMMENT: (ReportComment, "comment_id"),
    ReportTarget.CHILD_COMMENT: (ReportChildComment, "child_comment_id"),
}


class SQLAlchemyReportRepository(SQLAlchemyRepository, IReportRepository):
    """
    举报仓库：
    - 三张举报表结构一致，只是目标外键不同
    - 对外统一用 target_id 表示被举报对象
    """

    out_schema = ReportOut

    def __init__(self, db: Session, target: ReportTarget):
        super().__init__(db)
        self.target = target
        self.model, self.target_column = REPORT_MODELS[target]
        self.sortable = sort_allow_list(self.model.id, self.model.created_at)

    def _to_out(self, obj, schema=None, includes: Sequence[str] = ()):
        data = snapshot(obj, includes)
        data["target"] = self.target.value
        data["target_id"] = data.pop(self.target_column)
        return (schema or self.out_schema).model_validate(data, from_attributes=True)

    def create(self, data, **extra) -> ReportOut:
        # 对外的 target_id 落到各自的外键列
        extra[self.target_column] = extra.pop("target_id")
        return super().create(data, **extra)

    def list_reports(self, params: ListParams) -> PageResult:
        return self._page(params, includes=("user",))
