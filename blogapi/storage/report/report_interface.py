from typing import Optional, Protocol

from blogapi.models.report import ReportTarget
from blogapi.schemas.report import ReportCreate, ReportOut
from blogapi.storage.query_builder import ListParams, PageResult


class IReportRepository(Protocol):
    """
    举报仓库接口：帖子 / 评论 / 子评论三种举报共用一套接口，
    具体操作哪张表由 target 决定
    """

    target: ReportTarget

    def get_by_id(self, report_id: int) -> Optional[ReportOut]:
        ...

    def create(self, data: ReportCreate, **extra) -> ReportOut:
        """extra 需要带 target_id、user_id"""
        ...

    def list_reports(self, params: ListParams) -> PageResult:
        """管理员查看举报列表（附举报人信息）"""
        ...

    def delete(self, report_id: int) -> bool:
        ...
