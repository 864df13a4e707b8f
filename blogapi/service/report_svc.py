from typing import Dict, Optional, Protocol

from blogapi.models.report import ReportTarget
from blogapi.schemas.report import ReportCreate, ReportOut, BatchReportsOut
from blogapi.storage.report.report_interface import IReportRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams

from blogapi.core.logx import logger
from blogapi.core.exceptions import (
    UserNotFound,
    PostNotFound,
    CommentNotFound,
    ChildCommentNotFound,
    ReportNotFound,
)

# 被举报对象不存在时抛出的异常
TARGET_NOT_FOUND = {
    ReportTarget.POST: PostNotFound,
    ReportTarget.COMMENT: CommentNotFound,
    ReportTarget.CHILD_COMMENT: ChildCommentNotFound,
}


class TargetLookup(Protocol):
    """被举报对象所在仓库，只需要 get_by_id"""

    def get_by_id(self, entity_id: int) -> Optional[object]:
        ...


def create_report(
    user_repo: IUserRepository,
    target_repo: TargetLookup,
    report_repo: IReportRepository,
    target_id: int,
    user_id: int,
    data: ReportCreate,
    to_dict: bool = True,
) -> Dict | ReportOut:
    """
    举报：
    1. 被举报对象必须存在
    2. 举报人必须存在
    3. 同一用户可以重复举报同一对象（不去重）
    """
    if not target_repo.get_by_id(target_id):
        raise TARGET_NOT_FOUND[report_repo.target](target_id)
    if not user_repo.get_by_id(user_id):
        raise UserNotFound(user_id)

    report = report_repo.create(data, target_id=target_id, user_id=user_id)
    logger.info(f"User {user_id} reported {report_repo.target.value} {target_id}, report id={report.id}")
    return report.dump() if to_dict else report


def get_report(report_repo: IReportRepository, report_id: int, to_dict: bool = True) -> Dict | ReportOut:
    report = report_repo.get_by_id(report_id)
    if not report:
        raise ReportNotFound(report_repo.target.value, report_id)
    return report.dump() if to_dict else report


def list_reports(report_repo: IReportRepository, params: ListParams, to_dict: bool = True) -> Dict | BatchReportsOut:
    """管理员：举报列表，最新在前，附举报人"""
    page = report_repo.list_reports(params)
    result = BatchReportsOut(
        data=page.rows,
        total_pages=page.total_pages,
        current_page=page.page,
        count=page.count,
    )
    return result.dump() if to_dict else result


def delete_report(report_repo: IReportRepository, report_id: int) -> None:
    if not report_repo.delete(report_id):
        raise ReportNotFound(report_repo.target.value, report_id)
    logger.info(f"Deleted {report_repo.target.value} report id={report_id}")
