from typing import Callable

from fastapi import APIRouter, Depends, Response

from blogapi.models.report import ReportTarget
from blogapi.schemas.report import ReportCreate, ReportOut, BatchReportsOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import report_svc

from blogapi.storage.database import (
    get_user_repo,
    get_post_repo,
    get_comment_repo,
    get_child_comment_repo,
    get_post_report_repo,
    get_comment_report_repo,
    get_child_comment_report_repo,
)
from blogapi.storage.report.report_interface import IReportRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams
from blogapi.routers.params import list_params

from blogapi.core.exceptions import (
    UserNotFound,
    PostNotFound,
    CommentNotFound,
    ChildCommentNotFound,
    ReportNotFound,
    InvalidSortField,
)
from blogapi.core.logx import logger


def build_report_router(target: ReportTarget, get_target_repo: Callable, get_report_repo: Callable) -> APIRouter:
    """
    三种举报（帖子 / 评论 / 子评论）的接口完全一致，只是被举报对象不同：
    - POST   /report-<target>s/{target_id}/{user_id}
    - GET    /report-<target>s
    - GET    /report-<target>s/{report_id}
    - DELETE /report-<target>s/{report_id}
    """
    router = APIRouter(prefix=f"/report-{target.value}s", tags=[f"report-{target.value}s"])

    @router.post("/{target_id}/{user_id}", response_model=ReportOut)
    def create_report(
        target_id: int,
        user_id: int,
        payload: ReportCreate,
        user_repo: IUserRepository = Depends(get_user_repo),
        target_repo=Depends(get_target_repo),
        report_repo: IReportRepository = Depends(get_report_repo),
    ):
        try:
            report = report_svc.create_report(
                user_repo=user_repo,
                target_repo=target_repo,
                report_repo=report_repo,
                target_id=target_id,
                user_id=user_id,
                data=payload,
            )
            return BizResponse(data=report)
        except (PostNotFound, CommentNotFound, ChildCommentNotFound, UserNotFound) as e:
            return BizResponse(msg=str(e), status_code=404)
        except Exception as e:
            logger.exception(f"create {target.value} report error")
            return BizResponse(msg=str(e), status_code=500)

    @router.get("", response_model=BatchReportsOut)
    def list_reports(
        params: ListParams = Depends(list_params()),
        report_repo: IReportRepository = Depends(get_report_repo),
    ):
        try:
            return BizResponse(data=report_svc.list_reports(report_repo=report_repo, params=params))
        except InvalidSortField as e:
            return BizResponse(msg=str(e), status_code=400)
        except Exception as e:
            logger.exception(f"list {target.value} reports error")
            return BizResponse(msg=str(e), status_code=500)

    @router.get("/{report_id}", response_model=ReportOut)
    def get_report(report_id: int, report_repo: IReportRepository = Depends(get_report_repo)):
        try:
            return BizResponse(data=report_svc.get_report(report_repo=report_repo, report_id=report_id))
        except ReportNotFound as e:
            return BizResponse(msg=str(e), status_code=404)
        except Exception as e:
            logger.exception(f"get {target.value} report error")
            return BizResponse(msg=str(e), status_code=500)

    @router.delete("/{report_id}", status_code=204)
    def delete_report(report_id: int, report_repo: IReportRepository = Depends(get_report_repo)):
        try:
            report_svc.delete_report(report_repo=report_repo, report_id=report_id)
            return Response(status_code=204)
        except ReportNotFound as e:
            return BizResponse(msg=str(e), status_code=404)
        except Exception as e:
            logger.exception(f"delete {target.value} report error")
            return BizResponse(msg=str(e), status_code=500)

    return router


report_posts_router = build_report_router(ReportTarget.POST, get_post_repo, get_post_report_repo)
report_comments_router = build_report_router(ReportTarget.COMMENT, get_comment_repo, get_comment_report_repo)
report_child_comments_router = build_report_router(
    ReportTarget.CHILD_COMMENT, get_child_comment_repo, get_child_comment_report_repo
)
