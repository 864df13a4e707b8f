from fastapi import APIRouter, Depends, Response

from blogapi.schemas.comment import CommentCreate, CommentUpdate, ChildCommentOut, BatchChildCommentsOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import comment_svc

from blogapi.storage.database import get_user_repo, get_comment_repo, get_child_comment_repo
from blogapi.storage.comment.comment_interface import ICommentRepository
from blogapi.storage.child_comment.child_comment_interface import IChildCommentRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams
from blogapi.routers.params import list_params

from blogapi.core.exceptions import (
    UserNotFound,
    CommentNotFound,
    ChildCommentNotFound,
    NotOwnerError,
    InvalidSortField,
)
from blogapi.core.logx import logger

child_comments_router = APIRouter(prefix="/child-comments", tags=["child-comments"])


@child_comments_router.get("/comment/{comment_id}", response_model=BatchChildCommentsOut)
def list_child_comments(
    comment_id: int,
    params: ListParams = Depends(list_params()),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    child_repo: IChildCommentRepository = Depends(get_child_comment_repo),
):
    """
    某条评论下的楼中楼分页
    """
    try:
        result = comment_svc.list_child_comments(
            comment_repo=comment_repo,
            child_repo=child_repo,
            comment_id=comment_id,
            params=params,
        )
        return BizResponse(data=result)
    except CommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("list_child_comments error")
        return BizResponse(msg=str(e), status_code=500)


@child_comments_router.get("/{child_comment_id}", response_model=ChildCommentOut)
def get_child_comment(child_comment_id: int, child_repo: IChildCommentRepository = Depends(get_child_comment_repo)):
    try:
        child = comment_svc.get_child_comment(child_repo=child_repo, child_comment_id=child_comment_id)
        return BizResponse(data=child)
    except ChildCommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_child_comment error")
        return BizResponse(msg=str(e), status_code=500)


@child_comments_router.post("/{comment_id}/{user_id}", response_model=ChildCommentOut)
def create_child_comment(
    comment_id: int,
    user_id: int,
    payload: CommentCreate,
    user_repo: IUserRepository = Depends(get_user_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
    child_repo: IChildCommentRepository = Depends(get_child_comment_repo),
):
    try:
        child = comment_svc.create_child_comment(
            user_repo=user_repo,
            comment_repo=comment_repo,
            child_repo=child_repo,
            comment_id=comment_id,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=child)
    except (CommentNotFound, UserNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("create_child_comment error")
        return BizResponse(msg=str(e), status_code=500)


@child_comments_router.put("/{child_comment_id}/{user_id}", response_model=ChildCommentOut)
def update_child_comment(
    child_comment_id: int,
    user_id: int,
    payload: CommentUpdate,
    child_repo: IChildCommentRepository = Depends(get_child_comment_repo),
):
    try:
        child = comment_svc.update_child_comment(
            child_repo=child_repo,
            child_comment_id=child_comment_id,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=child)
    except NotOwnerError as e:
        return BizResponse(msg=str(e), status_code=400)
    except ChildCommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("update_child_comment error")
        return BizResponse(msg=str(e), status_code=500)


@child_comments_router.delete("/admin/{child_comment_id}", status_code=204)
def remove_child_comment_by_admin(
    child_comment_id: int,
    child_repo: IChildCommentRepository = Depends(get_child_comment_repo),
):
    try:
        comment_svc.remove_child_comment_by_admin(child_repo=child_repo, child_comment_id=child_comment_id)
        return Response(status_code=204)
    except Exception as e:
        logger.exception("remove_child_comment_by_admin error")
        return BizResponse(msg=str(e), status_code=500)


@child_comments_router.delete("/{child_comment_id}/{user_id}", status_code=204)
def remove_child_comment(
    child_comment_id: int,
    user_id: int,
    child_repo: IChildCommentRepository = Depends(get_child_comment_repo),
):
    try:
        comment_svc.remove_child_comment(child_repo=child_repo, child_comment_id=child_comment_id, user_id=user_id)
        return Response(status_code=204)
    except NotOwnerError as e:
        return BizResponse(msg=str(e), status_code=400)
    except ChildCommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("remove_child_comment error")
        return BizResponse(msg=str(e), status_code=500)
