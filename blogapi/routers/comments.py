from fastapi import APIRouter, Depends, Response

from blogapi.schemas.comment import CommentCreate, CommentUpdate, CommentOut, CommentThreadOut, BatchCommentsOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import comment_svc

from blogapi.storage.database import get_user_repo, get_post_repo, get_comment_repo
from blogapi.storage.comment.comment_interface import ICommentRepository
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams
from blogapi.routers.params import list_params

from blogapi.core.exceptions import (
    PostNotFound,
    UserNotFound,
    CommentNotFound,
    NotOwnerError,
    InvalidSortField,
)
from blogapi.core.logx import logger

comments_router = APIRouter(prefix="/comments", tags=["comments"])


@comments_router.get("/post/{post_id}", response_model=BatchCommentsOut)
def list_comments_by_post(
    post_id: int,
    params: ListParams = Depends(list_params()),
    post_repo: IPostRepository = Depends(get_post_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    """
    某篇帖子下的评论分页（附作者和楼中楼）
    """
    try:
        result = comment_svc.list_comments_by_post(
            post_repo=post_repo,
            comment_repo=comment_repo,
            post_id=post_id,
            params=params,
        )
        return BizResponse(data=result)
    except PostNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("list_comments_by_post error")
        return BizResponse(msg=str(e), status_code=500)


@comments_router.get("/{comment_id}", response_model=CommentThreadOut)
def get_comment(comment_id: int, comment_repo: ICommentRepository = Depends(get_comment_repo)):
    try:
        comment = comment_svc.get_comment(comment_repo=comment_repo, comment_id=comment_id)
        return BizResponse(data=comment)
    except CommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_comment error")
        return BizResponse(msg=str(e), status_code=500)


@comments_router.post("/{post_id}/{user_id}", response_model=CommentOut)
def create_comment(
    post_id: int,
    user_id: int,
    payload: CommentCreate,
    user_repo: IUserRepository = Depends(get_user_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    try:
        comment = comment_svc.create_comment(
            user_repo=user_repo,
            post_repo=post_repo,
            comment_repo=comment_repo,
            post_id=post_id,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=comment)
    except (PostNotFound, UserNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("create_comment error")
        return BizResponse(msg=str(e), status_code=500)


@comments_router.put("/{comment_id}/{user_id}", response_model=CommentOut)
def update_comment(
    comment_id: int,
    user_id: int,
    payload: CommentUpdate,
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    """
    修改评论：只有评论作者本人可以修改
    """
    try:
        comment = comment_svc.update_comment(
            comment_repo=comment_repo,
            comment_id=comment_id,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=comment)
    except NotOwnerError as e:
        return BizResponse(msg=str(e), status_code=400)
    except CommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("update_comment error")
        return BizResponse(msg=str(e), status_code=500)


@comments_router.delete("/admin/{comment_id}", status_code=204)
def remove_comment_by_admin(comment_id: int, comment_repo: ICommentRepository = Depends(get_comment_repo)):
    """
    管理员删除评论：评论不存在也返回 204
    """
    try:
        comment_svc.remove_comment_by_admin(comment_repo=comment_repo, comment_id=comment_id)
        return Response(status_code=204)
    except Exception as e:
        logger.exception("remove_comment_by_admin error")
        return BizResponse(msg=str(e), status_code=500)


@comments_router.delete("/{comment_id}/{user_id}", status_code=204)
def remove_comment(
    comment_id: int,
    user_id: int,
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    try:
        comment_svc.remove_comment(comment_repo=comment_repo, comment_id=comment_id, user_id=user_id)
        return Response(status_code=204)
    except NotOwnerError as e:
        return BizResponse(msg=str(e), status_code=400)
    except CommentNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("remove_comment error")
        return BizResponse(msg=str(e), status_code=500)
