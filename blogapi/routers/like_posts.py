from fastapi import APIRouter, Depends, Response

from blogapi.schemas.like_post import LikePostOut, BatchLikesOut, LikeStatusOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import like_svc

from blogapi.storage.database import get_user_repo, get_post_repo, get_like_post_repo
from blogapi.storage.like_post.like_post_interface import ILikePostRepository
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.user.user_interface import IUserRepository

from blogapi.core.exceptions import PostNotFound, UserNotFound, LikeNotFound
from blogapi.core.logx import logger

like_posts_router = APIRouter(prefix="/like-posts", tags=["like-posts"])


@like_posts_router.post("/{post_id}/{user_id}", response_model=LikePostOut)
def like_post(
    post_id: int,
    user_id: int,
    user_repo: IUserRepository = Depends(get_user_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikePostRepository = Depends(get_like_post_repo),
):
    """
    点赞帖子
    """
    try:
        like = like_svc.like_post(
            user_repo=user_repo,
            post_repo=post_repo,
            like_repo=like_repo,
            post_id=post_id,
            user_id=user_id,
        )
        return BizResponse(data=like)
    except (PostNotFound, UserNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("like_post error")
        return BizResponse(msg=str(e), status_code=500)


@like_posts_router.get("/post/{post_id}", response_model=BatchLikesOut)
def list_post_likes(
    post_id: int,
    post_repo: IPostRepository = Depends(get_post_repo),
    like_repo: ILikePostRepository = Depends(get_like_post_repo),
):
    """
    某篇帖子的点赞列表 + 点赞总数
    """
    try:
        result = like_svc.list_post_likes(post_repo=post_repo, like_repo=like_repo, post_id=post_id)
        return BizResponse(data=result)
    except PostNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("list_post_likes error")
        return BizResponse(msg=str(e), status_code=500)


@like_posts_router.get("/{post_id}/{user_id}", response_model=LikeStatusOut)
def like_status(
    post_id: int,
    user_id: int,
    like_repo: ILikePostRepository = Depends(get_like_post_repo),
):
    try:
        return BizResponse(data=like_svc.like_status(like_repo=like_repo, post_id=post_id, user_id=user_id))
    except Exception as e:
        logger.exception("like_status error")
        return BizResponse(msg=str(e), status_code=500)


@like_posts_router.delete("/{post_id}/{user_id}", status_code=204)
def unlike_post(
    post_id: int,
    user_id: int,
    like_repo: ILikePostRepository = Depends(get_like_post_repo),
):
    """
    取消点赞：没有点过赞返回 404
    """
    try:
        like_svc.unlike_post(like_repo=like_repo, post_id=post_id, user_id=user_id)
        return Response(status_code=204)
    except LikeNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("unlike_post error")
        return BizResponse(msg=str(e), status_code=500)
