from typing import Dict

from blogapi.schemas.like_post import LikePostOut, BatchLikesOut, LikeStatusOut
from blogapi.storage.like_post.like_post_interface import ILikePostRepository
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.user.user_interface import IUserRepository

from blogapi.core.logx import logger
from blogapi.core.exceptions import UserNotFound, PostNotFound, LikeNotFound


# ----------------------------- 点赞 / 取消点赞 -----------------------------
def like_post(
    user_repo: IUserRepository,
    post_repo: IPostRepository,
    like_repo: ILikePostRepository,
    post_id: int,
    user_id: int,
    to_dict: bool = True,
) -> Dict | LikePostOut:
    """
    点赞帖子：
    1. 校验帖子、用户是否存在
    2. 直接插入一条点赞记录
       - 不做 (post_id, user_id) 去重，重复点赞会产生多条记录，由调用方自行约束
    """
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)
    if not user_repo.get_by_id(user_id):
        raise UserNotFound(user_id)

    like = like_repo.like(post_id, user_id)
    logger.info(f"User {user_id} liked post {post_id}, like id={like.id}")
    return like.dump() if to_dict else like


def unlike_post(like_repo: ILikePostRepository, post_id: int, user_id: int) -> int:
    """
    取消点赞：删除该用户对该帖子的全部点赞记录
    - 一条都没有 -> LikeNotFound
    """
    removed = like_repo.unlike(post_id, user_id)
    if removed == 0:
        raise LikeNotFound(post_id, user_id)
    logger.info(f"User {user_id} unliked post {post_id}, removed={removed}")
    return removed


# ----------------------------- 查询 -----------------------------
def list_post_likes(
    post_repo: IPostRepository,
    like_repo: ILikePostRepository,
    post_id: int,
    to_dict: bool = True,
) -> Dict | BatchLikesOut:
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)

    likes = like_repo.list_by_post(post_id)
    result = BatchLikesOut(data=likes, count=len(likes))
    return result.dump() if to_dict else result


def like_status(like_repo: ILikePostRepository, post_id: int, user_id: int, to_dict: bool = True) -> Dict | LikeStatusOut:
    """某个用户是否点赞过某篇帖子，附带帖子点赞总数"""
    result = LikeStatusOut(
        post_id=post_id,
        user_id=user_id,
        liked=like_repo.has_liked(post_id, user_id),
        count=like_repo.count_by_post(post_id),
    )
    return result.dump() if to_dict else result
