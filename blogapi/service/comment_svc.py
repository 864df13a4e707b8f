from typing import Dict

from blogapi.schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentOut,
    CommentThreadOut,
    ChildCommentOut,
    BatchCommentsOut,
    BatchChildCommentsOut,
)
from blogapi.storage.comment.comment_interface import ICommentRepository
from blogapi.storage.child_comment.child_comment_interface import IChildCommentRepository
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams

from blogapi.core.logx import logger
from blogapi.core.exceptions import (
    UserNotFound,
    PostNotFound,
    CommentNotFound,
    ChildCommentNotFound,
    NotOwnerError,
)


def _require_user(user_repo: IUserRepository, user_id: int) -> None:
    if not user_repo.get_by_id(user_id):
        raise UserNotFound(user_id)


#------------------------------------ 一级评论 ------------------------------------

def create_comment(
    user_repo: IUserRepository,
    post_repo: IPostRepository,
    comment_repo: ICommentRepository,
    post_id: int,
    user_id: int,
    data: CommentCreate,
    to_dict: bool = True,
) -> Dict | CommentOut:
    """
    创建评论：
    - 校验帖子、用户是否存在
    """
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)
    _require_user(user_repo, user_id)

    comment = comment_repo.create(data, post_id=post_id, user_id=user_id)
    logger.info(f"Created comment id={comment.id} on post={post_id} by user={user_id}")
    return comment.dump() if to_dict else comment


def get_comment(comment_repo: ICommentRepository, comment_id: int, to_dict: bool = True) -> Dict | CommentThreadOut:
    """单条评论 + 作者 + 楼中楼"""
    comment = comment_repo.get_thread(comment_id)
    if not comment:
        raise CommentNotFound(comment_id)
    return comment.dump() if to_dict else comment


def list_comments_by_post(
    post_repo: IPostRepository,
    comment_repo: ICommentRepository,
    post_id: int,
    params: ListParams,
    to_dict: bool = True,
) -> Dict | BatchCommentsOut:
    if not post_repo.get_by_id(post_id):
        raise PostNotFound(post_id)

    page = comment_repo.list_by_post(post_id, params)
    result = BatchCommentsOut(
        data=page.rows,
        total_pages=page.total_pages,
        current_page=page.page,
        count=page.count,
    )
    return result.dump() if to_dict else result


def update_comment(
    comment_repo: ICommentRepository,
    comment_id: int,
    user_id: int,
    data: CommentUpdate,
    to_dict: bool = True,
) -> Dict | CommentOut:
    """只有评论作者可以修改内容"""
    comment = comment_repo.get_by_id(comment_id)
    if not comment:
        raise CommentNotFound(comment_id)
    if comment.user_id != user_id:
        raise NotOwnerError()

    updated = comment_repo.update(comment_id, data)
    if not updated:
        raise CommentNotFound(comment_id)
    logger.info(f"Updated comment id={comment_id} by user={user_id}")
    return updated.dump() if to_dict else updated


def remove_comment(comment_repo: ICommentRepository, comment_id: int, user_id: int) -> None:
    """作者删除评论，楼中楼一并删除"""
    comment = comment_repo.get_by_id(comment_id)
    if not comment:
        raise CommentNotFound(comment_id)
    if comment.user_id != user_id:
        logger.warning(f"User {user_id} tried to delete comment id={comment_id} owned by {comment.user_id}")
        raise NotOwnerError()

    comment_repo.delete(comment_id)
    logger.info(f"Deleted comment id={comment_id} by owner={user_id}")


def remove_comment_by_admin(comment_repo: ICommentRepository, comment_id: int) -> bool:
    ok = comment_repo.delete(comment_id)
    if ok:
        logger.info(f"[ADMIN] Deleted comment id={comment_id}")
    return ok


#------------------------------------ 子评论（楼中楼） ------------------------------------

def create_child_comment(
    user_repo: IUserRepository,
    comment_repo: ICommentRepository,
    child_repo: IChildCommentRepository,
    comment_id: int,
    user_id: int,
    data: CommentCreate,
    to_dict: bool = True,
) -> Dict | ChildCommentOut:
    if not comment_repo.get_by_id(comment_id):
        raise CommentNotFound(comment_id)
    _require_user(user_repo, user_id)

    child = child_repo.create(data, comment_id=comment_id, user_id=user_id)
    logger.info(f"Created child comment id={child.id} under comment={comment_id} by user={user_id}")
    return child.dump() if to_dict else child


def get_child_comment(child_repo: IChildCommentRepository, child_comment_id: int, to_dict: bool = True) -> Dict | ChildCommentOut:
    child = child_repo.get_by_id(child_comment_id)
    if not child:
        raise ChildCommentNotFound(child_comment_id)
    return child.dump() if to_dict else child


def list_child_comments(
    comment_repo: ICommentRepository,
    child_repo: IChildCommentRepository,
    comment_id: int,
    params: ListParams,
    to_dict: bool = True,
) -> Dict | BatchChildCommentsOut:
    if not comment_repo.get_by_id(comment_id):
        raise CommentNotFound(comment_id)

    page = child_repo.list_by_comment(comment_id, params)
    result = BatchChildCommentsOut(
        data=page.rows,
        total_pages=page.total_pages,
        current_page=page.page,
        count=page.count,
    )
    return result.dump() if to_dict else result


def update_child_comment(
    child_repo: IChildCommentRepository,
    child_comment_id: int,
    user_id: int,
    data: CommentUpdate,
    to_dict: bool = True,
) -> Dict | ChildCommentOut:
    child = child_repo.get_by_id(child_comment_id)
    if not child:
        raise ChildCommentNotFound(child_comment_id)
    if child.user_id != user_id:
        raise NotOwnerError()

    updated = child_repo.update(child_comment_id, data)
    if not updated:
        raise ChildCommentNotFound(child_comment_id)
    logger.info(f"Updated child comment id={child_comment_id} by user={user_id}")
    return updated.dump() if to_dict else updated


def remove_child_comment(child_repo: IChildCommentRepository, child_comment_id: int, user_id: int) -> None:
    child = child_repo.get_by_id(child_comment_id)
    if not child:
        raise ChildCommentNotFound(child_comment_id)
    if child.user_id != user_id:
        raise NotOwnerError()

    child_repo.delete(child_comment_id)
    logger.info(f"Deleted child comment id={child_comment_id} by owner={user_id}")


def remove_child_comment_by_admin(child_repo: IChildCommentRepository, child_comment_id: int) -> bool:
    ok = child_repo.delete(child_comment_id)
    if ok:
        logger.info(f"[ADMIN] Deleted child comment id={child_comment_id}")
    return ok
