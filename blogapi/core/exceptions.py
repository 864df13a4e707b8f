# domain_exceptions.py
from typing import Iterable, Optional


class UserNotFound(Exception):
    """
    在需要用户存在的场景下未找到对应用户时抛出：
    - 例如 创建帖子 / 删除帖子 / 评论 / 点赞 时校验用户
    """

    def __init__(self, user_id: Optional[int] = None, message: Optional[str] = None):
        if message:
            self.message = message
        elif user_id is not None:
            self.message = f"user {user_id} not found"
        else:
            self.message = "user not found"

        super().__init__(self.message)


class PostNotFound(Exception):
    """找不到帖子"""
    def __init__(self, post_id: int | str | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"post {post_id} not found")


class CategoryNotFound(Exception):
    """找不到帖子分类"""
    def __init__(self, category_id: int | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"post category {category_id} not found")


class CommentNotFound(Exception):
    """找不到评论"""
    def __init__(self, comment_id: int | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"comment {comment_id} not found")


class ChildCommentNotFound(Exception):
    """找不到子评论（楼中楼）"""
    def __init__(self, child_comment_id: int | None = None, message: str | None = None):
        if message:
            super().__init__(message)
        else:
            super().__init__(f"child comment {child_comment_id} not found")


class ReportNotFound(Exception):
    """找不到举报记录"""
    def __init__(self, target: str, report_id: int):
        super().__init__(f"{target} report {report_id} not found")


class LikeNotFound(Exception):
    """
    取消点赞时发现用户并没有点赞该帖子
    """
    def __init__(self, post_id: int, user_id: int):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"user {user_id} has not liked post {post_id}")


class StaticPageNotFound(Exception):
    """静态页面计数不存在"""
    def __init__(self, name: str):
        super().__init__(f"static page {name!r} not found")


class NotOwnerError(Exception):
    """非资源所有者尝试修改 / 删除资源"""
    def __init__(self, message: str = "You are not the owner"):
        self.message = message
        super().__init__(message)


class PasswordMismatchError(Exception):
    """旧密码校验失败"""
    def __init__(self, message="Old password does not match"):
        super().__init__(message)


class InvalidSortField(Exception):
    """
    排序字段不在白名单内：
    - sortBy 不允许直接透传给数据库
    """

    def __init__(self, field: str, allowed: Iterable[str]):
        self.field = field
        self.allowed = sorted(allowed)
        super().__init__(
            f"cannot sort by {field!r}, allowed: {', '.join(self.allowed)}"
        )
