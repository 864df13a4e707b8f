from typing import Optional, List
from datetime import datetime

from pydantic import Field

from blogapi.schemas.base import CamelModel, CamelInput
from blogapi.schemas.user import UserBriefOut


class CommentCreate(CamelInput):
    """
    创建 / 更新评论：帖子 ID 和用户 ID 来自路径，请求体只有内容
    """
    content: str = Field(min_length=1)


CommentUpdate = CommentCreate


class ChildCommentOut(CamelModel):
    """子评论基础字段（不含关联，可安全地嵌套在其它结构里）"""
    id: int
    comment_id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ChildCommentWithUserOut(ChildCommentOut):
    user: Optional[UserBriefOut] = None


class CommentOut(CamelModel):
    """评论基础字段（不含关联）"""
    id: int
    post_id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CommentThreadOut(CommentOut):
    """
    评论 + 作者 + 楼中楼；只有查询时 eager-load 了的关联才会输出
    """
    user: Optional[UserBriefOut] = None
    child_comments: List[ChildCommentOut] = []


class BatchCommentsOut(CamelModel):
    data: List[CommentThreadOut]
    total_pages: int
    current_page: int
    count: Optional[int] = None


class BatchChildCommentsOut(CamelModel):
    data: List[ChildCommentWithUserOut]
    total_pages: int
    current_page: int
    count: Optional[int] = None
