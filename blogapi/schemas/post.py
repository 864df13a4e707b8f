from typing import Optional, List
from datetime import datetime

from pydantic import Field

from blogapi.schemas.base import CamelModel, CamelInput
from blogapi.schemas.user import UserOut, UserBriefOut
from blogapi.schemas.post_category import CategoryOut
from blogapi.schemas.comment import CommentOut
from blogapi.schemas.like_post import LikePostOut


class PostCreate(CamelInput):
    """
    创建帖子：
    - 作者 ID 来自路径
    - slug 由后端根据 title 生成，不允许前端传
    """
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    content: str
    image: Optional[str] = None
    promoted: bool = False
    vip: bool = False
    read_time: Optional[int] = Field(default=None, ge=0)
    posts_category_id: Optional[int] = None


class PostUpdate(CamelInput):
    """
    更新帖子（整体替换）：
    - 每个可写字段都必须出现在请求体里，漏传直接 422，避免把字段悄悄写成空
    - 可空字段想清空需要显式传 null
    """
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str]
    content: str
    image: Optional[str]
    promoted: bool
    vip: bool
    read_time: Optional[int] = Field(ge=0)
    posts_category_id: Optional[int]


class PostOut(CamelModel):
    """
    帖子本身的字段（不含任何关联）
    """
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    content: str
    image: Optional[str] = None
    promoted: bool = False
    vip: bool = False
    read_time: Optional[int] = None
    posts_category_id: Optional[int] = None
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostDetailOut(PostOut):
    """
    帖子详情：分类、评论、作者（不含 password）、点赞
    """
    category: Optional[CategoryOut] = None
    comments: List[CommentOut] = []
    user: Optional[UserOut] = None
    likes: List[LikePostOut] = []


class PostListOut(PostOut):
    """
    列表项：关联按查询时 eager-load 的集合输出，作者只保留精简字段
    """
    category: Optional[CategoryOut] = None
    comments: List[CommentOut] = []
    user: Optional[UserBriefOut] = None
    likes: List[LikePostOut] = []


class BatchPostsOut(CamelModel):
    """
    帖子分页信封：
    - data: 当前页
    - total_pages: ceil(count / limit)
    - current_page: 当前页码（从 1 开始）
    - count: 满足条件的总数（只有部分接口返回）
    """
    data: List[PostListOut]
    total_pages: int
    current_page: int
    count: Optional[int] = None
