from typing import Optional, List
from datetime import datetime

from blogapi.schemas.base import CamelModel
from blogapi.schemas.user import UserBriefOut


class LikePostOut(CamelModel):
    """点赞基础字段（不含关联）"""
    id: int
    post_id: int
    user_id: int
    created_at: Optional[datetime] = None


class LikeWithUserOut(LikePostOut):
    user: Optional[UserBriefOut] = None


class BatchLikesOut(CamelModel):
    """某篇帖子的点赞列表 + 点赞总数"""
    data: List[LikeWithUserOut]
    count: int


class LikeStatusOut(CamelModel):
    """某个用户是否点赞过该帖子"""
    post_id: int
    user_id: int
    liked: bool
    count: int
