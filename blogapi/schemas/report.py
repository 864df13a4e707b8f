from typing import Optional, List
from datetime import datetime

from pydantic import Field

from blogapi.schemas.base import CamelModel, CamelInput
from blogapi.schemas.user import UserBriefOut


class ReportCreate(CamelInput):
    """举报理由；目标 ID 和举报人 ID 来自路径"""
    reason: str = Field(min_length=1, max_length=500)


class ReportOut(CamelModel):
    """
    三种举报共用的输出结构：
    - target_id 对应 post_id / comment_id / child_comment_id
    """
    id: int
    target: str
    target_id: int
    user_id: int
    reason: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    user: Optional[UserBriefOut] = None


class BatchReportsOut(CamelModel):
    data: List[ReportOut]
    total_pages: int
    current_page: int
    count: Optional[int] = None
