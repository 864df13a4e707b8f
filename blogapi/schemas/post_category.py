from typing import Optional, List
from datetime import datetime

from pydantic import Field

from blogapi.schemas.base import CamelModel, CamelInput


class CategoryCreate(CamelInput):
    name: str = Field(min_length=1, max_length=100)


# 分类只有 name 一个可写字段，整体替换和创建的入参一致
CategoryUpdate = CategoryCreate


class CategoryOut(CamelModel):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BatchCategoriesOut(CamelModel):
    data: List[CategoryOut]
    count: int
