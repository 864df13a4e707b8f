from typing import Optional, List
from datetime import datetime

from blogapi.schemas.base import CamelModel


class StaticPageOut(CamelModel):
    id: int
    name: str
    views: int
    updated_at: Optional[datetime] = None


class BatchStaticPagesOut(CamelModel):
    data: List[StaticPageOut]
    count: int
