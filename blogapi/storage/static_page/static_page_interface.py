from typing import List, Optional, Protocol

from blogapi.schemas.static_page import StaticPageOut


class IStaticPageRepository(Protocol):
    """静态页面访问计数仓库接口"""

    def get_by_name(self, name: str) -> Optional[StaticPageOut]:
        ...

    def list_pages(self) -> List[StaticPageOut]:
        ...

    def increment(self, name: str) -> StaticPageOut:
        """访问数 +1；页面不存在时先创建"""
        ...
