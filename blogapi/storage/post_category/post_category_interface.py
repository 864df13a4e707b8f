from typing import List, Optional, Protocol

from blogapi.schemas.post_category import CategoryCreate, CategoryUpdate, CategoryOut


class IPostCategoryRepository(Protocol):
    """帖子分类仓库接口"""

    def get_by_id(self, category_id: int) -> Optional[CategoryOut]:
        ...

    def get_by_name(self, name: str) -> Optional[CategoryOut]:
        ...

    def list_categories(self) -> List[CategoryOut]:
        """全部分类，按名称排序"""
        ...

    def create(self, data: CategoryCreate) -> CategoryOut:
        ...

    def update(self, category_id: int, data: CategoryUpdate) -> Optional[CategoryOut]:
        ...

    def delete(self, category_id: int) -> bool:
        """删除分类，分类下帖子的 posts_category_id 置空"""
        ...
