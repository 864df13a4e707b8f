from typing import List, Optional

from sqlalchemy.orm import Session

from blogapi.models.post_category import PostCategory
from blogapi.schemas.post_category import CategoryOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.post_category.post_category_interface import IPostCategoryRepository
from blogapi.storage.query_builder import sort_allow_list


class SQLAlchemyPostCategoryRepository(SQLAlchemyRepository, IPostCategoryRepository):

    model = PostCategory
    out_schema = CategoryOut
    sortable = sort_allow_list(PostCategory.id, PostCategory.name)

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_name(self, name: str) -> Optional[CategoryOut]:
        category = self._query().filter(PostCategory.name == name).first()
        if not category:
            return None
        return self._to_out(category)

    def list_categories(self) -> List[CategoryOut]:
        rows = self._query().order_by(PostCategory.name.asc()).all()
        return [self._to_out(row) for row in rows]
