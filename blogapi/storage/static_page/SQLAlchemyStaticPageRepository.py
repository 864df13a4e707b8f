from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogapi.core.db import transaction
from blogapi.core.logx import logger
from blogapi.models.static_page import StaticPage
from blogapi.schemas.static_page import StaticPageOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.static_page.static_page_interface import IStaticPageRepository
from blogapi.storage.query_builder import sort_allow_list


class SQLAlchemyStaticPageRepository(SQLAlchemyRepository, IStaticPageRepository):

    model = StaticPage
    out_schema = StaticPageOut
    sortable = sort_allow_list(StaticPage.id, StaticPage.name, StaticPage.views)

    def __init__(self, db: Session):
        super().__init__(db)

    def _find(self, name: str) -> Optional[StaticPage]:
        return self._query().filter(StaticPage.name == name).first()

    def get_by_name(self, name: str) -> Optional[StaticPageOut]:
        page = self._find(name)
        if not page:
            return None
        return self._to_out(page)

    def list_pages(self) -> List[StaticPageOut]:
        rows = self._query().order_by(StaticPage.name.asc()).all()
        return [self._to_out(row) for row in rows]

    def increment(self, name: str) -> StaticPageOut:
        """
        访问数 +1：
        - 第一次访问插入 views = 1
        - 并发的第一次访问撞上 name 唯一约束时，回滚后改走自增
        - 自增在数据库侧完成（views = views + 1），并发请求不会互相覆盖
        """
        page = self._find(name)

        if page is None:
            page = StaticPage(name=name, views=1)
            try:
                with transaction(self.db):
                    self.db.add(page)
            except IntegrityError:
                logger.info(f"Static page {name!r} created concurrently, incrementing instead")
                page = self._find(name)
            else:
                self.db.refresh(page)
                return self._to_out(page)

        with transaction(self.db):
            page.views = StaticPage.views + 1

        self.db.refresh(page)
        return self._to_out(page)
