from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from blogapi.core.db import transaction
from blogapi.storage.query_builder import (
    ListParams,
    PageResult,
    find_and_count,
    find_all,
    snapshot,
)


class SQLAlchemyRepository:
    """
    各实体仓库的公共部分：
    - get_by_id / list_all / find_and_count / create / update / delete
    - 对外一律返回 pydantic 记录，不把 ORM 对象（及其懒加载能力）泄露给业务层
    子类需要给出 model / out_schema / sortable
    """

    model: Type[Any]
    out_schema: Type[BaseModel]
    sortable: Dict[str, Any] = {}

    def __init__(self, db: Session):
        self.db = db

    # ---------- 内部工具 ----------

    def _query(self):
        return self.db.query(self.model)

    def _get(self, entity_id: int):
        return self.db.get(self.model, entity_id)

    def _to_out(self, obj, schema: Optional[Type[BaseModel]] = None, includes: Sequence[str] = ()):
        schema = schema or self.out_schema
        return schema.model_validate(snapshot(obj, includes), from_attributes=True)

    def _page(
        self,
        params: ListParams,
        *criteria,
        includes: Sequence[str] = (),
        schema: Optional[Type[BaseModel]] = None,
    ) -> PageResult:
        query = self._query().filter(*criteria)
        result = find_and_count(query, self.model, params, self.sortable, includes)
        result.rows = [self._to_out(row, schema, includes) for row in result.rows]
        return result

    def _latest(
        self,
        limit: int,
        *criteria,
        includes: Sequence[str] = (),
        schema: Optional[Type[BaseModel]] = None,
    ) -> list:
        query = self._query().filter(*criteria)
        rows = find_all(query, self.model, limit, includes)
        return [self._to_out(row, schema, includes) for row in rows]

    # ---------- 通用 CRUD ----------

    def get_by_id(self, entity_id: int):
        """不存在时返回 None，不抛异常"""
        obj = self._get(entity_id)
        if obj is None:
            return None
        return self._to_out(obj)

    def list_all(self, **filters) -> List[BaseModel]:
        """等值过滤的全量列表，最新在前"""
        rows = self._query().filter_by(**filters).order_by(self.model.id.desc()).all()
        return [self._to_out(row) for row in rows]

    def find_and_count(self, params: ListParams, **filters) -> PageResult:
        """等值过滤 + 分页"""
        criteria = [getattr(self.model, key) == value for key, value in filters.items()]
        return self._page(params, *criteria)

    def create(self, data: BaseModel, **extra):
        """
        插入一条记录：
        - 写入 data 中的全部字段，再用 extra（路径参数、计算字段等）覆盖
        """
        values = {**data.model_dump(), **extra}
        obj = self.model(**values)
        with transaction(self.db):
            self.db.add(obj)

        self.db.refresh(obj)
        return self._to_out(obj)

    def update(self, entity_id: int, data: BaseModel, **extra):
        """
        整体替换：data 中每个字段都会被写入（包括显式的 None）
        - 记录不存在返回 None，不做任何修改
        """
        obj = self._get(entity_id)
        if obj is None:
            return None

        values = {**data.model_dump(), **extra}
        with transaction(self.db):
            for field, value in values.items():
                setattr(obj, field, value)

        self.db.refresh(obj)
        return self._to_out(obj)

    def delete(self, entity_id: int) -> bool:
        """物理删除，级联由 relationship.cascade 负责"""
        obj = self._get(entity_id)
        if obj is None:
            return False

        with transaction(self.db):
            self.db.delete(obj)

        return True
