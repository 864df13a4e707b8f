# blogapi/storage/query_builder.py
"""
列表查询构造器：所有分页 / 过滤列表接口共用

把 (page, limit, sortBy, 过滤条件, 需要 eager-load 的关联) 转成：
    SELECT ... WHERE <过滤> ORDER BY <sortBy> DESC LIMIT <limit> OFFSET (page - 1) * limit
同时给出满足条件的总数，供 totalPages = ceil(count / limit) 使用。
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from pydantic.alias_generators import to_camel
from sqlalchemy import inspect
from sqlalchemy.orm import Query, joinedload, selectinload

from blogapi.core.exceptions import InvalidSortField


@dataclass(frozen=True)
class ListParams:
    """
    分页参数：
    - page 从 1 开始
    - sort_by 为字段名（snake_case / camelCase 都可以），必须在实体的排序白名单里
    """
    page: int = 1
    limit: int = 10
    sort_by: str = "id"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PageResult:
    """
    一页结果：
    - rows: 当前页记录（已经转换成 pydantic 记录）
    - count: 满足条件的总数
    """
    rows: List[Any]
    count: int
    page: int
    limit: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.limit) if self.limit > 0 else 0


def sort_allow_list(*columns) -> Dict[str, Any]:
    """
    由模型列生成排序白名单：
    - 键同时包含 snake_case 与 camelCase 两种写法（created_at / createdAt）
    """
    allowed: Dict[str, Any] = {}
    for column in columns:
        allowed[column.key] = column
        allowed[to_camel(column.key)] = column
    return allowed


def resolve_sort(allowed: Dict[str, Any], sort_by: str):
    """sortBy 不在白名单里直接报错，不透传给数据库"""
    column = allowed.get(sort_by)
    if column is None:
        raise InvalidSortField(sort_by, allowed.keys())
    return column


def eager(model, includes: Iterable[str]) -> list:
    """
    根据关联名生成加载选项：
    - 多对一（作者、分类）用 joinedload，一条 SQL 带出
    - 一对多（评论、点赞）用 selectinload，避免 JOIN 把行数放大后 LIMIT 失真
    """
    options = []
    for name in includes:
        attr = getattr(model, name)
        loader = selectinload if attr.property.uselist else joinedload
        options.append(loader(attr))
    return options


def snapshot(obj, includes: Sequence[str] = ()) -> Dict[str, Any]:
    """
    把 ORM 对象拍平成 dict：
    - 所有列字段
    - 只带上显式 eager-load 过的关联，其余关联不会被访问，也就不会触发懒加载
    """
    mapper = inspect(obj).mapper
    data = {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}
    for name in includes:
        data[name] = getattr(obj, name)
    return data


def find_and_count(
    query: Query,
    model,
    params: ListParams,
    allowed: Dict[str, Any],
    includes: Sequence[str] = (),
) -> PageResult:
    """
    分页查询 + 总数：
    - 按 sortBy 倒序，id 倒序兜底保证分页稳定
    - 返回的 rows 仍是 ORM 对象，由仓库层负责转换
    """
    sort_column = resolve_sort(allowed, params.sort_by)

    total = query.order_by(None).count()

    rows = (
        query
        .options(*eager(model, includes))
        .order_by(sort_column.desc(), model.id.desc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    return PageResult(rows=rows, count=total, page=params.page, limit=params.limit)


def find_all(
    query: Query,
    model,
    limit: int,
    includes: Sequence[str] = (),
) -> list:
    """不分页的固定条数列表（分类页、VIP 推荐位），按 id 倒序即最新在前"""
    return (
        query
        .options(*eager(model, includes))
        .order_by(model.id.desc())
        .limit(limit)
        .all()
    )
