from fastapi import Query

from blogapi.storage.query_builder import ListParams

# 页码 / 每页条数上限，超出直接 422，不把超大整数交给数据库驱动
MAX_PAGE = 100_000
MAX_LIMIT = 100


def list_params(default_limit: int = 10):
    """
    生成分页参数依赖：?page=1&limit=10&sortBy=id
    - 每个接口的默认 limit 不同，所以做成工厂
    """

    def dependency(
        page: int = Query(1, ge=1, le=MAX_PAGE),
        limit: int = Query(default_limit, ge=1, le=MAX_LIMIT),
        sort_by: str = Query("id", alias="sortBy"),
    ) -> ListParams:
        return ListParams(page=page, limit=limit, sort_by=sort_by)

    return dependency
