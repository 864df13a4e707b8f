from typing import Dict

from blogapi.schemas.static_page import StaticPageOut, BatchStaticPagesOut
from blogapi.storage.static_page.static_page_interface import IStaticPageRepository

from blogapi.core.exceptions import StaticPageNotFound


def increment_page(page_repo: IStaticPageRepository, name: str, to_dict: bool = True) -> Dict | StaticPageOut:
    """页面访问数 +1，第一次访问时创建计数"""
    page = page_repo.increment(name)
    return page.dump() if to_dict else page


def get_page(page_repo: IStaticPageRepository, name: str, to_dict: bool = True) -> Dict | StaticPageOut:
    page = page_repo.get_by_name(name)
    if not page:
        raise StaticPageNotFound(name)
    return page.dump() if to_dict else page


def list_pages(page_repo: IStaticPageRepository, to_dict: bool = True) -> Dict | BatchStaticPagesOut:
    pages = page_repo.list_pages()
    result = BatchStaticPagesOut(data=pages, count=len(pages))
    return result.dump() if to_dict else result
