from fastapi import APIRouter, Depends

from blogapi.schemas.static_page import StaticPageOut, BatchStaticPagesOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import static_page_svc

from blogapi.storage.database import get_static_page_repo
from blogapi.storage.static_page.static_page_interface import IStaticPageRepository

from blogapi.core.exceptions import StaticPageNotFound
from blogapi.core.logx import logger

static_pages_router = APIRouter(prefix="/static-pages", tags=["static-pages"])


@static_pages_router.put("/{name}", response_model=StaticPageOut)
def increment_page(name: str, page_repo: IStaticPageRepository = Depends(get_static_page_repo)):
    """
    访问计数 +1（页面第一次被访问时从 1 开始）
    """
    try:
        return BizResponse(data=static_page_svc.increment_page(page_repo=page_repo, name=name))
    except Exception as e:
        logger.exception("increment_page error")
        return BizResponse(msg=str(e), status_code=500)


@static_pages_router.get("", response_model=BatchStaticPagesOut)
def list_pages(page_repo: IStaticPageRepository = Depends(get_static_page_repo)):
    try:
        return BizResponse(data=static_page_svc.list_pages(page_repo=page_repo))
    except Exception as e:
        logger.exception("list_pages error")
        return BizResponse(msg=str(e), status_code=500)


@static_pages_router.get("/{name}", response_model=StaticPageOut)
def get_page(name: str, page_repo: IStaticPageRepository = Depends(get_static_page_repo)):
    try:
        return BizResponse(data=static_page_svc.get_page(page_repo=page_repo, name=name))
    except StaticPageNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_page error")
        return BizResponse(msg=str(e), status_code=500)
