from fastapi import APIRouter, Depends, Response

from blogapi.schemas.post_category import CategoryCreate, CategoryUpdate, CategoryOut, BatchCategoriesOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import post_category_svc

from blogapi.storage.database import get_category_repo
from blogapi.storage.post_category.post_category_interface import IPostCategoryRepository

from blogapi.core.exceptions import CategoryNotFound
from blogapi.core.logx import logger
from sqlalchemy.exc import IntegrityError

categories_router = APIRouter(prefix="/post-categories", tags=["post-categories"])


@categories_router.get("", response_model=BatchCategoriesOut)
def list_categories(category_repo: IPostCategoryRepository = Depends(get_category_repo)):
    """全部分类（按名称排序）"""
    try:
        return BizResponse(data=post_category_svc.list_categories(category_repo=category_repo))
    except Exception as e:
        logger.exception("list_categories error")
        return BizResponse(msg=str(e), status_code=500)


@categories_router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, category_repo: IPostCategoryRepository = Depends(get_category_repo)):
    try:
        category = post_category_svc.get_category(category_repo=category_repo, category_id=category_id)
        return BizResponse(data=category)
    except CategoryNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("get_category error")
        return BizResponse(msg=str(e), status_code=500)


@categories_router.post("", response_model=CategoryOut)
def create_category(payload: CategoryCreate, category_repo: IPostCategoryRepository = Depends(get_category_repo)):
    """
    创建分类：名称唯一，重复返回 409
    """
    try:
        category = post_category_svc.create_category(category_repo=category_repo, data=payload)
        return BizResponse(data=category)
    except IntegrityError:
        return BizResponse(msg=f"post category {payload.name!r} already exists", status_code=409)
    except Exception as e:
        logger.exception("create_category error")
        return BizResponse(msg=str(e), status_code=500)


@categories_router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    category_repo: IPostCategoryRepository = Depends(get_category_repo),
):
    try:
        category = post_category_svc.update_category(category_repo=category_repo, category_id=category_id, data=payload)
        return BizResponse(data=category)
    except CategoryNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except IntegrityError:
        return BizResponse(msg=f"post category {payload.name!r} already exists", status_code=409)
    except Exception as e:
        logger.exception("update_category error")
        return BizResponse(msg=str(e), status_code=500)


@categories_router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, category_repo: IPostCategoryRepository = Depends(get_category_repo)):
    try:
        post_category_svc.delete_category(category_repo=category_repo, category_id=category_id)
        return Response(status_code=204)
    except CategoryNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("delete_category error")
        return BizResponse(msg=str(e), status_code=500)
