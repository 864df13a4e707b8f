from typing import Dict

from blogapi.schemas.post_category import CategoryCreate, CategoryUpdate, CategoryOut, BatchCategoriesOut
from blogapi.storage.post_category.post_category_interface import IPostCategoryRepository

from blogapi.core.logx import logger
from blogapi.core.exceptions import CategoryNotFound


def list_categories(category_repo: IPostCategoryRepository, to_dict: bool = True) -> Dict | BatchCategoriesOut:
    items = category_repo.list_categories()
    result = BatchCategoriesOut(data=items, count=len(items))
    return result.dump() if to_dict else result


def get_category(category_repo: IPostCategoryRepository, category_id: int, to_dict: bool = True) -> Dict | CategoryOut:
    category = category_repo.get_by_id(category_id)
    if not category:
        raise CategoryNotFound(category_id)
    return category.dump() if to_dict else category


def create_category(category_repo: IPostCategoryRepository, data: CategoryCreate, to_dict: bool = True) -> Dict | CategoryOut:
    category = category_repo.create(data)
    logger.info(f"Created post category id={category.id} name={category.name!r}")
    return category.dump() if to_dict else category


def update_category(category_repo: IPostCategoryRepository, category_id: int, data: CategoryUpdate, to_dict: bool = True) -> Dict | CategoryOut:
    category = category_repo.update(category_id, data)
    if not category:
        logger.warning(f"Update post category failed, id={category_id} not found")
        raise CategoryNotFound(category_id)
    logger.info(f"Updated post category id={category_id}")
    return category.dump() if to_dict else category


def delete_category(category_repo: IPostCategoryRepository, category_id: int) -> None:
    """
    删除分类：分类下的帖子保留，posts_category_id 置空
    """
    if not category_repo.delete(category_id):
        raise CategoryNotFound(category_id)
    logger.info(f"Deleted post category id={category_id}")
