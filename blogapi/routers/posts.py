from fastapi import APIRouter, Depends, Query, Response

from blogapi.schemas.post import PostCreate, PostUpdate, PostOut, PostDetailOut, BatchPostsOut
from blogapi.core.biz_response import BizResponse
from blogapi.service import post_svc

from blogapi.storage.database import get_user_repo, get_post_repo, get_category_repo
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.post_category.post_category_interface import IPostCategoryRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams
from blogapi.routers.params import list_params

from blogapi.core.exceptions import (
    PostNotFound,
    UserNotFound,
    CategoryNotFound,
    NotOwnerError,
    InvalidSortField,
)
from blogapi.core.logx import logger

posts_router = APIRouter(tags=["posts"])


# --------------------------------- 增 / 改 / 删 ---------------------------------
@posts_router.post("/post/{user_id}", response_model=PostOut)
def create_post(
    user_id: int,
    payload: PostCreate,
    user_repo: IUserRepository = Depends(get_user_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
    category_repo: IPostCategoryRepository = Depends(get_category_repo),
):
    """
    创建帖子：slug 由标题生成，作者为路径中的 user_id
    """
    try:
        post = post_svc.create_post(
            user_repo=user_repo,
            post_repo=post_repo,
            category_repo=category_repo,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=post)
    except (UserNotFound, CategoryNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("create_post error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.put("/post/{post_id}/{user_id}", response_model=PostOut)
def update_post(
    post_id: int,
    user_id: int,
    payload: PostUpdate,
    user_repo: IUserRepository = Depends(get_user_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
    category_repo: IPostCategoryRepository = Depends(get_category_repo),
):
    """
    更新帖子（整体替换）：
    - 请求体必须包含全部可写字段
    - 帖子不存在返回 404，不做任何修改
    """
    try:
        post = post_svc.update_post(
            user_repo=user_repo,
            post_repo=post_repo,
            category_repo=category_repo,
            post_id=post_id,
            user_id=user_id,
            data=payload,
        )
        return BizResponse(data=post)
    except (PostNotFound, UserNotFound, CategoryNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("update_post error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.delete("/post/{post_id}/{user_id}", status_code=204)
def remove_post(
    post_id: int,
    user_id: int,
    user_repo: IUserRepository = Depends(get_user_repo),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    作者删除帖子：只有帖子作者本人可以删除
    """
    try:
        post_svc.remove_post(user_repo=user_repo, post_repo=post_repo, post_id=post_id, user_id=user_id)
        return Response(status_code=204)
    except NotOwnerError as e:
        return BizResponse(msg=str(e), status_code=400)
    except (PostNotFound, UserNotFound) as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("remove_post error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.delete("/admin/post/{post_id}", status_code=204)
def remove_post_by_admin(
    post_id: int,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    管理员删除帖子：不校验作者，帖子不存在也返回 204
    """
    try:
        post_svc.remove_post_by_admin(post_repo=post_repo, post_id=post_id)
        return Response(status_code=204)
    except Exception as e:
        logger.exception("remove_post_by_admin error")
        return BizResponse(msg=str(e), status_code=500)


# --------------------------------- 查 ---------------------------------
@posts_router.get("/post/{slug}", response_model=PostDetailOut)
def read_post(
    slug: str,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    通过 slug 获取帖子详情（分类、评论、作者、点赞）
    """
    try:
        post = post_svc.read_post(post_repo=post_repo, slug=slug)
        return BizResponse(data=post)
    except PostNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except Exception as e:
        logger.exception("read_post error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts", response_model=BatchPostsOut)
def list_posts(
    params: ListParams = Depends(list_params(post_svc.DEFAULT_LIMIT)),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    全部帖子分页
    """
    try:
        result = post_svc.list_posts(post_repo=post_repo, params=params)
        return BizResponse(data=result)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("list_posts error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/category/{posts_category_id}")
def posts_by_category(
    posts_category_id: int,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    分类页：该分类下最新的 4 篇
    """
    try:
        posts = post_svc.posts_by_category(post_repo=post_repo, category_id=posts_category_id)
        return BizResponse(data=posts)
    except Exception as e:
        logger.exception("posts_by_category error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/trend", response_model=BatchPostsOut)
def trend_posts(
    params: ListParams = Depends(list_params(post_svc.TREND_LIMIT)),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    热门帖子（promoted）分页
    """
    try:
        result = post_svc.trend_posts(post_repo=post_repo, params=params)
        return BizResponse(data=result)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("trend_posts error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/related/{post_id}", response_model=BatchPostsOut)
def related_posts(
    post_id: int,
    params: ListParams = Depends(list_params(post_svc.RELATED_LIMIT)),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    相关帖子：与该帖同分类的帖子分页
    """
    try:
        result = post_svc.related_posts(post_repo=post_repo, post_id=post_id, params=params)
        return BizResponse(data=result)
    except PostNotFound as e:
        return BizResponse(msg=str(e), status_code=404)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("related_posts error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/vip")
def vip_posts(post_repo: IPostRepository = Depends(get_post_repo)):
    """
    VIP 推荐位：最新的 3 篇
    """
    try:
        posts = post_svc.vip_posts(post_repo=post_repo)
        return BizResponse(data=posts)
    except Exception as e:
        logger.exception("vip_posts error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/search", response_model=BatchPostsOut)
def search_posts(
    title: str = Query(""),
    params: ListParams = Depends(list_params(post_svc.SEARCH_LIMIT)),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    标题搜索（不区分大小写的子串匹配）
    """
    try:
        result = post_svc.search_posts(post_repo=post_repo, title=title, params=params)
        return BizResponse(data=result)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("search_posts error")
        return BizResponse(msg=str(e), status_code=500)


@posts_router.get("/posts/user/{user_id}", response_model=BatchPostsOut)
def posts_by_user(
    user_id: int,
    params: ListParams = Depends(list_params(post_svc.DEFAULT_LIMIT)),
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    某作者的帖子分页
    """
    try:
        result = post_svc.posts_by_user(post_repo=post_repo, user_id=user_id, params=params)
        return BizResponse(data=result)
    except InvalidSortField as e:
        return BizResponse(msg=str(e), status_code=400)
    except Exception as e:
        logger.exception("posts_by_user error")
        return BizResponse(msg=str(e), status_code=500)
