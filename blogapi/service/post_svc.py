from typing import Dict, List, Optional

from blogapi.schemas.post import (
    PostCreate,
    PostUpdate,
    PostOut,
    PostDetailOut,
    PostListOut,
    BatchPostsOut,
)
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.post_category.post_category_interface import IPostCategoryRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams, PageResult

from blogapi.core.text import make_slug
from blogapi.core.logx import logger
from blogapi.core.exceptions import PostNotFound, UserNotFound, CategoryNotFound, NotOwnerError

# 各接口的默认每页条数
DEFAULT_LIMIT = 10
TREND_LIMIT = 8
SEARCH_LIMIT = 8
RELATED_LIMIT = 4
CATEGORY_LIMIT = 4
VIP_LIMIT = 3

# 分类页 / VIP 卡片：帖子不输出 postsCategoryId，分类不输出时间戳
CARD_EXCLUDE = {"category": {"created_at", "updated_at"}}
CATEGORY_CARD_EXCLUDE = {"posts_category_id": True, **CARD_EXCLUDE}


def _batch(result: PageResult, with_count: bool = False) -> BatchPostsOut:
    fields = dict(data=result.rows, total_pages=result.total_pages, current_page=result.page)
    if with_count:
        fields["count"] = result.count
    return BatchPostsOut(**fields)


def _cards(posts: List[PostListOut], exclude: dict) -> List[Dict]:
    return [
        post.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude=exclude)
        for post in posts
    ]


def _check_category(category_repo: IPostCategoryRepository, category_id: Optional[int]) -> None:
    if category_id is not None and not category_repo.get_by_id(category_id):
        raise CategoryNotFound(category_id)


#---------------------------------------- 增 / 改 / 删 -----------------------------------------
def create_post(
    user_repo: IUserRepository,
    post_repo: IPostRepository,
    category_repo: IPostCategoryRepository,
    user_id: int,
    data: PostCreate,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    创建帖子：
    1. 校验作者、分类是否存在
    2. slug = 标题 slugify 后转小写（重名不去重）
    3. 写入请求体字段 + slug + user_id
    """
    if not user_repo.get_by_id(user_id):
        raise UserNotFound(user_id)
    _check_category(category_repo, data.posts_category_id)

    post = post_repo.create(data, slug=make_slug(data.title), user_id=user_id)
    logger.info(f"Created post id={post.id} slug={post.slug} for user={user_id}")

    return post.dump() if to_dict else post


def update_post(
    user_repo: IUserRepository,
    post_repo: IPostRepository,
    category_repo: IPostCategoryRepository,
    post_id: int,
    user_id: int,
    data: PostUpdate,
    to_dict: bool = True,) -> Dict | PostOut:
    """
    更新帖子（整体替换）：
    - 帖子不存在直接 PostNotFound，不做任何写入
    - 所有字段按请求体覆盖，slug 按新标题重算，作者改写为路径里的 user_id
    """
    if not post_repo.get_by_id(post_id):
        logger.warning(f"Update post failed, post id={post_id} not found")
        raise PostNotFound(post_id)
    if not user_repo.get_by_id(user_id):
        raise UserNotFound(user_id)
    _check_category(category_repo, data.posts_category_id)

    post = post_repo.update(post_id, data, slug=make_slug(data.title), user_id=user_id)
    if not post:
        # 两次查询之间被删掉
        raise PostNotFound(post_id)

    logger.info(f"Updated post id={post_id} by user={user_id}")
    return post.dump() if to_dict else post


def remove_post(user_repo: IUserRepository, post_repo: IPostRepository, post_id: int, user_id: int) -> None:
    """
    作者删除帖子：
    - 帖子 / 用户不存在 -> NotFound
    - user.id != post.user_id -> NotOwnerError，不做任何修改
    """
    post = post_repo.get_by_id(post_id)
    if not post:
        raise PostNotFound(post_id)
    user = user_repo.get_by_id(user_id)
    if not user:
        raise UserNotFound(user_id)

    if user.id != post.user_id:
        logger.warning(f"User {user_id} tried to delete post id={post_id} owned by {post.user_id}")
        raise NotOwnerError()

    post_repo.delete(post_id)
    logger.info(f"Deleted post id={post_id} by owner={user_id}")


def remove_post_by_admin(post_repo: IPostRepository, post_id: int) -> bool:
    """
    管理员删除：不校验作者；帖子本来就不存在也视为成功
    """
    ok = post_repo.delete(post_id)
    if ok:
        logger.info(f"[ADMIN] Deleted post id={post_id}")
    else:
        logger.warning(f"[ADMIN] Delete post id={post_id}: already absent")
    return ok


#---------------------------------------- 查 -----------------------------------------

def read_post(post_repo: IPostRepository, slug: str, to_dict: bool = True,) -> Dict | PostDetailOut:
    """
    通过 slug 获取帖子详情（分类、评论、作者、点赞）
    """
    post = post_repo.get_by_slug(slug)
    if not post:
        raise PostNotFound(message=f"No post found for slug {slug!r}")
    return post.dump() if to_dict else post


def list_posts(post_repo: IPostRepository, params: ListParams, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    全部帖子分页，信封里额外带 count
    """
    result = _batch(post_repo.list_posts(params), with_count=True)
    return result.dump() if to_dict else result


def posts_by_category(post_repo: IPostRepository, category_id: int, limit: int = CATEGORY_LIMIT,) -> List[Dict]:
    """
    分类页：最新的 4 篇，直接返回数组
    """
    posts = post_repo.list_by_category(category_id, limit)
    return _cards(posts, CATEGORY_CARD_EXCLUDE)


def trend_posts(post_repo: IPostRepository, params: ListParams, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    热门（promoted = true）帖子分页
    """
    result = _batch(post_repo.list_promoted(params))
    return result.dump() if to_dict else result


def related_posts(post_repo: IPostRepository, post_id: int, params: ListParams, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    相关帖子：与 post_id 同分类的帖子分页（包含它自己）
    """
    post = post_repo.get_by_id(post_id)
    if not post:
        raise PostNotFound(post_id)

    result = _batch(post_repo.list_related(post.posts_category_id, params))
    return result.dump() if to_dict else result


def vip_posts(post_repo: IPostRepository, limit: int = VIP_LIMIT,) -> List[Dict]:
    """
    VIP 推荐位：最新的 3 篇，直接返回数组
    """
    posts = post_repo.list_vip(limit)
    return _cards(posts, CARD_EXCLUDE)


def search_posts(post_repo: IPostRepository, title: str, params: ListParams, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    标题搜索：不区分大小写的子串匹配
    """
    result = _batch(post_repo.search_by_title(title, params))
    return result.dump() if to_dict else result


def posts_by_user(post_repo: IPostRepository, user_id: int, params: ListParams, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    某作者的帖子分页；作者不存在时返回空列表
    """
    result = _batch(post_repo.list_by_user(user_id, params))
    return result.dump() if to_dict else result
