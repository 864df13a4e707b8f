from typing import List, Optional

from sqlalchemy.orm import Session

from blogapi.core.text import like_pattern
from blogapi.models.post import Post
from blogapi.schemas.post import PostOut, PostDetailOut, PostListOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.post.post_interface import IPostRepository
from blogapi.storage.query_builder import ListParams, PageResult, eager, sort_allow_list

# 各查询需要 eager-load 的关联
DETAIL_INCLUDES = ("category", "comments", "user", "likes")
LIST_INCLUDES = ("category", "comments", "user", "likes")
CARD_INCLUDES = ("user", "category")
TREND_INCLUDES = ("category", "comments", "user")
SEARCH_INCLUDES = ("category", "user", "likes")


class SQLAlchemyPostRepository(SQLAlchemyRepository, IPostRepository):
    """
    使用 SQLAlchemy 实现的帖子仓库
    业务层依赖 IPostRepository 抽象接口
    """

    model = Post
    out_schema = PostOut
    sortable = sort_allow_list(
        Post.id,
        Post.title,
        Post.read_time,
        Post.promoted,
        Post.vip,
        Post.created_at,
        Post.updated_at,
    )

    def __init__(self, db: Session):
        super().__init__(db)

    # ---------- 单篇 ----------

    def get_by_slug(self, slug: str) -> Optional[PostDetailOut]:
        """
        slug 不唯一，重名时取 id 最小（最早创建）的一篇
        """
        post: Optional[Post] = (
            self._query()
            .options(*eager(Post, DETAIL_INCLUDES))
            .filter(Post.slug == slug)
            .order_by(Post.id.asc())
            .first()
        )
        if not post:
            return None

        return self._to_out(post, PostDetailOut, DETAIL_INCLUDES)

    # ---------- 列表 ----------

    def list_posts(self, params: ListParams) -> PageResult:
        return self._page(params, includes=LIST_INCLUDES, schema=PostListOut)

    def list_by_category(self, category_id: int, limit: int) -> List[PostListOut]:
        return self._latest(
            limit,
            Post.posts_category_id == category_id,
            includes=CARD_INCLUDES,
            schema=PostListOut,
        )

    def list_promoted(self, params: ListParams) -> PageResult:
        return self._page(params, Post.promoted.is_(True), includes=TREND_INCLUDES, schema=PostListOut)

    def list_related(self, category_id: Optional[int], params: ListParams) -> PageResult:
        # 没有分类的帖子彼此视为相关（posts_category_id IS NULL）
        return self._page(params, Post.posts_category_id == category_id, includes=TREND_INCLUDES, schema=PostListOut)

    def list_vip(self, limit: int) -> List[PostListOut]:
        return self._latest(limit, Post.vip.is_(True), includes=CARD_INCLUDES, schema=PostListOut)

    def search_by_title(self, title: str, params: ListParams) -> PageResult:
        return self._page(
            params,
            Post.title.ilike(like_pattern(title), escape="\\"),
            includes=SEARCH_INCLUDES,
            schema=PostListOut,
        )

    def list_by_user(self, user_id: int, params: ListParams) -> PageResult:
        return self._page(params, Post.user_id == user_id, includes=SEARCH_INCLUDES, schema=PostListOut)
