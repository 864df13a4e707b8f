# blogapi/storage/post/post_interface.py

from typing import List, Optional, Protocol

from blogapi.schemas.post import PostCreate, PostUpdate, PostOut, PostDetailOut, PostListOut
from blogapi.storage.query_builder import ListParams, PageResult


class IPostRepository(Protocol):
    """
    帖子仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    def get_by_id(self, post_id: int) -> Optional[PostOut]:
        ...

    def get_by_slug(self, slug: str) -> Optional[PostDetailOut]:
        """
        通过 slug 获取帖子详情：分类、评论、作者（不含密码）、点赞
        - 不存在返回 None
        """
        ...

    def create(self, data: PostCreate, **extra) -> PostOut:
        """写入请求体字段 + extra（slug、user_id）"""
        ...

    def update(self, post_id: int, data: PostUpdate, **extra) -> Optional[PostOut]:
        """整体替换，帖子不存在返回 None"""
        ...

    def delete(self, post_id: int) -> bool:
        ...

    def list_posts(self, params: ListParams) -> PageResult:
        """全部帖子分页（分类、评论、作者、点赞）"""
        ...

    def list_by_category(self, category_id: int, limit: int) -> List[PostListOut]:
        """某分类下最新的 limit 篇（作者、分类）"""
        ...

    def list_promoted(self, params: ListParams) -> PageResult:
        """promoted = true 的帖子分页（分类、评论、作者）"""
        ...

    def list_related(self, category_id: Optional[int], params: ListParams) -> PageResult:
        """与给定分类相同的帖子分页（分类、评论、作者）"""
        ...

    def list_vip(self, limit: int) -> List[PostListOut]:
        """vip = true 的最新 limit 篇（作者、分类）"""
        ...

    def search_by_title(self, title: str, params: ListParams) -> PageResult:
        """标题不区分大小写子串匹配（分类、作者、点赞）"""
        ...

    def list_by_user(self, user_id: int, params: ListParams) -> PageResult:
        """某作者的帖子分页（分类、作者、点赞）"""
        ...
