from typing import List, Protocol

from blogapi.schemas.like_post import LikePostOut, LikeWithUserOut


class ILikePostRepository(Protocol):
    """
    帖子点赞仓库接口
    - (post_id, user_id) 不做唯一约束，重复点赞会产生多条记录
    """

    def like(self, post_id: int, user_id: int) -> LikePostOut:
        ...

    def list_by_post(self, post_id: int) -> List[LikeWithUserOut]:
        ...

    def count_by_post(self, post_id: int) -> int:
        ...

    def has_liked(self, post_id: int, user_id: int) -> bool:
        ...

    def unlike(self, post_id: int, user_id: int) -> int:
        """删除该用户对该帖子的点赞，返回删除条数"""
        ...
