from typing import Optional, Protocol

from blogapi.schemas.user import UserCreate, UserUpdate, UserOut
from blogapi.storage.query_builder import ListParams, PageResult


class IUserRepository(Protocol):
    """
    用户仓库接口：
    - 所有返回值都不含 password
    - 密码哈希只能通过 get_password_hash 读取，用于校验
    """

    def get_by_id(self, user_id: int) -> Optional[UserOut]:
        ...

    def list_users(self, params: ListParams) -> PageResult:
        ...

    def create(self, data: UserCreate, **extra) -> UserOut:
        """extra 中必须带 password（已哈希）"""
        ...

    def update(self, user_id: int, data: UserUpdate) -> Optional[UserOut]:
        ...

    def get_password_hash(self, user_id: int) -> Optional[str]:
        ...

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        ...

    def delete(self, user_id: int) -> bool:
        ...
