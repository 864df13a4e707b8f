from typing import Optional

from sqlalchemy.orm import Session

from blogapi.core.db import transaction
from blogapi.models.user import User
from blogapi.schemas.user import UserOut
from blogapi.storage.base_repository import SQLAlchemyRepository
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams, PageResult, sort_allow_list


class SQLAlchemyUserRepository(SQLAlchemyRepository, IUserRepository):
    """
    使用 SQLAlchemy 实现的用户仓库
    """

    model = User
    out_schema = UserOut
    sortable = sort_allow_list(User.id, User.username, User.created_at, User.updated_at)

    def __init__(self, db: Session):
        super().__init__(db)

    def list_users(self, params: ListParams) -> PageResult:
        return self._page(params)

    def get_password_hash(self, user_id: int) -> Optional[str]:
        user: Optional[User] = self._get(user_id)
        if not user:
            return None
        return user.password

    def set_password_hash(self, user_id: int, password_hash: str) -> bool:
        user: Optional[User] = self._get(user_id)
        if not user:
            return False

        with transaction(self.db):
            user.password = password_hash

        return True
