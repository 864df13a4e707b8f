from typing import Dict

from blogapi.schemas.user import UserCreate, UserUpdate, UserPasswordUpdate, UserOut, BatchUsersOut
from blogapi.storage.user.user_interface import IUserRepository
from blogapi.storage.query_builder import ListParams

from blogapi.core.security import hash_password, verify_password
from blogapi.core.logx import logger
from blogapi.core.exceptions import UserNotFound, PasswordMismatchError


def create_user(user_repo: IUserRepository, data: UserCreate, to_dict: bool = True) -> Dict | UserOut:
    """
    创建用户：
    - 明文密码只在这里出现一次，入库的是 Argon2 哈希
    """
    user = user_repo.create(data, password=hash_password(data.password))
    logger.info(f"Created user id={user.id} username={user.username!r}")
    return user.dump() if to_dict else user


def get_user(user_repo: IUserRepository, user_id: int, to_dict: bool = True) -> Dict | UserOut:
    user = user_repo.get_by_id(user_id)
    if not user:
        raise UserNotFound(user_id)
    return user.dump() if to_dict else user


def list_users(user_repo: IUserRepository, params: ListParams, to_dict: bool = True) -> Dict | BatchUsersOut:
    page = user_repo.list_users(params)
    result = BatchUsersOut(
        data=page.rows,
        total_pages=page.total_pages,
        current_page=page.page,
        count=page.count,
    )
    return result.dump() if to_dict else result


def update_user(user_repo: IUserRepository, user_id: int, data: UserUpdate, to_dict: bool = True) -> Dict | UserOut:
    """
    更新资料（整体替换 username / email / image / bio）
    """
    user = user_repo.update(user_id, data)
    if not user:
        logger.warning(f"Update user failed, user id={user_id} not found")
        raise UserNotFound(user_id)
    logger.info(f"Updated user id={user_id}")
    return user.dump() if to_dict else user


def change_password(user_repo: IUserRepository, user_id: int, data: UserPasswordUpdate) -> None:
    """
    修改密码：
    1. 用户不存在 -> UserNotFound
    2. 旧密码不匹配 -> PasswordMismatchError
    3. 写入新密码哈希
    """
    current_hash = user_repo.get_password_hash(user_id)
    if current_hash is None:
        raise UserNotFound(user_id)

    if not verify_password(data.old_password, current_hash):
        raise PasswordMismatchError()

    user_repo.set_password_hash(user_id, hash_password(data.new_password))
    logger.info(f"Changed password for user id={user_id}")


def delete_user(user_repo: IUserRepository, user_id: int) -> None:
    """
    物理删除用户，名下帖子、评论、点赞、举报一并删除
    """
    if not user_repo.delete(user_id):
        raise UserNotFound(user_id)
    logger.info(f"Deleted user id={user_id}")
