from typing import Optional, List
from datetime import datetime

from pydantic import EmailStr, Field

from blogapi.models.user import UserRole
from blogapi.schemas.base import CamelModel, CamelInput


class UserCreate(CamelInput):
    """
    创建用户（账号密码注册）
    - 不接受 role，注册用户一律是普通用户（列默认值）
    """
    username: str = Field(min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    password: str = Field(min_length=1)


class UserUpdate(CamelInput):
    """
    更新用户资料（整体替换）：
    - 所有字段都必须传，可空字段需要显式传 null 才会被清空
    - 密码有单独接口，这里不允许修改
    """
    username: str = Field(min_length=1, max_length=100)
    email: Optional[EmailStr]
    image: Optional[str]
    bio: Optional[str]


class UserPasswordUpdate(CamelInput):
    """
    修改密码（单独接口，避免与普通更新混用）
    """
    old_password: str
    new_password: str = Field(min_length=1)


class UserOut(CamelModel):
    """
    对外返回的用户信息（单个资源视角），不包含 password
    """
    id: int
    username: str
    email: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole = UserRole.NORMAL_USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserBriefOut(CamelModel):
    """
    列表场景下嵌套的用户信息：
    - 在 UserOut 的基础上再去掉 username、role、createdAt、updatedAt
    """
    id: int
    email: Optional[str] = None
    image: Optional[str] = None
    bio: Optional[str] = None


class BatchUsersOut(CamelModel):
    data: List[UserOut]
    total_pages: int
    current_page: int
    count: Optional[int] = None
