from sqlalchemy import Column, Integer, String, SmallInteger, TIMESTAMP, Text
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from enum import IntEnum
from blogapi.core.time import now_utc

class UserRole(IntEnum):
    NORMAL_USER = 0 # 普通用户
    ADMIN = 1       # 管理员

class User(Base):
    """ 用户模型，对应数据库中的 users 表。

        CREATE TABLE IF NOT EXISTS users (
            id INT AUTO_INCREMENT PRIMARY KEY,        -- 主键 ID
            username VARCHAR(100) NOT NULL,           -- 用户名
            email VARCHAR(100) UNIQUE,                -- 邮箱（可为空）
            password VARCHAR(255) NOT NULL,           -- 密码哈希（只写，永不返回）
            image VARCHAR(255),                       -- 头像 URL
            bio TEXT,                                 -- 用户简介
            role SMALLINT DEFAULT 0,                  -- 用户角色（0: 普通用户，1: 管理员）
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False)  # 用户名
    email = Column(String(100), unique=True, nullable=True)  # 用户邮箱
    password = Column(String(255), nullable=False)  # 密码哈希
    image = Column(String(255), nullable=True)  # 用户头像
    bio = Column(Text, nullable=True)  # 用户简介
    role = Column(SmallInteger, default=UserRole.NORMAL_USER.value, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    # 用户被物理删除时，其名下的内容一并删除
    posts = relationship("Post", back_populates="user", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")
    child_comments = relationship("ChildComment", back_populates="user", cascade="all, delete-orphan")
    likes = relationship("LikePost", back_populates="user", cascade="all, delete-orphan")
    post_reports = relationship("ReportPost", back_populates="user", cascade="all, delete-orphan")
    comment_reports = relationship("ReportComment", back_populates="user", cascade="all, delete-orphan")
    child_comment_reports = relationship("ReportChildComment", back_populates="user", cascade="all, delete-orphan")
