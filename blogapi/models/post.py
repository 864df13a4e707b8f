from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from blogapi.core.time import now_utc

class Post(Base):
    """ 帖子表

        CREATE TABLE IF NOT EXISTS posts (
            id INT AUTO_INCREMENT PRIMARY KEY,
            title VARCHAR(255) NOT NULL,                  -- 标题
            slug VARCHAR(255) NOT NULL,                   -- 由标题生成，每次创建 / 更新都会重算
            description TEXT,                             -- 摘要
            content TEXT NOT NULL,                        -- 正文
            image VARCHAR(255),                           -- 封面图
            promoted BOOLEAN DEFAULT FALSE,               -- 是否推荐（热门）
            vip BOOLEAN DEFAULT FALSE,                    -- 是否 VIP
            read_time INT,                                -- 预计阅读时长（分钟）
            posts_category_id INT,                        -- 分类 (FK -> post_categories.id)
            user_id INT NOT NULL,                         -- 作者 (FK -> users.id)
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,

            FOREIGN KEY (posts_category_id) REFERENCES post_categories(id),
            FOREIGN KEY (user_id) REFERENCES users(id)
        );

        -- slug 不做唯一约束：同名标题会得到相同 slug
        CREATE INDEX idx_posts_slug ON posts (slug);
        CREATE INDEX idx_posts_user_id ON posts (user_id);
        CREATE INDEX idx_posts_category_id ON posts (posts_category_id);
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    image = Column(String(255), nullable=True)
    promoted = Column(Boolean, default=False, nullable=False)
    vip = Column(Boolean, default=False, nullable=False)
    read_time = Column(Integer, nullable=True)
    posts_category_id = Column(Integer, ForeignKey("post_categories.id"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    # 反向引用：作者 / 分类
    user = relationship("User", back_populates="posts")
    category = relationship("PostCategory", back_populates="posts")
    # 帖子物理删除时，评论、点赞、举报一并删除
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")
    likes = relationship("LikePost", back_populates="post", cascade="all, delete-orphan")
    reports = relationship("ReportPost", back_populates="post", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_posts_slug", "slug"),
        Index("idx_posts_user_id", "user_id"),
        Index("idx_posts_category_id", "posts_category_id"),
    )
