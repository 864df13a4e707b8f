from sqlalchemy import Column, Integer, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from blogapi.core.time import now_utc

class LikePost(Base):
    """ 帖子点赞表

        CREATE TABLE IF NOT EXISTS like_posts (
            id INT AUTO_INCREMENT PRIMARY KEY,
            post_id INT NOT NULL,                -- FK -> posts.id
            user_id INT NOT NULL,                -- FK -> users.id
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- (post_id, user_id) 暂不加唯一约束，是否去重待产品确认
        CREATE INDEX idx_like_posts_post_user ON like_posts (post_id, user_id);
    """

    __tablename__ = "like_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    post = relationship("Post", back_populates="likes")
    user = relationship("User", back_populates="likes")

    __table_args__ = (
        Index("idx_like_posts_post_user", "post_id", "user_id"),
    )
