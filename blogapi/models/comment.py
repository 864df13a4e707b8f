from sqlalchemy import Column, Integer, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from blogapi.core.time import now_utc

class Comment(Base):
    """ 评论表（一级评论）

        CREATE TABLE IF NOT EXISTS comments (
            id INT AUTO_INCREMENT PRIMARY KEY,
            post_id INT NOT NULL,                -- FK -> posts.id
            user_id INT NOT NULL,                -- FK -> users.id
            content TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
    """

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    post = relationship("Post", back_populates="comments")
    user = relationship("User", back_populates="comments")
    # 楼中楼
    child_comments = relationship("ChildComment", back_populates="comment", cascade="all, delete-orphan")
    reports = relationship("ReportComment", back_populates="comment", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_comments_post_id", "post_id"),
        Index("idx_comments_user_id", "user_id"),
    )
