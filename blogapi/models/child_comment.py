from sqlalchemy import Column, Integer, TIMESTAMP, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from blogapi.core.time import now_utc

class ChildComment(Base):
    """ 子评论表（回复某条一级评论）

        CREATE TABLE IF NOT EXISTS child_comments (
            id INT AUTO_INCREMENT PRIMARY KEY,
            comment_id INT NOT NULL,             -- FK -> comments.id
            user_id INT NOT NULL,                -- FK -> users.id
            content TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
    """

    __tablename__ = "child_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    comment_id = Column(Integer, ForeignKey("comments.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    comment = relationship("Comment", back_populates="child_comments")
    user = relationship("User", back_populates="child_comments")
    reports = relationship("ReportChildComment", back_populates="child_comment", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_child_comments_comment_id", "comment_id"),
    )
