from sqlalchemy import Column, Integer, String, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship
from blogapi.models.base import Base
from enum import Enum
from blogapi.core.time import now_utc

# 举报目标类型（也是路由前缀 /api/report-<target>s 的来源）
class ReportTarget(str, Enum):
    POST = "post"
    COMMENT = "comment"
    CHILD_COMMENT = "child-comment"

class ReportPost(Base):
    """ 帖子举报表

        CREATE TABLE IF NOT EXISTS report_posts (
            id INT AUTO_INCREMENT PRIMARY KEY,
            post_id INT NOT NULL,                -- 被举报帖子 (FK -> posts.id)
            user_id INT NOT NULL,                -- 举报人 (FK -> users.id)
            reason VARCHAR(500) NOT NULL,        -- 举报理由
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
    """

    __tablename__ = "report_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    reason = Column(String(500), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    post = relationship("Post", back_populates="reports")
    user = relationship("User", back_populates="post_reports")

    __table_args__ = (Index("idx_report_posts_post_id", "post_id"),)


class ReportComment(Base):
    """ 评论举报表，结构同 report_posts，目标为 comments.id """

    __tablename__ = "report_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    comment_id = Column(Integer, ForeignKey("comments.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    reason = Column(String(500), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    comment = relationship("Comment", back_populates="reports")
    user = relationship("User", back_populates="comment_reports")

    __table_args__ = (Index("idx_report_comments_comment_id", "comment_id"),)


class ReportChildComment(Base):
    """ 子评论举报表，目标为 child_comments.id """

    __tablename__ = "report_child_comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    child_comment_id = Column(Integer, ForeignKey("child_comments.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    reason = Column(String(500), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)

    child_comment = relationship("ChildComment", back_populates="reports")
    user = relationship("User", back_populates="child_comment_reports")

    __table_args__ = (Index("idx_report_child_comments_child_comment_id", "child_comment_id"),)
