from typing import Iterator, Optional

from fastapi import Depends, Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from blogapi.core.logx import logger
from blogapi.models import Base
from blogapi.models.report import ReportTarget
from blogapi.storage.user.SQLAlchemyUserRepository import SQLAlchemyUserRepository
from blogapi.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from blogapi.storage.post_category.SQLAlchemyPostCategoryRepository import SQLAlchemyPostCategoryRepository
from blogapi.storage.comment.SQLAlchemyCommentRepository import SQLAlchemyCommentRepository
from blogapi.storage.child_comment.SQLAlchemyChildCommentRepository import SQLAlchemyChildCommentRepository
from blogapi.storage.like_post.SQLAlchemyLikePostRepository import SQLAlchemyLikePostRepository
from blogapi.storage.report.SQLAlchemyReportRepository import SQLAlchemyReportRepository
from blogapi.storage.static_page.SQLAlchemyStaticPageRepository import SQLAlchemyStaticPageRepository


class Database:
    """
    数据库句柄：
    - 由应用工厂显式创建，启动时 connect()，关闭时 close()
    - 不使用模块级全局 engine，测试可以各自持有独立的库
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> None:
        kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # 内存库只存在于单个连接里，所有会话必须共用同一个连接
            if ":memory:" in self.url or self.url.rstrip("/") == "sqlite:":
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False)
        logger.info(f"Database connected: {self.engine.url.render_as_string(hide_password=True)}")

    def create_all(self) -> None:
        """建表（已存在的表不会被修改）"""
        Base.metadata.create_all(self._require_engine())

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connection pool disposed")
        self.engine = None
        self._session_factory = None

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("database is not connected, call connect() first")
        return self._session_factory()

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("database is not connected, call connect() first")
        return self.engine


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()

# 未来可以根据配置切换不同的实现
def get_user_repo(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(db)
def get_post_repo(db: Session = Depends(get_db)) -> SQLAlchemyPostRepository:
    return SQLAlchemyPostRepository(db)
def get_category_repo(db: Session = Depends(get_db)) -> SQLAlchemyPostCategoryRepository:
    return SQLAlchemyPostCategoryRepository(db)
def get_comment_repo(db: Session = Depends(get_db)) -> SQLAlchemyCommentRepository:
    return SQLAlchemyCommentRepository(db)
def get_child_comment_repo(db: Session = Depends(get_db)) -> SQLAlchemyChildCommentRepository:
    return SQLAlchemyChildCommentRepository(db)
def get_like_post_repo(db: Session = Depends(get_db)) -> SQLAlchemyLikePostRepository:
    return SQLAlchemyLikePostRepository(db)
def get_post_report_repo(db: Session = Depends(get_db)) -> SQLAlchemyReportRepository:
    return SQLAlchemyReportRepository(db, ReportTarget.POST)
def get_comment_report_repo(db: Session = Depends(get_db)) -> SQLAlchemyReportRepository:
    return SQLAlchemyReportRepository(db, ReportTarget.COMMENT)
def get_child_comment_report_repo(db: Session = Depends(get_db)) -> SQLAlchemyReportRepository:
    return SQLAlchemyReportRepository(db, ReportTarget.CHILD_COMMENT)
def get_static_page_repo(db: Session = Depends(get_db)) -> SQLAlchemyStaticPageRepository:
    return SQLAlchemyStaticPageRepository(db)
