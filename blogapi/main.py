from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from blogapi.core.biz_response import BizResponse
from blogapi.core.config import Settings, get_settings
from blogapi.core.logx import logger, setup_logging
from blogapi.storage.database import Database
from blogapi.routers.posts import posts_router
from blogapi.routers.post_categories import categories_router
from blogapi.routers.users import users_router
from blogapi.routers.comments import comments_router
from blogapi.routers.child_comments import child_comments_router
from blogapi.routers.like_posts import like_posts_router
from blogapi.routers.reports import (
    report_posts_router,
    report_comments_router,
    report_child_comments_router,
)
from blogapi.routers.static_pages import static_pages_router

API_PREFIX = "/api"

ROUTERS = (
    posts_router,
    categories_router,
    users_router,
    comments_router,
    child_comments_router,
    like_posts_router,
    report_posts_router,
    report_comments_router,
    report_child_comments_router,
    static_pages_router,
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    应用工厂：
    - 数据库句柄在启动时创建并挂到 app.state.database，关闭时释放
    - 测试可以传入自己的 Settings（例如内存 SQLite）
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        database = Database(settings.database_url, echo=settings.sql_echo)
        database.connect()
        if settings.create_tables:
            database.create_all()
        app.state.database = database
        logger.info(f"{settings.app_name} started")
        try:
            yield
        finally:
            database.close()
            logger.info(f"{settings.app_name} stopped")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    # 注册路由
    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # 请求参数 / 请求体校验失败也使用统一的错误结构
        message = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return BizResponse(msg=message, status_code=422)

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.app_name}"}

    return app
