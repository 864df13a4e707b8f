from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置，全部来自环境变量（或项目根目录的 .env 文件）：
    - DATABASE_URL: 数据库连接串，默认本地 MySQL（pymysql 驱动）
    - PORT / HOST: 服务监听地址
    - SQL_ECHO: 是否打印 SQL
    - LOG_LEVEL: 日志级别
    """
    app_name: str = "Blog Platform API"
    database_url: str = "mysql+pymysql://root:@127.0.0.1:3306/blog_db?charset=utf8mb4"
    host: str = "0.0.0.0"
    port: int = 8000
    sql_echo: bool = False
    log_level: str = "INFO"
    # 启动时是否自动建表（生产环境建议交给迁移工具）
    create_tables: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
