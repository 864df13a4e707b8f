from sqlalchemy import Column, Integer, String, TIMESTAMP
from blogapi.models.base import Base
from blogapi.core.time import now_utc

class StaticPage(Base):
    """ 静态页面访问计数表（关于我们、联系方式等页面）"""

    __tablename__ = "static_pages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)  # 页面标识
    views = Column(Integer, nullable=False, default=0)       # 访问次数
    created_at = Column(TIMESTAMP(timezone=True), default=now_utc)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_utc, onupdate=now_utc)
