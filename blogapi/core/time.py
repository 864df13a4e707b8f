from datetime import datetime, timezone

def now_utc():
    """返回 UTC 当前时间（数据库统一存 UTC）"""
    return datetime.now(timezone.utc)
