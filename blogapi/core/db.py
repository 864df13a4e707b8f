from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """
    仓库层写操作统一使用的事务上下文：
    - 正常退出时 commit
    - 出现任何异常时 rollback 并继续向上抛出
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
