import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from imageshop.database.connection import SessionLocal

logger = logging.getLogger(__name__)


def get_db() -> Iterator[Session]:
    """요청 단위 세션 - 커밋은 서비스가 직접 수행"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        # 서비스가 커밋하지 못한 변경분 정리
        if db.in_transaction():
            logger.warning("Rolling back uncommitted request transaction")
            db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """스크립트용 세션 - 블록이 끝나면 커밋, 예외 시 롤백"""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
