from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, func
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()

# PostgreSQL 은 BIGINT, SQLite 는 INTEGER PRIMARY KEY 여야 자동 증가
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


class BaseModel(Base):
    """공통 컬럼 (등록/수정 시각)"""

    __abstract__ = True

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
