"""
코인 이력 모델

충전(ChargeCoin)과 사용(PayCoin) 내역은 모두 불변 기록이다.
회원의 현재 잔액은 members.coin 에 유지되고, 이 테이블들은 감사 추적용이다.
"""

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from imageshop.models.base import BaseModel, BigIntPK


class ChargeCoin(BaseModel):
    """코인 충전 내역"""

    __tablename__ = "charge_coin_history"

    history_no: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_no: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("members.user_no", ondelete="CASCADE"), nullable=False
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)


class PayCoin(BaseModel):
    """코인 사용(구매) 내역"""

    __tablename__ = "pay_coin_history"

    history_no: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    user_no: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("members.user_no", ondelete="CASCADE"), nullable=False
    )
    item_id: Mapped[Optional[int]] = mapped_column(
        BigInteger, ForeignKey("items.item_id"), nullable=True
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
