"""
구매 기록 모델

UserItem 은 회원의 상품 구매를 기록하는 조인 테이블이다.
구매 시 한 번 생성되며 이후 수정되지 않는다.
"""

from sqlalchemy import BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.schema import UniqueConstraint

from imageshop.models.base import BaseModel, BigIntPK


class UserItem(BaseModel):
    __tablename__ = "user_items"
    __table_args__ = (
        UniqueConstraint("user_no", "item_id", name="uq_user_items_member_item"),
    )

    user_item_no: Mapped[int] = mapped_column(
        BigIntPK, primary_key=True, autoincrement=True
    )
    user_no: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("members.user_no", ondelete="CASCADE"), nullable=False
    )
    item_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("items.item_id"), nullable=False
    )
